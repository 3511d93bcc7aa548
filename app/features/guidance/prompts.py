"""Prompt construction for biblical guidance."""

from typing import Optional

MAX_JOURNAL_CONTEXT_CHARS = 1500


def build_context(mood: Optional[str], recent_journal_content: Optional[str]) -> str:
    """Summarize the optional mood and journal reflection into one line."""
    context = ""
    if mood:
        context += f"The person is feeling {mood}. "
    if recent_journal_content:
        context += f'Recent reflection: "{recent_journal_content[:MAX_JOURNAL_CONTEXT_CHARS]}" '
    return context.strip()


def build_guidance_prompt(
    situation: str,
    mood: Optional[str] = None,
    recent_journal_content: Optional[str] = None,
) -> str:
    context = build_context(mood, recent_journal_content)
    context_line = f"Context: {context}\n" if context else ""

    return f"""You are a compassionate Christian counselor offering biblical guidance.

User's situation: "{situation}"
{context_line}
Provide:
1. 2-3 Bible verses that speak directly to this situation (NIV or ESV wording)
2. For each verse, a short explanation of why it applies to this person
3. A short, heartfelt prayer for their situation
4. One practical action step rooted in scripture they can take today
5. A brief word of encouragement

Respond ONLY with valid JSON in this exact structure:
{{
  "verses": [
    {{
      "reference": "Book Chapter:Verse",
      "text": "The verse text",
      "application": "2-3 sentences on why this verse applies to their situation"
    }}
  ],
  "prayer": "A personal prayer addressing their situation",
  "actionStep": "One practical thing they can do today",
  "encouragement": "A brief, hopeful message"
}}

Be compassionate, specific to their situation, and grounded in scripture."""
