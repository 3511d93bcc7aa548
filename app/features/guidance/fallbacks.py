"""
Fixed guidance payloads used when Claude cannot provide one.

Callers get a fresh copy each time so a mutated response never leaks into
the next request.
"""

from app.features.guidance.models import Guidance, Verse

_PARSE_FAILURE_GUIDANCE = Guidance(
    verses=[
        Verse(
            reference="Philippians 4:6-7",
            text=(
                "Do not be anxious about anything, but in every situation, by prayer and "
                "petition, with thanksgiving, present your requests to God."
            ),
            application="God invites you to bring your specific concerns to Him right now.",
        ),
    ],
    prayer="Lord, please provide wisdom and peace in this situation. Amen.",
    action_step="Take 5 minutes to pray and cast your cares on God.",
    encouragement="God is with you in this. You are not alone.",
)

_CALL_FAILURE_GUIDANCE = Guidance(
    verses=[
        Verse(
            reference="Proverbs 3:5-6",
            text=(
                "Trust in the Lord with all your heart and lean not on your own understanding; "
                "in all your ways submit to him, and he will make your paths straight."
            ),
            application="Even when things are unclear, God promises to guide you as you trust Him.",
        ),
        Verse(
            reference="Philippians 4:19",
            text="And my God will meet all your needs according to the riches of his glory in Christ Jesus.",
            application="God knows your needs and will provide in His perfect timing.",
        ),
    ],
    prayer="Lord, grant wisdom and peace in this challenging time. Guide each step with Your love. Amen.",
    action_step="Spend 10 minutes in quiet prayer, sharing your heart with God.",
    encouragement="God sees you, loves you, and is working all things for your good.",
)


def parse_failure_guidance() -> Guidance:
    """Returned when Claude answered but no guidance object could be parsed."""
    return _PARSE_FAILURE_GUIDANCE.model_copy(deep=True)


def call_failure_guidance() -> Guidance:
    """Returned when the Claude call itself failed."""
    return _CALL_FAILURE_GUIDANCE.model_copy(deep=True)
