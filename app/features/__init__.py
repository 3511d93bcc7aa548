"""
Features Module - Self-contained feature units.

- database: Supabase repositories
- journaling: entries, prayers, stores and streaks
- guidance: AI biblical guidance with fallback payloads
- transcription: voice notes to text
- community: sharing to the community feed
"""
