import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

_SUPABASE_URL = os.getenv('SUPABASE_URL')
_SUPABASE_KEY = os.getenv('SUPABASE_KEY') or os.getenv('SUPABASE_ANON_KEY')

_ANTHROPIC_API_KEY = os.getenv('ANTHROPIC_API_KEY') or os.getenv('CLAUDE_API_KEY')
_OPENAI_API_KEY = os.getenv('OPENAI_API_KEY')

_CLAUDE_GUIDANCE_MODEL = os.getenv('CLAUDE_GUIDANCE_MODEL', 'claude-3-5-haiku-20241022')

_CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv('CORS_ORIGINS', '*').split(',')
    if origin.strip()
]


class Config:
    """Central configuration for the devotional journal service."""

    SERVICE_NAME = os.getenv('SERVICE_NAME', 'living-scrolls-service')
    ENVIRONMENT = os.getenv('ENVIRONMENT', 'production')

    SUPABASE_URL = _SUPABASE_URL
    SUPABASE_KEY = _SUPABASE_KEY

    ANTHROPIC_API_KEY = _ANTHROPIC_API_KEY
    CLAUDE_GUIDANCE_MODEL = _CLAUDE_GUIDANCE_MODEL
    GUIDANCE_MAX_TOKENS = int(os.getenv('GUIDANCE_MAX_TOKENS', '1500'))
    GUIDANCE_TEMPERATURE = float(os.getenv('GUIDANCE_TEMPERATURE', '0.7'))
    GUIDANCE_TIMEOUT_SECONDS = float(os.getenv('GUIDANCE_TIMEOUT_SECONDS', '60'))

    OPENAI_API_KEY = _OPENAI_API_KEY
    WHISPER_MODEL = os.getenv('WHISPER_MODEL', 'whisper-1')
    TRANSCRIPTION_LANGUAGE = os.getenv('TRANSCRIPTION_LANGUAGE', 'en')
    TRANSCRIPTION_TIMEOUT_SECONDS = float(os.getenv('TRANSCRIPTION_TIMEOUT_SECONDS', '120'))

    CORS_ORIGINS = _CORS_ORIGINS
    DEFAULT_TIMEZONE = os.getenv('DEFAULT_TIMEZONE', 'UTC')
    COMMUNITY_FEED_LIMIT = int(os.getenv('COMMUNITY_FEED_LIMIT', '50'))


settings = Config()
