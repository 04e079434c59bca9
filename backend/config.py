import os

class Config:
    # Gemini provider
    GEMINI_API_KEY = os.environ.get('GEMINI_API_KEY', '')
    GEMINI_MODEL = os.environ.get('GEMINI_MODEL') or 'gemini-2.0-flash-exp'
    GEMINI_API_URL = os.environ.get('GEMINI_API_URL') or 'https://generativelanguage.googleapis.com/v1beta'
    # HTTP timeout for provider calls (seconds)
    PROVIDER_TIMEOUT_SEC = int(os.environ.get('PROVIDER_TIMEOUT_SEC', '60'))
    # JSON file holding the leaderboard
    LEADERBOARD_PATH = os.environ.get('LEADERBOARD_PATH') or 'leaderboard.json'
    # Group play size limits
    MIN_GROUP_PLAYERS = int(os.environ.get('MIN_GROUP_PLAYERS', '2'))
    MAX_GROUP_PLAYERS = int(os.environ.get('MAX_GROUP_PLAYERS', '5'))
    # Comma separated list; '*' allows any origin
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
    PORT = int(os.environ.get('PORT', '4000'))
