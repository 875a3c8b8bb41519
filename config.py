"""
Configuration — loads from .env, provides defaults.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# OpenRouter. Read once at import; a missing key fails each AI request with config_error.
OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY", "")
OPENROUTER_MODEL = os.getenv("OPENROUTER_MODEL", "deepseek/deepseek-chat")
OPENROUTER_URL = os.getenv(
    "OPENROUTER_URL", "https://openrouter.ai/api/v1/chat/completions"
)
OPENROUTER_HTTP_REFERER = os.getenv("OPENROUTER_HTTP_REFERER", "")
APP_TITLE = os.getenv("APP_TITLE", "Referent App")

# Timeouts (seconds). An empty COMPLETION_TIMEOUT means no limit.
FETCH_TIMEOUT = float(os.getenv("FETCH_TIMEOUT", "30"))
COMPLETION_TIMEOUT = float(os.getenv("COMPLETION_TIMEOUT") or 0) or None

# Web UI
WEB_HOST = os.getenv("WEB_HOST", "127.0.0.1")
WEB_PORT = int(os.getenv("WEB_PORT", "3000"))
WEB_SECRET = os.getenv("WEB_SECRET", "change-me-in-production")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
