"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Deployment-specific settings can be overridden via environment variables.
"""

import os

# Directories and files
LOG_DIR = os.environ.get("LOG_DIR", "logs")
EVENT_LOG_FILE = os.environ.get("EVENT_LOG_FILE", os.path.join(LOG_DIR, "events.jsonl"))
APP_LOG_FILE = os.environ.get("APP_LOG_FILE", os.path.join(LOG_DIR, "passgen.log"))

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
EVENT_LOG_MAX_BYTES = int(os.environ.get("EVENT_LOG_MAX_BYTES", 5 * 1024 * 1024))  # 5MB default
EVENT_LOG_BACKUP_COUNT = int(os.environ.get("EVENT_LOG_BACKUP_COUNT", 3))

# Password generation
# The generator itself does not clamp; hosts keep user input inside this range.
MIN_PASSWORD_LENGTH = 4
MAX_PASSWORD_LENGTH = 32
DEFAULT_PASSWORD_LENGTH = 12

# Strength labels
SUPPORTED_LOCALES = ("en", "ru")
DEFAULT_LOCALE = os.environ.get("DEFAULT_LOCALE", "en")

# HTTPS enforcement
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"

# Rate limiting (slowapi limit string)
RATE_LIMIT = os.environ.get("RATE_LIMIT", "100/minute")

# CORS
# Comma-separated list of allowed origins for the browser front end
_cors_origins_env = os.environ.get(
    "CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
)
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]
