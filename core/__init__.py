"""Password Generator Core Package.

Provides the stateless generation core and its supporting pieces:
- config: Centralized configuration constants
- charsets: Character classes and charset construction
- generator: Random password generation
- storage: Log file I/O
- events: Structured event logging
"""

# Configuration constants
from core.config import (
    LOG_DIR,
    EVENT_LOG_FILE,
    APP_LOG_FILE,
    MIN_PASSWORD_LENGTH,
    MAX_PASSWORD_LENGTH,
    DEFAULT_PASSWORD_LENGTH,
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
)

# Character classes
from core.charsets import (
    CharClass,
    ALPHABETS,
    CLASS_ORDER,
    ALL_CLASSES,
    build_charset,
    parse_classes,
    describe_classes,
)

# Generation
from core.generator import GenerationConfig, generate

# Event logging
from core.events import (
    configure_logging,
    shutdown_logging,
    log_event,
    get_events,
    count_events_by_type,
)

# Storage utilities
from core.storage import StorageError, ensure_directories

__all__ = [
    # Config
    "LOG_DIR",
    "EVENT_LOG_FILE",
    "APP_LOG_FILE",
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_LENGTH",
    "DEFAULT_PASSWORD_LENGTH",
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    # Charsets
    "CharClass",
    "ALPHABETS",
    "CLASS_ORDER",
    "ALL_CLASSES",
    "build_charset",
    "parse_classes",
    "describe_classes",
    # Generation
    "GenerationConfig",
    "generate",
    # Events
    "configure_logging",
    "shutdown_logging",
    "log_event",
    "get_events",
    "count_events_by_type",
    # Storage
    "StorageError",
    "ensure_directories",
]
