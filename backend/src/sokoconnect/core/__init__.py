"""
Core Module — Fondations transverses SokoConnect.

- settings  : Configuration centralisée (Pydantic Settings)
- logger    : Logging unifié (stdlib + Sentry optionnel)
- security  : Sanitisation des entrées et request IDs
"""

from .settings import settings
from .logger import setup_logging, get_logger
from .security import generate_request_id, sanitize_user_input

__all__ = [
    "settings",
    "setup_logging", "get_logger",
    "generate_request_id", "sanitize_user_input",
]
