"""
Hygiène des entrées — appliquée à chaque message avant analyse.
"""

import re
import uuid
from typing import Any, Optional

from sokoconnect.core.settings import settings

# Caractères de contrôle, hors tabulation et saut de ligne
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f]")


def generate_request_id() -> str:
    """Identifiant opaque pour corréler les logs d'une même requête."""
    return uuid.uuid4().hex


def sanitize_user_input(text: Any, max_length: Optional[int] = None) -> str:
    """
    Texte tronqué à `max_length` (MAX_MESSAGE_LENGTH par défaut), sans
    caractères de contrôle, sans espaces en bordure. Une entrée qui n'est
    pas une chaîne donne "".
    """
    if not isinstance(text, str):
        return ""
    limit = settings.MAX_MESSAGE_LENGTH if max_length is None else max_length
    return _CONTROL_CHARS.sub("", text[:limit]).strip()


__all__ = ["generate_request_id", "sanitize_user_input"]
