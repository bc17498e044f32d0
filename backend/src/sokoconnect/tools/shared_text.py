from typing import Iterable, Optional

from sokoconnect.core.security import sanitize_user_input

# Marge d'erreur affichée selon le niveau de confiance d'une prévision
CONFIDENCE_MARGINS = {
    "high": "±5%",
    "medium": "±10%",
    "low": "±20%",
}
DEFAULT_MARGIN = "±20%"


def normalize_message(message) -> str:
    """Texte nettoyé, en minuscules. Une entrée non textuelle devient ''."""
    return sanitize_user_input(message).lower()


def contains(haystack: Optional[str], needle: Optional[str]) -> bool:
    """Sous-chaîne insensible à la casse."""
    if not haystack or not needle:
        return False
    return needle.lower() in haystack.lower()


def any_contains(values: Iterable[str], needle: Optional[str]) -> bool:
    return any(contains(value, needle) for value in values)


def confidence_margin(level: Optional[str]) -> str:
    if not isinstance(level, str):
        return DEFAULT_MARGIN
    return CONFIDENCE_MARGINS.get(level.strip().lower(), DEFAULT_MARGIN)


def format_quantity(value: float) -> str:
    """50.0 -> '50', 5000 -> '5,000', 45.5 -> '45.5'."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.2f}".rstrip("0").rstrip(".")


def refrigeration_label(has_refrigeration: bool) -> str:
    return "has refrigeration" if has_refrigeration else "no refrigeration"


def place_name(value: str) -> str:
    """'nakuru' -> 'Nakuru' pour l'affichage des lieux extraits du message."""
    return value.title()


def bullet_list(lines: Iterable[str]) -> str:
    return "\n".join(f"- {line}" for line in lines)


def numbered_list(lines: Iterable[str]) -> str:
    return "\n".join(f"{index}. {line}" for index, line in enumerate(lines, 1))
