"""
Logging SokoConnect : stdlib `logging` + Sentry optionnel.

Les modules nomment leur logger d'après leur composant
(`logging.getLogger("MarketTool")`, `"AdvisorEngine"`...) ; ce module
ne fait que configurer les handlers une fois, au démarrage de l'API.
"""

import logging
import sys
from typing import List, Optional

from sokoconnect.core.settings import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Bibliothèques trop bavardes au niveau INFO
QUIET_LOGGERS = ("httpx", "uvicorn.access")

_configured = False


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    resolved = logging.getLevelName(settings.LOG_LEVEL.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_handlers() -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        handlers.append(logging.FileHandler(settings.LOG_FILE, encoding="utf-8"))
    return handlers


def _init_sentry_if_needed(level: int = logging.INFO) -> Optional[object]:
    """
    Active Sentry quand SENTRY_DSN est renseigné : les logs >= `level`
    deviennent des breadcrumbs, les ERROR des événements.
    Retourne le module sentry_sdk, ou None si Sentry reste inactif.
    """
    if not settings.sentry_enabled:
        return None

    import sentry_sdk
    from sentry_sdk.integrations.logging import LoggingIntegration

    try:
        sentry_sdk.init(
            dsn=settings.SENTRY_DSN,
            environment=settings.SENTRY_ENVIRONMENT,
            release=f"{settings.APP_NAME}@{settings.APP_VERSION}",
            integrations=[LoggingIntegration(level=level, event_level=logging.ERROR)],
        )
    except Exception as e:
        logging.getLogger("SokoConnect").warning("Sentry disabled, init failed: %s", e)
        return None

    logging.getLogger("SokoConnect").info("Sentry enabled (%s)", settings.SENTRY_ENVIRONMENT)
    return sentry_sdk


def setup_logging(level: Optional[int] = None) -> None:
    """Idempotent : seul le premier appel configure les handlers."""
    global _configured
    if _configured:
        return

    resolved = _resolve_level(level)
    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=_build_handlers(),
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _init_sentry_if_needed(level=resolved)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["setup_logging", "get_logger"]
