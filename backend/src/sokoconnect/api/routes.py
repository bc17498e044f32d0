"""
Routes API — Endpoints de l'API SokoConnect.

Le moteur est instancié une seule fois (lazy singleton) et injecté via
FastAPI Depends(). Il est synchrone et sans I/O : il tourne directement
dans le handler de requête.
"""

import logging
import threading
from typing import Optional

from fastapi import APIRouter, Depends

from sokoconnect.core.security import generate_request_id
from sokoconnect.core.settings import settings
from sokoconnect.orchestrator.advisor import AdvisorEngine
from sokoconnect.tools.dataset import load_demo_snapshot
from .schemas import AskRequest, AskResponse, HealthResponse, RootResponse

logger = logging.getLogger("SokoConnect.API")

router = APIRouter()


# ── Dependency : Engine (lazy singleton, thread-safe) ──

_engine_instance: Optional[AdvisorEngine] = None
_engine_lock = threading.Lock()


def get_engine() -> AdvisorEngine:
    """Instancié une seule fois, au premier appel."""
    global _engine_instance
    if _engine_instance is not None:
        return _engine_instance

    with _engine_lock:
        if _engine_instance is None:
            _engine_instance = AdvisorEngine()
            logger.info("Advisor engine loaded.")
    return _engine_instance


# ── Routes ──────────────────────────────────────────────────

@router.post("/api/v1/advisor/ask", response_model=AskResponse)
def ask_advisor(req: AskRequest, engine: AdvisorEngine = Depends(get_engine)):
    """
    Endpoint principal — pose une question au moteur conseil.

    Sans `snapshot`, la réponse est calculée sur le jeu de démonstration.
    """
    request_id = generate_request_id()
    snapshot = req.snapshot if req.snapshot is not None else load_demo_snapshot()
    logger.info(
        "[%s] Request received: %d chars, context=%s, snapshot=%s",
        request_id, len(req.message), req.context is not None, snapshot.counts(),
    )

    reply = engine.answer(req.message, snapshot, req.context)

    logger.info("[%s] Response generated (intent=%s)", request_id,
                reply.intent.value if reply.intent else "none")
    return AskResponse(
        response=reply.text,
        intent=reply.intent.value if reply.intent else None,
    )


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Health check (le moteur n'a aucune dépendance externe)."""
    return HealthResponse(version=settings.APP_VERSION)


@router.get("/", response_model=RootResponse)
def root():
    """Root endpoint."""
    return RootResponse(name=settings.APP_NAME, version=settings.APP_VERSION)
