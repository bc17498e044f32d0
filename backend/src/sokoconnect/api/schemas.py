"""
Schémas Pydantic - Modèles Request/Response pour l'API SokoConnect
"""

from pydantic import BaseModel, Field
from typing import Optional

from sokoconnect.models import DomainSnapshot
from sokoconnect.orchestrator.state import AdvisorContext


# ============================================
# REQUEST MODELS
# ============================================

class AskRequest(BaseModel):
    """Question posée à l'assistant, avec contexte et données optionnels."""
    message: str = Field(..., max_length=10_000)
    context: Optional[AdvisorContext] = None
    snapshot: Optional[DomainSnapshot] = None  # None -> jeu de démo


# ============================================
# RESPONSE MODELS
# ============================================

class AskResponse(BaseModel):
    """Réponse standard en cas de succès."""
    status: str = "success"
    response: str
    intent: Optional[str] = None


class HealthResponse(BaseModel):
    """Réponse du health check."""
    status: str = "active"
    component: str = "SokoConnect Advisor"
    version: str = "1.0.0"


class RootResponse(BaseModel):
    """Réponse du endpoint racine."""
    name: str = "SokoConnect Advisor"
    version: str = "1.0.0"
    status: str = "running"
    docs: str = "/docs"
