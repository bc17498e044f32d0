"""
Orchestrator — Moteur conversationnel SokoConnect.

- AdvisorEngine     : Pipeline complet (message → réponse)
- IntentClassifier  : Classification par règles ordonnées
- EntityExtractor   : Repérage des slots par vocabulaire
- HANDLERS          : Registre intention → constructeur de réponse
"""

from .state import IntentTag, Slots, ClassifiedIntent, AdvisorContext
from .entities import EntityExtractor
from .intention import IntentClassifier
from .handlers import HANDLERS, GENERAL_CAPABILITIES
from .advisor import (
    APOLOGY_MESSAGE,
    AdvisorEngine,
    AdvisorReply,
    generate_response,
)

__all__ = [
    "IntentTag", "Slots", "ClassifiedIntent", "AdvisorContext",
    "EntityExtractor",
    "IntentClassifier",
    "HANDLERS", "GENERAL_CAPABILITIES",
    "APOLOGY_MESSAGE", "AdvisorEngine", "AdvisorReply",
    "generate_response",
]
