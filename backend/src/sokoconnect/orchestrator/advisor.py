"""
Advisor Engine — Point d'entrée du moteur conversationnel.

Pipeline d'un tour :
  1. normalisation (sanitize + minuscules)
  2. réponse en langue locale (optionnelle)
  3. extraction des slots + classification
  4. fusion avec le contexte appelant
  5. dispatch vers le handler de l'intention

Toute exception levée pendant 2-5 est journalisée puis remplacée par
APOLOGY_MESSAGE : l'appelant reçoit toujours une chaîne non vide.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from sokoconnect.core.settings import settings
from sokoconnect.models import DomainSnapshot
from sokoconnect.tools.dataset import load_demo_snapshot
from sokoconnect.tools.shared_text import normalize_message
from .context import merge_context, scope_snapshot
from .entities import EntityExtractor
from .handlers import HANDLERS, Handler, general_handler
from .intention import IntentClassifier
from .language import language_reply
from .state import AdvisorContext, ClassifiedIntent, IntentTag

logger = logging.getLogger("AdvisorEngine")

APOLOGY_MESSAGE = (
    "I apologize, but I encountered an unexpected error. Could you please rephrase your "
    "question or try asking about a different topic?"
)


@dataclass(frozen=True)
class AdvisorReply:
    text: str
    intent: Optional[IntentTag] = None


ContextInput = Union[AdvisorContext, Mapping[str, Any], None]
SnapshotInput = Union[DomainSnapshot, Mapping[str, Any], None]


class AdvisorEngine:
    def __init__(
        self,
        extractor: Optional[EntityExtractor] = None,
        classifier: Optional[IntentClassifier] = None,
        handlers: Optional[Mapping[IntentTag, Handler]] = None,
        multilingual: Optional[bool] = None,
    ):
        self.extractor = extractor or EntityExtractor()
        self.classifier = classifier or IntentClassifier()
        self.handlers = dict(handlers) if handlers is not None else dict(HANDLERS)
        self.multilingual = settings.MULTILINGUAL_REPLIES if multilingual is None else multilingual

    # ------------------------------------------------------------------ #
    # Étapes
    # ------------------------------------------------------------------ #

    @staticmethod
    def _coerce_snapshot(snapshot: SnapshotInput) -> DomainSnapshot:
        """Un payload JSON (dict) est validé ; None donne un snapshot vide."""
        if snapshot is None:
            return DomainSnapshot()
        if isinstance(snapshot, DomainSnapshot):
            return snapshot
        return DomainSnapshot.from_payload(snapshot)

    @staticmethod
    def _coerce_context(context: ContextInput) -> Optional[AdvisorContext]:
        if context is None or isinstance(context, AdvisorContext):
            return context
        return AdvisorContext.model_validate(context)

    def classify(self, message: Any, context: ContextInput = None) -> ClassifiedIntent:
        """Normalise, extrait, classe puis fusionne avec le contexte."""
        normalized = normalize_message(message)
        slots = merge_context(self.extractor.extract(normalized), self._coerce_context(context))
        return self.classifier.classify(normalized, slots)

    def answer(
        self,
        message: Any,
        snapshot: SnapshotInput = None,
        context: ContextInput = None,
    ) -> AdvisorReply:
        try:
            if self.multilingual and isinstance(message, str):
                local = language_reply(normalize_message(message))
                if local:
                    return AdvisorReply(text=local)

            advisor_context = self._coerce_context(context)
            intent = self.classify(message, advisor_context)
            scoped = scope_snapshot(self._coerce_snapshot(snapshot), advisor_context)
            handler = self.handlers.get(intent.tag, general_handler)
            text = handler(intent.slots, scoped)
        except Exception:
            logger.exception("Échec de génération de réponse pour: %r", message)
            return AdvisorReply(text=APOLOGY_MESSAGE)

        if not text:
            logger.warning("Réponse vide pour l'intention '%s'", intent.tag.value)
            return AdvisorReply(text=APOLOGY_MESSAGE, intent=intent.tag)

        logger.info("Intent '%s' | slots=%s", intent.tag.value, intent.slots.as_dict())
        return AdvisorReply(text=text, intent=intent.tag)

    def respond(
        self,
        message: Any,
        snapshot: SnapshotInput = None,
        context: ContextInput = None,
    ) -> str:
        return self.answer(message, snapshot, context).text


def generate_response(
    message: Any,
    snapshot: SnapshotInput = None,
    context: ContextInput = None,
) -> str:
    """Raccourci : moteur par défaut, jeu de démo si aucun snapshot fourni."""
    if snapshot is None:
        snapshot = load_demo_snapshot()
    return AdvisorEngine().respond(message, snapshot, context)
