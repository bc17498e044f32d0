import logging
import re
from typing import Callable, Optional, Sequence, Tuple

from .state import ClassifiedIntent, IntentTag, Slots

logger = logging.getLogger("IntentClassifier")

Predicate = Callable[[str], bool]

GREETING_PATTERN = re.compile(
    r"^(hi|hello|hey|greetings|good morning|good afternoon|good evening)\b"
)


def _keywords(*keywords: str) -> Predicate:
    def predicate(message: str) -> bool:
        return any(keyword in message for keyword in keywords)
    return predicate


def _greeting(message: str) -> bool:
    return bool(GREETING_PATTERN.match(message))


def _any_of(*predicates: Predicate) -> Predicate:
    def predicate(message: str) -> bool:
        return any(p(message) for p in predicates)
    return predicate


def _word(pattern: str) -> Predicate:
    compiled = re.compile(rf"\b(?:{pattern})\b")

    def predicate(message: str) -> bool:
        return bool(compiled.search(message))
    return predicate


# ======================================================================
# RÈGLES ORDONNÉES
# ======================================================================
# L'ordre EST le contrat : un message qui satisfait plusieurs règles est
# attribué à la première, jamais à la plus « spécifique ».

INTENT_RULES: Tuple[Tuple[IntentTag, Predicate], ...] = (
    (IntentTag.GREETING, _greeting),
    (IntentTag.THANKS, _keywords("thank you", "thanks", "appreciate", "helpful")),
    (IntentTag.COUNTERFEIT, _keywords("counterfeit", "fake", "substandard", "adulterated", "genuine")),
    (IntentTag.DISEASE, _any_of(
        _word("pests?"),
        _keywords("disease", "blight", "infestation", "armyworm", "wilt", "outbreak"),
    )),
    (IntentTag.POLICY, _keywords("policy", "policies", "subsid", "government program", "implementation gap")),
    (IntentTag.TECHNOLOGY, _keywords("technology", "adoption", "drone", "sensor", "innovation")),
    (IntentTag.INSIGHTS, _keywords("insight", "collective", "sentiment", "farmers saying", "farmer experience")),
    (IntentTag.FORECAST, _keywords("forecast", "predict", "future price", "next week", "next month", "tomorrow")),
    (IntentTag.MARKET, _keywords("price", "market", "sell", "where")),
    (IntentTag.WAREHOUSE, _keywords("warehouse", "storage", "store")),
    (IntentTag.TRANSPORT, _keywords("transport", "logistics", "deliver", "pickup")),
    (IntentTag.BUYERS, _keywords("buyer", "customer", "purchaser", "looking for", "who needs", "who wants")),
    (IntentTag.SUPPLY_CHAIN, _keywords(
        "supply chain", "value chain", "distribution", "logistics network", "ethical", "sustainable",
    )),
    (IntentTag.QUALITY_CONTROL, _keywords("quality", "organic", "certification", "contract farming")),
    (IntentTag.ABOUT_AI, _keywords("which ai", "what ai", "ai model", "what model", "how do you work")),
)


class IntentClassifier:
    """Classification déterministe par mots-clés, première règle gagnante."""

    def __init__(self, rules: Sequence[Tuple[IntentTag, Predicate]] = INTENT_RULES):
        self.rules = tuple(rules)

    def predict(self, message: str) -> IntentTag:
        """`message` doit déjà être normalisé. Aucune règle -> GENERAL."""
        if not message:
            return IntentTag.GENERAL
        for tag, predicate in self.rules:
            if predicate(message):
                return tag
        return IntentTag.GENERAL

    def classify(self, message: str, slots: Optional[Slots] = None) -> ClassifiedIntent:
        tag = self.predict(message)
        logger.debug("Intent '%s' pour: %r", tag.value, message)
        return ClassifiedIntent(tag=tag, slots=slots or Slots())
