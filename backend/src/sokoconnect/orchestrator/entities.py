"""
Entity Extractor — Repérage des entités par vocabulaire fixe.

Pour chaque slot, on parcourt le vocabulaire DANS SON ORDRE et on retient
le premier terme présent comme sous-chaîne du message. Un message qui
cite « rice and maize » donne donc crop="maize" (maize précède rice dans
le vocabulaire), quel que soit l'ordre des mots dans la phrase.
"""

import logging
from typing import Dict, Mapping, Optional, Sequence, Tuple

from .state import Slots

logger = logging.getLogger("EntityExtractor")

CROP_VOCABULARY: Tuple[str, ...] = (
    "tomato", "potato", "maize", "corn", "mango", "avocado", "coffee", "tea",
    "beans", "peas", "wheat", "rice", "banana", "onion", "cabbage", "carrot",
)

LOCATION_VOCABULARY: Tuple[str, ...] = (
    "nairobi", "mombasa", "kisumu", "nakuru", "eldoret", "kitale", "meru",
    "nyeri", "thika", "machakos", "garissa", "lamu", "malindi", "kakamega",
    "kiambu", "nyandarua",
)

PRODUCT_VOCABULARY: Tuple[str, ...] = (
    "fertilizer", "seeds", "seed", "pesticide", "herbicide", "fungicide",
    "insecticide", "animal feed", "vaccine",
)

POLICY_VOCABULARY: Tuple[str, ...] = (
    "fertilizer subsidy", "subsidy", "loan", "insurance", "extension", "tax",
    "land reform", "cooperative",
)

TECHNOLOGY_VOCABULARY: Tuple[str, ...] = (
    "drip irrigation", "irrigation", "greenhouse", "drone", "sensor",
    "mobile app", "solar pump", "tractor", "hydroponics",
)

VOCABULARIES: Dict[str, Tuple[str, ...]] = {
    "crop": CROP_VOCABULARY,
    "location": LOCATION_VOCABULARY,
    "product": PRODUCT_VOCABULARY,
    "policy": POLICY_VOCABULARY,
    "technology": TECHNOLOGY_VOCABULARY,
}


class EntityExtractor:
    def __init__(self, vocabularies: Mapping[str, Sequence[str]] = VOCABULARIES):
        self.vocabularies = vocabularies

    def extract(self, message: str) -> Slots:
        """`message` doit déjà être normalisé (minuscules)."""
        values = {
            slot: self.first_match(message, vocabulary)
            for slot, vocabulary in self.vocabularies.items()
        }
        slots = Slots(**values)
        logger.debug("Slots extraits: %s", slots)
        return slots

    @staticmethod
    def first_match(message: str, vocabulary: Sequence[str]) -> Optional[str]:
        if not message:
            return None
        for term in vocabulary:
            if term in message:
                return term
        return None
