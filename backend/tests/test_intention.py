"""
Tests unitaires — Classification d'intention (règles ordonnées).
"""

import pytest

from sokoconnect.orchestrator.intention import INTENT_RULES, IntentClassifier
from sokoconnect.orchestrator.state import IntentTag, Slots


class TestIntentClassifier:
    """La première règle satisfaite l'emporte."""

    def setup_method(self):
        self.classifier = IntentClassifier()

    @pytest.mark.parametrize("message,tag", [
        ("hello there", IntentTag.GREETING),
        ("good morning", IntentTag.GREETING),
        ("thanks a lot", IntentTag.THANKS),
        ("is this fertilizer genuine?", IntentTag.COUNTERFEIT),
        ("armyworm in my maize", IntentTag.DISEASE),
        ("pest on my maize in nakuru", IntentTag.DISEASE),
        ("i have pests in my beans", IntentTag.DISEASE),
        ("fertilizer subsidy in nakuru", IntentTag.POLICY),
        ("drone adoption", IntentTag.TECHNOLOGY),
        ("collective insights on potato", IntentTag.INSIGHTS),
        ("forecast for maize", IntentTag.FORECAST),
        ("where can i sell maize", IntentTag.MARKET),
        ("i need storage for maize", IntentTag.WAREHOUSE),
        ("transport in nakuru", IntentTag.TRANSPORT),
        ("buyers for maize in nakuru", IntentTag.BUYERS),
        ("supply chain for maize", IntentTag.SUPPLY_CHAIN),
        ("organic certification for beans", IntentTag.QUALITY_CONTROL),
        ("which ai model are you", IntentTag.ABOUT_AI),
        ("can you help me today?", IntentTag.GENERAL),
    ])
    def test_predict(self, message, tag):
        assert self.classifier.predict(message) == tag

    def test_thanks_takes_precedence_over_market(self):
        assert self.classifier.predict("thanks for the maize price info") == IntentTag.THANKS

    def test_greeting_requires_word_boundary(self):
        assert self.classifier.predict("highest maize price") == IntentTag.MARKET

    def test_pesticide_is_not_a_disease_keyword(self):
        assert self.classifier.predict("pesticide for my farm") == IntentTag.GENERAL

    def test_empty_message_is_general(self):
        assert self.classifier.predict("") == IntentTag.GENERAL

    def test_classify_carries_slots(self):
        slots = Slots(crop="maize")
        result = self.classifier.classify("where can i sell maize", slots)
        assert result.tag == IntentTag.MARKET
        assert result.slots is slots

    def test_custom_rules(self):
        classifier = IntentClassifier(rules=[(IntentTag.MARKET, lambda m: "soko" in m)])
        assert classifier.predict("soko") == IntentTag.MARKET
        assert classifier.predict("forecast") == IntentTag.GENERAL


def test_every_tag_but_general_has_a_rule():
    tags = {tag for tag, _ in INTENT_RULES}
    assert tags == set(IntentTag) - {IntentTag.GENERAL}
