"""
Tests d'intégration — Pipeline complet du moteur conseil.
"""

import logging
from unittest.mock import patch

from sokoconnect.models import DomainSnapshot, Warehouse
from sokoconnect.orchestrator.advisor import (
    APOLOGY_MESSAGE,
    AdvisorEngine,
    generate_response,
)
from sokoconnect.orchestrator.handlers import COUNTERFEIT_ROUTE, GENERAL_CAPABILITIES, THANKS_MESSAGE
from sokoconnect.orchestrator.state import IntentTag
from sokoconnect.tools.dataset import DEFAULT_DATASET


class TestRespond:
    """Réponses de bout en bout sur le jeu de démo."""

    def test_no_keyword_no_crop_returns_fixed_capabilities(self, engine, demo_snapshot):
        assert engine.respond("Can you help me today?", demo_snapshot) == GENERAL_CAPABILITIES

    def test_non_string_and_empty_messages(self, engine, demo_snapshot):
        assert engine.respond(None, demo_snapshot) == GENERAL_CAPABILITIES
        assert engine.respond("", demo_snapshot) == GENERAL_CAPABILITIES
        assert engine.respond(12345, demo_snapshot) == GENERAL_CAPABILITIES

    def test_market_ranking(self, engine, market_snapshot):
        text = engine.respond("Where can I sell maize?", market_snapshot)
        assert text.index("Nakuru Market") < text.index("Kiambu Market")

    def test_forecast_picks_highest_demand(self, engine):
        snapshot = DomainSnapshot.from_payload({"forecasts": [
            {"produceName": "Maize", "county": "Kisumu", "period": "May", "expectedProduction": 1,
             "expectedDemand": 100, "confidenceLevel": "high"},
            {"produceName": "Maize", "county": "Nakuru", "period": "May", "expectedProduction": 1,
             "expectedDemand": 200, "confidenceLevel": "high"},
        ]})
        text = engine.respond("Forecast for maize next month", snapshot)
        assert "Nakuru county" in text
        assert "±5%" in text

    def test_thanks_wins_over_market(self, engine, demo_snapshot):
        assert engine.respond("Thanks for the maize price info", demo_snapshot) == THANKS_MESSAGE

    def test_counterfeit_without_slots(self, engine, demo_snapshot):
        assert engine.respond("counterfeit", demo_snapshot) == COUNTERFEIT_ROUTE.neither

    def test_counterfeit_with_slots(self, engine, demo_snapshot):
        text = engine.respond("Fake fertilizer in Nakuru?", demo_snapshot)
        assert "Counterfeit alert for fertilizer in Nakuru" in text

    def test_deterministic(self, engine, demo_snapshot):
        message = "Where can I sell maize?"
        assert engine.respond(message, demo_snapshot) == engine.respond(message, demo_snapshot)

    def test_missing_snapshot_gives_no_data_reply(self, engine):
        text = engine.respond("Where can I sell maize?")
        assert "I don't have specific market data for maize" in text

    def test_snapshot_as_raw_payload(self, engine):
        text = engine.respond("Where can I sell maize?", DEFAULT_DATASET)
        assert "1. Kongowea Market (Mombasa): KES 60 per kg" in text


class TestContext:
    def test_context_crop_fills_missing_slot(self, engine, demo_snapshot):
        reply = engine.answer("What about prices?", demo_snapshot, {"crop": "maize"})
        assert reply.intent == IntentTag.MARKET
        assert "Kongowea Market" in reply.text

    def test_context_market_subset(self, engine, demo_snapshot):
        context = {"crop": "maize", "markets": [demo_snapshot.markets[0]]}
        text = engine.respond("Where can I sell?", demo_snapshot, context)
        assert "Wakulima Market" in text
        assert "Kongowea Market" not in text


class TestFaultBoundary:
    """Toute erreur d'un handler devient le message d'excuse."""

    def test_malformed_warehouse_returns_apology(self, engine, caplog):
        broken = Warehouse.model_construct(name="Broken", location="Nowhere")
        snapshot = DomainSnapshot.model_construct(warehouses=(broken,))
        with caplog.at_level(logging.ERROR, logger="AdvisorEngine"):
            text = engine.respond("I need storage for maize", snapshot)
        assert text == APOLOGY_MESSAGE
        assert any(record.exc_info for record in caplog.records)

    def test_invalid_snapshot_payload_returns_apology(self, engine):
        payload = {"warehouses": [{"name": "W", "location": "X"}]}
        assert engine.respond("I need storage for maize", payload) == APOLOGY_MESSAGE

    def test_handler_exception_is_contained(self, demo_snapshot):
        def boom(slots, snapshot):
            raise RuntimeError("boom")

        engine = AdvisorEngine(handlers={IntentTag.MARKET: boom}, multilingual=False)
        reply = engine.answer("Where can I sell maize?", demo_snapshot)
        assert reply.text == APOLOGY_MESSAGE
        assert reply.intent is None

    def test_empty_reply_becomes_apology(self, demo_snapshot):
        engine = AdvisorEngine(handlers={IntentTag.GENERAL: lambda s, d: ""}, multilingual=False)
        assert engine.respond("Can you help me today?", demo_snapshot) == APOLOGY_MESSAGE

    def test_extractor_failure_is_contained(self, engine, demo_snapshot):
        with patch.object(engine.extractor, "extract", side_effect=ValueError("bad")):
            assert engine.respond("Where can I sell maize?", demo_snapshot) == APOLOGY_MESSAGE


class TestGenerateResponse:
    def test_uses_demo_dataset_by_default(self):
        with patch("sokoconnect.orchestrator.advisor.settings") as mock_settings:
            mock_settings.MULTILINGUAL_REPLIES = False
            text = generate_response("Where can I sell maize?")
        assert "1. Kongowea Market (Mombasa): KES 60 per kg" in text

    def test_multilingual_when_enabled(self, demo_snapshot):
        engine = AdvisorEngine(multilingual=True)
        assert engine.respond("habari", demo_snapshot).startswith("Habari!")
        assert engine.respond("Where can I sell maize?", demo_snapshot).startswith("The best markets for maize")
