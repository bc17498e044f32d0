import pytest

from sokoconnect.models import DomainSnapshot
from sokoconnect.orchestrator.advisor import AdvisorEngine
from sokoconnect.tools.dataset import load_demo_snapshot


@pytest.fixture
def demo_snapshot() -> DomainSnapshot:
    return load_demo_snapshot()


@pytest.fixture
def engine() -> AdvisorEngine:
    # Anglais uniquement, indépendamment du .env local
    return AdvisorEngine(multilingual=False)


@pytest.fixture
def market_snapshot() -> DomainSnapshot:
    return DomainSnapshot.from_payload({
        "markets": [
            {
                "name": "Kiambu Market",
                "county": "Kiambu",
                "producePrices": [{"produceName": "Maize", "price": 45, "unit": "kg"}],
            },
            {
                "name": "Nakuru Market",
                "county": "Nakuru",
                "producePrices": [{"produceName": "Maize", "price": 50, "unit": "kg"}],
            },
        ],
    })
