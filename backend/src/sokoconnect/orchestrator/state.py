from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, Optional, Tuple

from sokoconnect.models import DomainRecord, Market, Warehouse


class IntentTag(str, Enum):
    """Ensemble fermé des intentions reconnues par le moteur."""
    GREETING = "greeting"
    THANKS = "thanks"
    ABOUT_AI = "aboutAI"
    COUNTERFEIT = "counterfeit"
    DISEASE = "disease"
    POLICY = "policy"
    TECHNOLOGY = "technology"
    INSIGHTS = "insights"
    FORECAST = "forecast"
    MARKET = "market"
    WAREHOUSE = "warehouse"
    TRANSPORT = "transport"
    BUYERS = "buyers"
    SUPPLY_CHAIN = "supplyChain"
    QUALITY_CONTROL = "qualityControl"
    GENERAL = "general"


SLOT_NAMES = ("crop", "location", "product", "policy", "technology")


@dataclass(frozen=True)
class Slots:
    """Entités extraites : chaque slot est vide ou un terme du vocabulaire."""
    crop: Optional[str] = None
    location: Optional[str] = None
    product: Optional[str] = None
    policy: Optional[str] = None
    technology: Optional[str] = None

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class ClassifiedIntent:
    tag: IntentTag
    slots: Slots


class AdvisorContext(DomainRecord):
    """
    Contexte de conversation, détenu par l'appelant (UI).

    Porte les slots résolus aux tours précédents et, optionnellement, des
    sous-ensembles déjà filtrés de marchés / entrepôts. Le moteur ne le
    conserve pas entre deux appels.
    """
    crop: Optional[str] = None
    location: Optional[str] = None
    product: Optional[str] = None
    policy: Optional[str] = None
    technology: Optional[str] = None

    markets: Optional[Tuple[Market, ...]] = None
    warehouses: Optional[Tuple[Warehouse, ...]] = None
