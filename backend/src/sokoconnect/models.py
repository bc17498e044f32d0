"""
Schémas Pydantic — Enregistrements métier en lecture seule.

Les collections (marchés, prévisions, entrepôts, transporteurs, signaux
de sentiment, acheteurs) sont récupérées par la couche d'accès aux données
et passées entières au moteur de conseil. Le moteur ne les modifie jamais :
tous les modèles sont gelés (frozen).

Le backend hébergé émet du camelCase ; les deux conventions sont acceptées.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainRecord(BaseModel):
    """Base commune : immuable, accepte camelCase et snake_case."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ============================================
# MARCHÉS & PRÉVISIONS
# ============================================

class ProducePrice(DomainRecord):
    produce_name: str
    price: float
    unit: str = "kg"
    date: Optional[str] = None


class Market(DomainRecord):
    name: str
    county: str
    location: Optional[str] = None
    produce_prices: Tuple[ProducePrice, ...] = ()


class Forecast(DomainRecord):
    produce_name: str
    county: Optional[str] = None
    period: str
    expected_production: float
    expected_demand: float
    unit: str = "kg"
    # "high" | "medium" | "low" ; toute autre valeur est traitée comme "low"
    confidence_level: Optional[str] = None


# ============================================
# LOGISTIQUE
# ============================================

class Warehouse(DomainRecord):
    name: str
    location: str
    county: Optional[str] = None
    capacity: Optional[float] = None
    capacity_unit: str = "tonnes"
    goods_types: Tuple[str, ...]
    has_refrigeration: bool = False
    contact_info: Optional[str] = None


class Transporter(DomainRecord):
    name: str
    counties: Tuple[str, ...]
    contact_info: str
    load_capacity: float
    has_refrigeration: bool = False
    vehicle_type: Optional[str] = None
    rates: Optional[str] = None


# ============================================
# INTELLIGENCE COLLECTIVE
# ============================================

class SentimentSignal(DomainRecord):
    """Signal agrégé à partir des rapports d'agriculteurs."""
    # "counterfeit" | "disease" | "policy" | "technology" | "insight"
    category: str
    subject: str
    location: str
    narrative: str
    sentiment: str = "neutral"
    confidence_score: float = 0.0
    report_count: int = 0


class Buyer(DomainRecord):
    name: str
    location: str
    crops: Tuple[str, ...]
    volume: str = "Medium"
    price_terms: str = "Fair"
    ethical_standards: str = "Medium"


# ============================================
# SNAPSHOT
# ============================================

class DomainSnapshot(DomainRecord):
    """Photo complète (non paginée) des données métier pour un appel."""

    markets: Tuple[Market, ...] = ()
    forecasts: Tuple[Forecast, ...] = ()
    warehouses: Tuple[Warehouse, ...] = ()
    transporters: Tuple[Transporter, ...] = ()
    sentiment_signals: Tuple[SentimentSignal, ...] = ()
    buyers: Tuple[Buyer, ...] = ()

    @classmethod
    def from_payload(cls, payload: Optional[Mapping[str, Any]]) -> "DomainSnapshot":
        """Construit un snapshot depuis un dict JSON (lève ValidationError si invalide)."""
        return cls.model_validate(dict(payload or {}))

    def counts(self) -> Dict[str, int]:
        return {name: len(getattr(self, name)) for name in type(self).model_fields}


__all__: List[str] = [
    "DomainRecord",
    "ProducePrice",
    "Market",
    "Forecast",
    "Warehouse",
    "Transporter",
    "SentimentSignal",
    "Buyer",
    "DomainSnapshot",
]
