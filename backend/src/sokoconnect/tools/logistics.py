from __future__ import annotations

from typing import Iterable, List, Tuple

from sokoconnect.models import Transporter, Warehouse
from .shared_text import any_contains


class LogisticsTool:
    """
    Entrepôts et transporteurs du réseau.
    Les entrepôts sont filtrés par type de marchandise, les transporteurs
    par comté desservi.
    """

    def __init__(
        self,
        warehouses: Iterable[Warehouse] = (),
        transporters: Iterable[Transporter] = (),
    ) -> None:
        self._warehouses: Tuple[Warehouse, ...] = tuple(warehouses)
        self._transporters: Tuple[Transporter, ...] = tuple(transporters)

    def warehouses_for(self, crop: str, limit: int = 3) -> List[Warehouse]:
        matches = [w for w in self._warehouses if any_contains(w.goods_types, crop)]
        return matches[:limit]

    def transporters_for(self, location: str, limit: int = 3) -> List[Transporter]:
        matches = [t for t in self._transporters if any_contains(t.counties, location)]
        return matches[:limit]

    @staticmethod
    def carbon_footprint(transporter: Transporter) -> str:
        # Les camions frigorifiques consomment davantage
        return "Medium" if transporter.has_refrigeration else "Low"
