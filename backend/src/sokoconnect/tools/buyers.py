from __future__ import annotations

from typing import Iterable, List, Tuple

from sokoconnect.models import Buyer
from .shared_text import any_contains, contains


class BuyerDirectoryTool:
    """Annuaire des acheteurs (transformateurs, distributeurs, écoles...)."""

    def __init__(self, buyers: Iterable[Buyer]) -> None:
        self._buyers: Tuple[Buyer, ...] = tuple(buyers)

    def buyers_for(self, crop: str, location: str) -> List[Buyer]:
        return [
            b for b in self._buyers
            if any_contains(b.crops, crop) and contains(b.location, location)
        ]
