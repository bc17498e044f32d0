from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from sokoconnect.models import Market, ProducePrice
from .shared_text import contains

logger = logging.getLogger("MarketTool")


class MarketTool:
    """Vue en lecture seule sur les marchés et leurs prix par produit."""

    def __init__(self, markets: Iterable[Market]) -> None:
        self._markets: Tuple[Market, ...] = tuple(markets)

    # ------------------------------------------------------------------ #
    # API publique consommée par les handlers                            #
    # ------------------------------------------------------------------ #

    def markets_for(self, crop: str) -> List[Market]:
        """Marchés dont la liste de prix contient le produit (sous-chaîne)."""
        return [market for market in self._markets if self.price_for(market, crop) is not None]

    def best_markets(self, crop: str, limit: int = 3) -> List[Tuple[Market, ProducePrice]]:
        """
        Classement décroissant par prix du produit demandé.
        Le tri est stable : à prix égal, l'ordre d'origine est conservé.
        """
        matched = [(market, self.price_for(market, crop)) for market in self.markets_for(crop)]
        ranked = sorted(matched, key=lambda pair: pair[1].price, reverse=True)
        logger.debug("%d marchés pour '%s'", len(ranked), crop)
        return ranked[:limit]

    @staticmethod
    def price_for(market: Market, crop: str) -> Optional[ProducePrice]:
        for produce in market.produce_prices:
            if contains(produce.produce_name, crop):
                return produce
        return None
