from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from sokoconnect.models import Forecast
from .shared_text import confidence_margin, contains


class ForecastTool:
    """Prévisions de production / demande par produit et par comté."""

    def __init__(self, forecasts: Iterable[Forecast]) -> None:
        self._forecasts: Tuple[Forecast, ...] = tuple(forecasts)

    def forecasts_for(self, crop: str) -> List[Forecast]:
        return [f for f in self._forecasts if contains(f.produce_name, crop)]

    def peak_demand(self, crop: str) -> Optional[Forecast]:
        """Prévision avec la plus forte demande attendue (premier en cas d'égalité)."""
        candidates = self.forecasts_for(crop)
        if not candidates:
            return None
        return max(candidates, key=lambda f: f.expected_demand)

    @staticmethod
    def error_margin(forecast: Forecast) -> str:
        return confidence_margin(forecast.confidence_level)
