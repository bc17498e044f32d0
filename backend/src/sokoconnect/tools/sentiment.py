from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from sokoconnect.models import SentimentSignal
from .shared_text import contains


class SentimentTool:
    """
    Intelligence collective : signaux agrégés à partir des rapports
    d'agriculteurs (contrefaçons, maladies, politiques, technologies).
    """

    def __init__(self, signals: Iterable[SentimentSignal]) -> None:
        self._signals: Tuple[SentimentSignal, ...] = tuple(signals)

    def find_signals(
        self,
        subject: str,
        location: str,
        category: Optional[str] = None,
        limit: int = 3,
    ) -> List[SentimentSignal]:
        """
        Signaux dont le sujet et le lieu correspondent (sous-chaîne).
        category=None : toutes catégories confondues.
        Tri par nombre de rapports décroissant, stable.
        """
        matches = [
            s for s in self._signals
            if (category is None or s.category.lower() == category)
            and contains(s.subject, subject)
            and contains(s.location, location)
        ]
        ranked = sorted(matches, key=lambda s: s.report_count, reverse=True)
        return ranked[:limit]

    @staticmethod
    def describe(signal: SentimentSignal) -> str:
        return (
            f"{signal.narrative} ({signal.report_count} farmer reports, "
            f"{signal.sentiment} sentiment, {signal.confidence_score:.0%} confidence)"
        )
