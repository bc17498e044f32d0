from .market import MarketTool
from .forecast import ForecastTool
from .logistics import LogisticsTool
from .sentiment import SentimentTool
from .buyers import BuyerDirectoryTool
from .dataset import DEFAULT_DATASET, load_demo_snapshot

__all__ = [
    "MarketTool",
    "ForecastTool",
    "LogisticsTool",
    "SentimentTool",
    "BuyerDirectoryTool",
    "DEFAULT_DATASET",
    "load_demo_snapshot",
]
