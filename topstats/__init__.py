"""
TopStats: client for the topstats.gg Discord bot statistics API.
"""

__version__ = "1.0.0"

from topstats.client import TopStatsClient
from topstats.config import ClientConfig
from topstats.enums import MetricType, SortBy, SortMethod, TimeFrame
from topstats.errors import ErrorKind, TopStatsError
from topstats.models import (
    BotSnapshot,
    HistoricalPoint,
    PercentageChanges,
    RankingEntry,
    RankingsPage,
    RecentPoint,
    RecentStatsBundle,
)

__all__ = [
    "TopStatsClient",
    "ClientConfig",
    "TimeFrame",
    "MetricType",
    "SortBy",
    "SortMethod",
    "ErrorKind",
    "TopStatsError",
    "BotSnapshot",
    "PercentageChanges",
    "HistoricalPoint",
    "RecentPoint",
    "RecentStatsBundle",
    "RankingEntry",
    "RankingsPage",
]
