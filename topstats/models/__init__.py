from topstats.models.bot import BotSnapshot, PercentageChanges
from topstats.models.historical import METRIC_ACCESSORS, HistoricalPoint
from topstats.models.rankings import RankingEntry, RankingsPage
from topstats.models.recent import RecentPoint, RecentStatsBundle

__all__ = [
    "BotSnapshot",
    "PercentageChanges",
    "HistoricalPoint",
    "METRIC_ACCESSORS",
    "RankingEntry",
    "RankingsPage",
    "RecentPoint",
    "RecentStatsBundle",
]
