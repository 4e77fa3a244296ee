"""
Bots API module for single-bot metadata, historical series and recent stats.
"""
from typing import TYPE_CHECKING

from topstats.enums import MetricType, TimeFrame
from topstats.models import BotSnapshot, HistoricalPoint, RecentStatsBundle
from topstats.validation import coerce_enum, require_list, require_record, validate_snowflake

if TYPE_CHECKING:
    from topstats.client import TopStatsClient


class BotsAPI:
    """Bot endpoints."""

    def __init__(self, client: "TopStatsClient"):
        self.client = client

    def get(self, bot_id: str) -> BotSnapshot:
        """Fetch a bot's current data (GET /discord/bots/{id})."""
        validate_snowflake(bot_id)
        payload = self.client.http.get_json(f"/discord/bots/{bot_id}")
        return BotSnapshot.from_dict(payload)

    def historical(
        self, bot_id: str, time_frame: TimeFrame | str, metric: MetricType | str
    ) -> list[HistoricalPoint]:
        """
        Fetch a bot's history for one metric (GET /discord/bots/{id}/historical).
        Every returned point carries `type == metric` and the metric in `value`.
        """
        validate_snowflake(bot_id)
        time_frame = coerce_enum(TimeFrame, time_frame)
        metric = coerce_enum(MetricType, metric)
        payload = self.client.http.get_json(
            f"/discord/bots/{bot_id}/historical",
            params={"timeFrame": time_frame, "type": metric},
        )
        records = require_list(require_record(payload, "historical response").get("data"), "historical data")
        return [HistoricalPoint.from_raw(raw, metric, bot_id) for raw in records]

    def recent(self, bot_id: str) -> RecentStatsBundle:
        """Fetch hourly and daily recent stats (GET /discord/bots/{id}/recent)."""
        validate_snowflake(bot_id)
        payload = self.client.http.get_json(f"/discord/bots/{bot_id}/recent")
        return RecentStatsBundle.from_dict(payload)
