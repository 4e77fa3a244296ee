"""
Compare API module for side-by-side stats of several bots.
"""
from typing import TYPE_CHECKING, Iterable

from topstats.enums import MetricType, TimeFrame
from topstats.models import BotSnapshot, HistoricalPoint
from topstats.validation import coerce_enum, require_list, require_record, validate_snowflakes

if TYPE_CHECKING:
    from topstats.client import TopStatsClient


class CompareAPI:
    """Comparison endpoints. Bot ids are joined into the path in the given order."""

    def __init__(self, client: "TopStatsClient"):
        self.client = client

    def bots(self, bot_ids: Iterable[str]) -> list[BotSnapshot]:
        """Fetch current data for several bots (GET /discord/compare/{id1}/{id2}/...)."""
        ids = validate_snowflakes(bot_ids)
        payload = self.client.http.get_json(f"/discord/compare/{'/'.join(ids)}")
        bots = require_list(require_record(payload, "compare response").get("data"), "compare data")
        return [BotSnapshot.from_dict(b) for b in bots]

    def historical(
        self,
        bot_ids: Iterable[str],
        time_frame: TimeFrame | str,
        metric: MetricType | str,
    ) -> dict[str, list[HistoricalPoint]]:
        """
        Fetch one metric's history for several bots
        (GET /discord/compare/historical/{id1}/{id2}/...).
        Points are reshaped exactly like BotsAPI.historical.
        """
        ids = validate_snowflakes(bot_ids)
        time_frame = coerce_enum(TimeFrame, time_frame)
        metric = coerce_enum(MetricType, metric)
        payload = self.client.http.get_json(
            f"/discord/compare/historical/{'/'.join(ids)}",
            params={"timeFrame": time_frame, "type": metric},
        )
        series = require_record(payload, "historical compare response").get("data") or {}
        series = require_record(series, "historical compare data")
        return {
            bot_id: [
                HistoricalPoint.from_raw(raw, metric, bot_id)
                for raw in require_list(points, f"historical data for {bot_id}")
            ]
            for bot_id, points in series.items()
        }
