"""
Historical metric points.

The API returns each historical record with the metric under a field named
after the requested type (e.g. `{"time": ..., "id": ..., "server_count": 12}`).
`HistoricalPoint.from_raw` reshapes that into a fixed `{time, id, type, value}`
form through an explicit accessor per metric type.
"""
from dataclasses import dataclass
from datetime import datetime
from operator import itemgetter
from typing import Callable

from topstats.enums import MetricType
from topstats.errors import TopStatsError
from topstats.utils.time import parse_iso_utc
from topstats.validation import require_record

METRIC_ACCESSORS: dict[MetricType, Callable[[dict], float]] = {
    MetricType.MONTHLY_VOTES: itemgetter("monthly_votes"),
    MetricType.TOTAL_VOTES: itemgetter("total_votes"),
    MetricType.SERVER_COUNT: itemgetter("server_count"),
    MetricType.SHARD_COUNT: itemgetter("shard_count"),
    MetricType.REVIEW_COUNT: itemgetter("review_count"),
}


@dataclass(frozen=True)
class HistoricalPoint:
    time: str
    id: str
    type: MetricType
    value: float

    @property
    def timestamp(self) -> datetime | None:
        return parse_iso_utc(self.time)

    @staticmethod
    def from_raw(raw: dict, metric: MetricType, bot_id: str | None = None) -> "HistoricalPoint":
        """Build a point from a raw record, reading the field for `metric` into `value`.

        `bot_id` fills `id` when the record omits it (comparison payloads are keyed by id).
        """
        raw = require_record(raw, "historical record")
        try:
            value = METRIC_ACCESSORS[metric](raw)
        except KeyError:
            raise TopStatsError.transport(
                f"Historical record is missing the '{metric.value}' field"
            ) from None
        return HistoricalPoint(
            time=raw.get("time"),
            id=str(raw.get("id", bot_id)),
            type=metric,
            value=value,
        )
