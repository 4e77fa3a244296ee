from dataclasses import dataclass, field

from topstats.validation import require_list, require_record


@dataclass(frozen=True)
class RecentPoint:
    """One hourly or daily sample plus its change versus the previous sample."""

    time: str
    monthly_votes: int | None = None
    total_votes: int | None = None
    server_count: int | None = None
    shard_count: int | None = None
    review_count: int | None = None
    monthly_votes_change: int | None = None
    monthly_votes_change_perc: float | None = None
    total_votes_change: int | None = None
    server_count_change: int | None = None
    shard_count_change: int | None = None
    review_count_change: int | None = None

    @staticmethod
    def from_dict(d: dict) -> "RecentPoint":
        d = require_record(d, "recent stats point")
        return RecentPoint(
            time=d.get("time"),
            monthly_votes=d.get("monthly_votes"),
            total_votes=d.get("total_votes"),
            server_count=d.get("server_count"),
            shard_count=d.get("shard_count"),
            review_count=d.get("review_count"),
            monthly_votes_change=d.get("monthly_votes_change"),
            monthly_votes_change_perc=d.get("monthly_votes_change_perc"),
            total_votes_change=d.get("total_votes_change"),
            server_count_change=d.get("server_count_change"),
            shard_count_change=d.get("shard_count_change"),
            review_count_change=d.get("review_count_change"),
        )


@dataclass(frozen=True)
class RecentStatsBundle:
    hourlyData: list[RecentPoint] = field(default_factory=list)
    dailyData: list[RecentPoint] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict) -> "RecentStatsBundle":
        d = require_record(d, "recent stats response")
        return RecentStatsBundle(
            hourlyData=[RecentPoint.from_dict(p) for p in require_list(d.get("hourlyData"), "hourlyData")],
            dailyData=[RecentPoint.from_dict(p) for p in require_list(d.get("dailyData"), "dailyData")],
        )
