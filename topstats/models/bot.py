from dataclasses import dataclass, field
from datetime import datetime

from topstats.utils.time import parse_iso_utc
from topstats.validation import require_list, require_record


@dataclass(frozen=True)
class PercentageChanges:
    daily: float | None = None
    monthly: float | None = None

    @staticmethod
    def from_dict(d: dict | None) -> "PercentageChanges":
        d = require_record(d or {}, "percentageChanges")
        return PercentageChanges(daily=d.get("daily"), monthly=d.get("monthly"))


@dataclass(frozen=True)
class BotSnapshot:
    """Current metadata and metrics for one bot (GET /discord/bots/{id})."""

    id: str
    name: str | None = None
    owners: list[str] = field(default_factory=list)
    deleted: bool = False
    certified: bool = False
    def_avatar: str | None = None
    avatar: str | None = None
    short_desc: str | None = None
    lib: str | None = None
    prefix: str | None = None
    website: str | None = None
    approved_at: str | None = None
    monthly_votes: int | None = None
    total_votes: int | None = None
    server_count: int | None = None
    shard_count: int | None = None
    review_count: int | None = None
    monthly_votes_rank: int | None = None
    total_votes_rank: int | None = None
    server_count_rank: int | None = None
    shard_count_rank: int | None = None
    timestamp: str | None = None
    unix_timestamp: int | None = None
    percentageChanges: PercentageChanges = field(default_factory=PercentageChanges)

    @property
    def approved(self) -> datetime | None:
        return parse_iso_utc(self.approved_at)

    @property
    def updated(self) -> datetime | None:
        return parse_iso_utc(self.timestamp)

    @staticmethod
    def from_dict(d: dict) -> "BotSnapshot":
        d = require_record(d, "bot record", "id")
        return BotSnapshot(
            id=str(d["id"]),
            name=d.get("name"),
            owners=[str(o) for o in require_list(d.get("owners"), "owners")],
            deleted=bool(d.get("deleted", False)),
            certified=bool(d.get("certified", False)),
            def_avatar=d.get("def_avatar"),
            avatar=d.get("avatar"),
            short_desc=d.get("short_desc"),
            lib=d.get("lib"),
            prefix=d.get("prefix"),
            website=d.get("website"),
            approved_at=d.get("approved_at"),
            monthly_votes=d.get("monthly_votes"),
            total_votes=d.get("total_votes"),
            server_count=d.get("server_count"),
            shard_count=d.get("shard_count"),
            review_count=d.get("review_count"),
            monthly_votes_rank=d.get("monthly_votes_rank"),
            total_votes_rank=d.get("total_votes_rank"),
            server_count_rank=d.get("server_count_rank"),
            shard_count_rank=d.get("shard_count_rank"),
            timestamp=d.get("timestamp"),
            unix_timestamp=d.get("unix_timestamp"),
            percentageChanges=PercentageChanges.from_dict(d.get("percentageChanges")),
        )
