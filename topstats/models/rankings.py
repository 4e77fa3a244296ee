from dataclasses import dataclass, field

from topstats.validation import require_list, require_record


@dataclass(frozen=True)
class RankingEntry:
    id: str
    name: str | None = None
    monthly_votes: int | None = None
    monthly_votes_rank: int | None = None
    monthly_votes_rank_change: int | None = None
    total_votes: int | None = None
    total_votes_rank: int | None = None
    total_votes_rank_change: int | None = None
    server_count: int | None = None
    server_count_rank: int | None = None
    server_count_rank_change: int | None = None
    shard_count: int | None = None
    shard_count_rank: int | None = None
    shard_count_rank_change: int | None = None

    @staticmethod
    def from_dict(d: dict) -> "RankingEntry":
        d = require_record(d, "ranking entry", "id")
        return RankingEntry(
            id=str(d["id"]),
            name=d.get("name"),
            monthly_votes=d.get("monthly_votes"),
            monthly_votes_rank=d.get("monthly_votes_rank"),
            monthly_votes_rank_change=d.get("monthly_votes_rank_change"),
            total_votes=d.get("total_votes"),
            total_votes_rank=d.get("total_votes_rank"),
            total_votes_rank_change=d.get("total_votes_rank_change"),
            server_count=d.get("server_count"),
            server_count_rank=d.get("server_count_rank"),
            server_count_rank_change=d.get("server_count_rank_change"),
            shard_count=d.get("shard_count"),
            shard_count_rank=d.get("shard_count_rank"),
            shard_count_rank_change=d.get("shard_count_rank_change"),
        )


@dataclass(frozen=True)
class RankingsPage:
    """One leaderboard page, ordered by the requested sort key and direction."""

    totalBotCount: int
    data: list[RankingEntry] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict) -> "RankingsPage":
        d = require_record(d, "rankings response")
        return RankingsPage(
            totalBotCount=d.get("totalBotCount", 0),
            data=[RankingEntry.from_dict(e) for e in require_list(d.get("data"), "rankings data")],
        )
