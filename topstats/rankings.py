from typing import TYPE_CHECKING

from topstats.enums import SortBy, SortMethod
from topstats.models import RankingsPage
from topstats.validation import coerce_enum, validate_rankings_limit

if TYPE_CHECKING:
    from topstats.client import TopStatsClient


class RankingsAPI:
    """Leaderboard endpoints."""

    def __init__(self, client: "TopStatsClient"):
        self.client = client

    def bots(
        self,
        sort_by: SortBy | str,
        sort_method: SortMethod | str,
        limit: int | None = None,
    ) -> RankingsPage:
        """Fetch the bot leaderboard (GET /discord/rankings/bots). `limit` defaults to 100, max 500."""
        limit = validate_rankings_limit(limit)
        query = {
            "sortBy": coerce_enum(SortBy, sort_by),
            "sortMethod": coerce_enum(SortMethod, sort_method),
            "limit": limit,
        }
        payload = self.client.http.get_json("/discord/rankings/bots", params=query)
        return RankingsPage.from_dict(payload)
