from typing import TYPE_CHECKING

from topstats.models import BotSnapshot
from topstats.validation import require_list, require_record, validate_snowflake

if TYPE_CHECKING:
    from topstats.client import TopStatsClient


class UsersAPI:
    """User endpoints."""

    def __init__(self, client: "TopStatsClient"):
        self.client = client

    def bots(self, user_id: str) -> list[BotSnapshot]:
        """Fetch the bots a user owns (GET /discord/users/{id}/bots)."""
        validate_snowflake(user_id, what="user")
        payload = self.client.http.get_json(f"/discord/users/{user_id}/bots")
        bots = require_list(require_record(payload, "user bots response").get("bots"), "bots")
        return [BotSnapshot.from_dict(b) for b in bots]
