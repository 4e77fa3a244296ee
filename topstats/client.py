"""
TopStats client: root object holding configuration, the shared HTTP handler,
and the bots, rankings, users and compare sub-APIs.
"""
from typing import Iterable, Mapping

from topstats.bots import BotsAPI
from topstats.compare import CompareAPI
from topstats.config import ClientConfig
from topstats.enums import MetricType, SortBy, SortMethod, TimeFrame
from topstats.handle_requests import RequestHandler
from topstats.models import BotSnapshot, HistoricalPoint, RankingsPage, RecentStatsBundle
from topstats.rankings import RankingsAPI
from topstats.users import UsersAPI


class TopStatsClient:
    """
    Client for https://api.topstats.gg.

        client = TopStatsClient("your-token")
        bot = client.get_bot("583807014896140293")

    `options` may be a token string, a ClientConfig, or a mapping with
    `token` and optional `baseUrl`.
    """

    def __init__(self, options: "str | ClientConfig | Mapping"):
        self.config = ClientConfig.from_options(options)
        self.http = RequestHandler(self.config)
        self.bots = BotsAPI(self)
        self.rankings = RankingsAPI(self)
        self.users = UsersAPI(self)
        self.compare = CompareAPI(self)

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "TopStatsClient":
        return cls(ClientConfig.from_env(dotenv_path))

    def __repr__(self) -> str:
        return f"TopStatsClient(base_url={self.config.base_url!r})"

    def __enter__(self) -> "TopStatsClient":
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.http.close()

    def get_bot(self, bot_id: str) -> BotSnapshot:
        return self.bots.get(bot_id)

    def get_bot_historical(
        self, bot_id: str, time_frame: TimeFrame | str, metric: MetricType | str
    ) -> list[HistoricalPoint]:
        return self.bots.historical(bot_id, time_frame, metric)

    def get_bot_recent(self, bot_id: str) -> RecentStatsBundle:
        return self.bots.recent(bot_id)

    def get_rankings(
        self,
        sort_by: SortBy | str,
        sort_method: SortMethod | str,
        limit: int | None = None,
    ) -> RankingsPage:
        return self.rankings.bots(sort_by, sort_method, limit)

    def get_users_bots(self, user_id: str) -> list[BotSnapshot]:
        return self.users.bots(user_id)

    def compare_bots(self, bot_ids: Iterable[str]) -> list[BotSnapshot]:
        return self.compare.bots(bot_ids)

    def compare_bots_historical(
        self,
        bot_ids: Iterable[str],
        time_frame: TimeFrame | str,
        metric: MetricType | str,
    ) -> dict[str, list[HistoricalPoint]]:
        return self.compare.historical(bot_ids, time_frame, metric)
