"""
Client configuration and optional environment loading.
"""
import os
from dataclasses import dataclass, field
from typing import Mapping

from dotenv import load_dotenv

from topstats.errors import TopStatsError

DEFAULT_BASE_URL = "https://api.topstats.gg"


@dataclass(frozen=True)
class ClientConfig:
    """Immutable settings held by a TopStatsClient for its lifetime.

    `requests_per_minute` turns on local pacing: requests wait for a free slot in
    a per-minute window before they are sent. It is off by default, so the stock
    client does no client-side throttling. Even when it is on, a request is never
    retried, and a server 429 still surfaces as a rate-limit error.
    """

    token: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None
    requests_per_minute: int | None = None

    def __post_init__(self):
        if not self.token or not isinstance(self.token, str):
            raise TopStatsError.configuration("No API token provided")
        object.__setattr__(self, "base_url", (self.base_url or DEFAULT_BASE_URL).rstrip("/"))
        if self.requests_per_minute is not None and self.requests_per_minute < 1:
            raise TopStatsError.configuration("requests_per_minute must be at least 1")

    @staticmethod
    def from_options(options: "str | ClientConfig | Mapping") -> "ClientConfig":
        """Normalize a token string, a ClientConfig, or a `{token, baseUrl}` mapping."""
        if isinstance(options, ClientConfig):
            return options
        if isinstance(options, str):
            return ClientConfig(token=options)
        if isinstance(options, Mapping):
            return ClientConfig(
                token=options.get("token"),
                base_url=options.get("baseUrl") or options.get("base_url") or DEFAULT_BASE_URL,
                timeout=options.get("timeout"),
                requests_per_minute=options.get("requests_per_minute"),
            )
        raise TopStatsError.configuration("No API token provided")

    @staticmethod
    def from_env(dotenv_path: str | None = None) -> "ClientConfig":
        """Read TOPSTATS_TOKEN, TOPSTATS_BASE_URL and TOPSTATS_TIMEOUT, loading a .env file first."""
        load_dotenv(dotenv_path)
        token = os.getenv("TOPSTATS_TOKEN")
        if not token:
            raise TopStatsError.configuration("TOPSTATS_TOKEN not found in environment")
        timeout_raw = os.getenv("TOPSTATS_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else None
        except ValueError:
            raise TopStatsError.configuration(f"TOPSTATS_TIMEOUT is not a number: {timeout_raw!r}") from None
        return ClientConfig(
            token=token,
            base_url=os.getenv("TOPSTATS_BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
        )
