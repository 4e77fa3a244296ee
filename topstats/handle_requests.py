"""
HTTP request handler with TopStats-specific status handling.
Distinguishes 429 (rate limit) from other error statuses and never retries.
"""
import logging
from enum import Enum
from typing import Any

import requests
from pyrate_limiter import Duration, Limiter, MemoryListBucket, RequestRate
from requests_ratelimiter import LimiterSession

from topstats import __version__
from topstats.config import ClientConfig
from topstats.errors import TopStatsError


class RequestHandler:
    def __init__(self, config: ClientConfig):
        self.config = config
        self.base_url = config.base_url
        if config.requests_per_minute:
            # opt-in local pacing; requests wait for a slot, they are never replayed
            self.limiter = Limiter(
                RequestRate(config.requests_per_minute, Duration.MINUTE),
                bucket_class=MemoryListBucket,
            )
            self.session = LimiterSession(limiter=self.limiter, per_host=False)
        else:
            self.limiter = None
            self.session = requests.Session()

    def close(self):
        self.session.close()

    def headers(self) -> dict:
        return {
            "Authorization": self.config.token,
            "Content-Type": "application/json",
            "User-Agent": f"TopStats/{__version__}",
        }

    @staticmethod
    def _clean_params(params: dict | None) -> dict | None:
        """Drop absent values and unwrap enums to their wire values."""
        if not params:
            return None
        cleaned = {
            key: (value.value if isinstance(value, Enum) else value)
            for key, value in params.items()
            if value is not None
        }
        return cleaned or None

    def request(self, method: str, path: str, params: dict | None = None) -> Any:
        """
        Issue one request and return the parsed JSON body.
          - GET: `params` become the query string
          - anything else: `params` are sent as the JSON body
          - 429 raises a rate-limit error, other failures an API error
          - network and decode failures raise a transport error
        """
        url = f"{self.base_url}{path}"
        method = method.upper()
        cleaned = self._clean_params(params)
        logging.debug(f"TopStats {method} {path} params={cleaned}")
        try:
            resp = self.session.request(
                method,
                url,
                headers=self.headers(),
                params=cleaned if method == "GET" else None,
                json=cleaned if method != "GET" else None,
                timeout=self.config.timeout,
            )
            logging.debug(f"TopStats {method} {path} -> {resp.status_code}")
            return self._handle_response(resp)
        except TopStatsError:
            raise
        except requests.RequestException as e:
            raise TopStatsError.transport(str(e) or e.__class__.__name__) from e

    def _handle_response(self, resp: requests.Response) -> Any:
        if resp.status_code == 429:
            raise self._rate_limit_error(resp)
        if not resp.ok:
            raise TopStatsError.api(resp.status_code, resp.reason or "")
        try:
            return resp.json()
        except ValueError as e:
            raise TopStatsError.transport(f"Invalid JSON in response: {e}") from e

    def _rate_limit_error(self, resp: requests.Response) -> TopStatsError:
        try:
            payload = resp.json()
        except ValueError:
            payload = None
        if not isinstance(payload, dict):
            payload = {}
        message = payload.get("message") or resp.reason or "Rate limited"
        expires_in = payload.get("expiresIn")
        logging.debug(f"TopStats rate limit response: {message} (expires in {expires_in})")
        return TopStatsError.rate_limit(message, expires_in)

    def get_json(self, path: str, params: dict | None = None) -> Any:
        return self.request("GET", path, params)
