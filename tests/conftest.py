"""
TopStats Test Configuration
---------------------------
Shared fixtures. The HTTP transport is replaced by a spy on
`RequestHandler.session.request`, so no test touches the network.
"""

import json
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import requests

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from topstats import TopStatsClient

TOKEN = "test-token"
BOT_ID = "583807014896140293"
OTHER_BOT_ID = "646937666251915264"
USER_ID = "302050872383242240"


def make_response(status_code: int = 200, body=None, reason: str = "OK", raw: bytes | None = None):
    """Build a real requests.Response carrying `body` as JSON (or `raw` bytes)."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.encoding = "utf-8"
    if raw is not None:
        resp._content = raw
        resp.headers["Content-Type"] = "text/html"
    else:
        resp._content = json.dumps(body if body is not None else {}).encode("utf-8")
        resp.headers["Content-Type"] = "application/json"
    return resp


@pytest.fixture
def client():
    c = TopStatsClient(TOKEN)
    yield c
    c.close()


@pytest.fixture
def transport(client):
    """Spy standing in for the HTTP session; set `.return_value` or `.side_effect` per test."""
    with patch.object(client.http.session, "request") as spy:
        spy.return_value = make_response(200, {})
        yield spy


def sent_url(spy) -> str:
    return spy.call_args.args[1]


def sent_kwargs(spy) -> dict:
    return spy.call_args.kwargs
