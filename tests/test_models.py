"""
Model, enum and error type tests.
"""

from datetime import timezone

import pytest

from topstats import ErrorKind, MetricType, RankingsPage, TimeFrame, TopStatsError
from topstats.models import METRIC_ACCESSORS, BotSnapshot
from topstats.utils.time import parse_iso_utc


class TestEnums:
    """Wire values must match the API exactly."""

    def test_time_frames(self):
        assert [t.value for t in TimeFrame] == [
            "alltime", "5y", "3y", "1y", "270d", "180d", "90d", "30d", "7d", "1d", "12hr", "6hr",
        ]

    def test_every_metric_has_an_accessor(self):
        assert set(METRIC_ACCESSORS) == set(MetricType)

    @pytest.mark.parametrize("metric", list(MetricType))
    def test_accessor_reads_own_field(self, metric):
        assert METRIC_ACCESSORS[metric]({metric.value: 7, "other": 1}) == 7


class TestParseIsoUtc:
    """Tests for timestamp parsing."""

    def test_trailing_z(self):
        dt = parse_iso_utc("2025-03-04T05:06:07Z")

        assert dt.tzinfo == timezone.utc
        assert (dt.month, dt.hour) == (3, 5)

    def test_naive_assumed_utc(self):
        assert parse_iso_utc("2025-03-04T05:06:07").tzinfo == timezone.utc

    @pytest.mark.parametrize("value", ["", None])
    def test_empty(self, value):
        assert parse_iso_utc(value) is None


class TestModels:
    """Tests for payload parsing."""

    def test_bot_snapshot_tolerates_variants(self):
        bot = BotSnapshot.from_dict({"id": 583807014896140293, "review_count": 9})

        assert bot.id == "583807014896140293"
        assert bot.review_count == 9
        assert bot.shard_count is None
        assert bot.owners == []
        assert bot.percentageChanges.daily is None
        assert bot.approved is None

    def test_empty_rankings_page(self):
        page = RankingsPage.from_dict({"totalBotCount": 0, "data": []})

        assert page.data == []


class TestTopStatsError:
    """The error kind is the discriminator callers branch on."""

    def test_each_factory_sets_kind(self):
        errors = [
            TopStatsError.configuration("no token"),
            TopStatsError.validation("bad id"),
            TopStatsError.rate_limit("slow down", "30s"),
            TopStatsError.api(503, "Service Unavailable"),
            TopStatsError.transport("connection refused"),
        ]

        assert [e.kind for e in errors] == list(ErrorKind)

    def test_match_on_kind(self):
        def describe(err: TopStatsError) -> str:
            match err.kind:
                case ErrorKind.RATE_LIMIT:
                    return f"retry in {err.expires_in}"
                case ErrorKind.API:
                    return f"status {err.status_code}"
                case _:
                    return err.message

        assert describe(TopStatsError.rate_limit("slow down", "30s")) == "retry in 30s"
        assert describe(TopStatsError.api(500, "Internal Server Error")) == "status 500"
        assert describe(TopStatsError.validation("bad id")) == "bad id"

    def test_api_message(self):
        assert str(TopStatsError.api(500, "Internal Server Error")) == "API Error 500: Internal Server Error"
