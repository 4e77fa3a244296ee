from enum import Enum


class TimeFrame(str, Enum):
    ALL_TIME = "alltime"
    FIVE_YEARS = "5y"
    THREE_YEARS = "3y"
    ONE_YEAR = "1y"
    NINE_MONTHS = "270d"
    SIX_MONTHS = "180d"
    NINETY_DAYS = "90d"
    THIRTY_DAYS = "30d"
    SEVEN_DAYS = "7d"
    ONE_DAY = "1d"
    TWELVE_HOURS = "12hr"
    SIX_HOURS = "6hr"


class MetricType(str, Enum):
    MONTHLY_VOTES = "monthly_votes"
    TOTAL_VOTES = "total_votes"
    SERVER_COUNT = "server_count"
    SHARD_COUNT = "shard_count"
    # older API deployments report reviews in place of shards
    REVIEW_COUNT = "review_count"


class SortBy(str, Enum):
    MONTHLY_VOTES_RANK = "monthly_votes_rank"
    TOTAL_VOTES_RANK = "total_votes_rank"
    SERVER_COUNT_RANK = "server_count_rank"
    SHARD_COUNT_RANK = "shard_count_rank"


class SortMethod(str, Enum):
    ASC = "asc"
    DESC = "desc"
