"""
Local input checks run before any request is issued, and shape checks
for decoded response bodies.
"""
import re
from enum import Enum
from typing import Any, Iterable, TypeVar

from topstats.errors import TopStatsError

SNOWFLAKE_PATTERN = re.compile(r"^\d{17,19}$")

MIN_RANKINGS_LIMIT = 1
MAX_RANKINGS_LIMIT = 500
DEFAULT_RANKINGS_LIMIT = 100

E = TypeVar("E", bound=Enum)


def validate_snowflake(value: str, what: str = "bot") -> str:
    """Return `value` if it is a 17-19 digit Discord id, else raise a validation error."""
    if not isinstance(value, str) or not SNOWFLAKE_PATTERN.fullmatch(value):
        raise TopStatsError.validation(f"Invalid Discord {what} ID format: {value!r}")
    return value


def validate_snowflakes(values: Iterable[str], what: str = "bot") -> list[str]:
    ids = [values] if isinstance(values, str) else list(values)
    if not ids:
        raise TopStatsError.validation(f"At least one {what} ID is required")
    # fails on the first bad id, in input order
    return [validate_snowflake(v, what) for v in ids]


def validate_rankings_limit(limit: int | None) -> int:
    if limit is None:
        return DEFAULT_RANKINGS_LIMIT
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise TopStatsError.validation(f"Rankings limit must be an integer, got {limit!r}")
    if not MIN_RANKINGS_LIMIT <= limit <= MAX_RANKINGS_LIMIT:
        raise TopStatsError.validation(
            f"Rankings limit must be between {MIN_RANKINGS_LIMIT} and {MAX_RANKINGS_LIMIT}"
        )
    return limit


def coerce_enum(enum_cls: type[E], value: E | str) -> E:
    """Accept an enum member or its raw string value."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise TopStatsError.validation(
            f"Invalid {enum_cls.__name__} {value!r}; expected one of: {allowed}"
        ) from None


def require_record(value: Any, what: str, *keys: str) -> dict:
    """Return `value` if it is a JSON object holding `keys`, else raise a transport error."""
    if not isinstance(value, dict):
        raise TopStatsError.transport(f"Malformed {what}: expected an object, got {type(value).__name__}")
    missing = [k for k in keys if k not in value]
    if missing:
        raise TopStatsError.transport(f"Malformed {what}: missing {', '.join(missing)}")
    return value


def require_list(value: Any, what: str) -> list:
    """Absent lists are empty; anything other than a JSON array is a transport error."""
    if value is None:
        return []
    if not isinstance(value, list):
        raise TopStatsError.transport(f"Malformed {what}: expected an array, got {type(value).__name__}")
    return value
