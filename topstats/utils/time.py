from datetime import datetime, timezone


def parse_iso_utc(ts: str | None) -> datetime | None:
    """Parse an ISO-8601 UTC timestamp (with trailing 'Z') to an aware datetime.

    Returns None if the input is falsy. Naive results are assumed to be UTC.
    """
    if not ts:
        return None
    if ts.endswith("Z"):
        ts = ts[:-1] + "+00:00"
    dt = datetime.fromisoformat(ts)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
