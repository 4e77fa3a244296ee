"""
Error type raised by every client operation.

A single exception class carries a `kind` discriminator instead of a subclass
tree, so callers can branch on `err.kind` exhaustively.
"""
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    API = "api"
    TRANSPORT = "transport"


class TopStatsError(Exception):
    """Failure of a TopStats client operation, tagged with its kind."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        status_code: int | None = None,
        status_text: str | None = None,
        expires_in: Any = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code
        self.status_text = status_text
        self.expires_in = expires_in

    def __repr__(self) -> str:
        return f"TopStatsError(kind={self.kind.value!r}, message={self.message!r})"

    @classmethod
    def configuration(cls, message: str) -> "TopStatsError":
        return cls(ErrorKind.CONFIGURATION, message)

    @classmethod
    def validation(cls, message: str) -> "TopStatsError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def rate_limit(cls, message: str, expires_in: Any) -> "TopStatsError":
        """HTTP 429. `expires_in` is the server's expiresIn value, untouched."""
        return cls(ErrorKind.RATE_LIMIT, message, status_code=429, expires_in=expires_in)

    @classmethod
    def api(cls, status_code: int, status_text: str) -> "TopStatsError":
        return cls(
            ErrorKind.API,
            f"API Error {status_code}: {status_text}",
            status_code=status_code,
            status_text=status_text,
        )

    @classmethod
    def transport(cls, message: str) -> "TopStatsError":
        return cls(ErrorKind.TRANSPORT, message)
