"""Models for Twitch error response bodies."""

from dataclasses import dataclass
from typing import Any

import httpx

_STANDARD_FIELDS = frozenset({"error", "status", "message"})


@dataclass
class ErrorDetail:
    """Error body as returned by both Kraken and Helix.

    Example body: ``{"error": "Unauthorized", "status": 401, "message": "invalid oauth token"}``
    """

    error: str | None = None  # Reason phrase, e.g. "Unauthorized"
    status: int | None = None
    message: str | None = None  # Human-readable explanation

    extensions: dict[str, Any] | None = None

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ErrorDetail | None":
        """Parse the error body of ``response``.

        Returns:
            ErrorDetail, or None if the body is not a JSON object with at least
            one of the standard fields
        """
        try:
            data = response.json()
        except (ValueError, TypeError, AttributeError):
            return None

        if not isinstance(data, dict) or not any(field in data for field in _STANDARD_FIELDS):
            return None

        extensions = {k: v for k, v in data.items() if k not in _STANDARD_FIELDS}

        return cls(
            error=data.get("error"),
            status=data.get("status"),
            message=data.get("message"),
            extensions=extensions or None,
        )

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        parts = []

        if self.status is not None:
            parts.append(str(self.status))
        if self.error:
            parts.append(self.error)

        head = " ".join(parts)
        if self.message and self.message != self.error:
            return f"{head}: {self.message}" if head else self.message

        return head or "Unknown API error"
