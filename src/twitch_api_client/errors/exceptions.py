"""Structured exceptions for Twitch API errors."""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import httpx

    from twitch_api_client.errors.models import ErrorDetail


class APIError(Exception):
    """Base exception for HTTP errors returned by the API.

    Attributes:
        status_code: HTTP status of the failed response.
        response: The raw httpx response.
        body: Decoded JSON body, or the response text when it is not JSON.
        detail: Parsed Twitch error body, if the response carried one.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
        body: Any = None,
        detail: "ErrorDetail | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.body = body
        self.detail = detail


class ClientError(APIError):
    """4xx client errors."""

    pass


class BadRequestError(ClientError):
    """400 Bad Request."""

    pass


class AuthenticationError(ClientError):
    """401 Unauthorized: the server rejected the configured credentials."""

    pass


class ForbiddenError(ClientError):
    """403 Forbidden."""

    pass


class NotFoundError(ClientError):
    """404 Not Found."""

    pass


class ConflictError(ClientError):
    """409 Conflict."""

    pass


class UnprocessableEntityError(ClientError):
    """422 Unprocessable Entity."""

    pass


class RateLimitError(ClientError):
    """429 Too Many Requests."""

    def __init__(self, message: str, retry_after: int | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServerError(APIError):
    """5xx server errors."""

    pass
