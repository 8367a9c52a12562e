"""Error handling utilities for HTTP responses."""

from typing import Any

import httpx

from twitch_api_client.errors.exceptions import (
    APIError,
    AuthenticationError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnprocessableEntityError,
)
from twitch_api_client.errors.models import ErrorDetail

_EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def decode_body(response: httpx.Response) -> Any:
    """Return the JSON body of ``response``, its text if not JSON, or None if empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def raise_for_status(response: httpx.Response) -> None:
    """Raise appropriate exception for HTTP error responses.

    Args:
        response: HTTP response object

    Raises:
        APIError subclass based on status code; 401 raises AuthenticationError
    """
    if response.is_success:
        return

    status_code = response.status_code

    if status_code in _EXCEPTION_MAP:
        exc_class = _EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    detail = ErrorDetail.from_response(response)
    if detail:
        message = detail.to_exception_message()
    else:
        response_text = response.text[:200]
        message = f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"

    kwargs: dict[str, Any] = {
        "status_code": status_code,
        "response": response,
        "body": decode_body(response),
        "detail": detail,
    }

    if exc_class is RateLimitError:
        retry_after = None
        if "retry-after" in response.headers:
            try:
                retry_after = int(response.headers["retry-after"])
            except (ValueError, TypeError):
                retry_after = None
        raise RateLimitError(message, retry_after=retry_after, **kwargs)

    raise exc_class(message, **kwargs)
