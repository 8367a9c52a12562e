"""Error handling for Twitch API responses."""

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
from twitch_api_client.errors.handler import decode_body, raise_for_status
from twitch_api_client.errors.models import ErrorDetail

__all__ = [
    "APIError",
    "AuthenticationError",
    "BadRequestError",
    "ClientError",
    "ConflictError",
    "ErrorDetail",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "UnprocessableEntityError",
    "decode_body",
    "raise_for_status",
]
