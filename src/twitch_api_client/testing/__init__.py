"""Testing utilities for code built on the Twitch API client.

Example:
    ```python
    import httpx
    from twitch_api_client import ApiClient
    from twitch_api_client.testing import create_mock_transport, create_status_payload


    async def test_initialize():
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=create_status_payload(["user_read"]))

        api = ApiClient({"token": "abc"}, transport=create_mock_transport(handler))
        await api.initialize()
        assert await api.has_scope("user_read")
    ```
"""

from collections.abc import Callable, Sequence
from typing import Any

import httpx

from twitch_api_client.transport import Transport


def create_mock_transport(handler: Callable[[httpx.Request], Any]) -> Transport:
    """Wrap an ``httpx.MockTransport`` handler in a :class:`Transport` that owns its client."""
    return Transport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)), owns_client=True)


def create_status_payload(
    scopes: Sequence[str] = (),
    *,
    client_id: str = "client-id",
    user_name: str = "ronni",
    valid: bool = True,
) -> dict[str, Any]:
    """Build a root status response as returned by Kraken."""
    return {
        "token": {
            "authorization": {
                "scopes": list(scopes),
                "created_at": "2018-01-01T00:00:00Z",
                "updated_at": "2018-01-01T00:00:00Z",
            },
            "client_id": client_id,
            "user_id": "12345",
            "user_name": user_name,
            "valid": valid,
        }
    }


def create_error_response(status_code: int, message: str = "") -> httpx.Response:
    """Build an error response in Twitch's ``{"error", "status", "message"}`` shape."""
    return httpx.Response(
        status_code,
        json={
            "error": httpx.codes.get_reason_phrase(status_code),
            "status": status_code,
            "message": message,
        },
    )


__all__ = ["create_error_response", "create_mock_transport", "create_status_payload"]
