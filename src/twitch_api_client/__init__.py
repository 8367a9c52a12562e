"""Twitch API Client - async client for the Kraken and Helix HTTP APIs.

This library provides:
- One client for both API generations, selected per endpoint (``helix:streams``)
- Authorization headers in the scheme each generation expects
- Lazy initialization from the root status endpoint and scope checks
- One refresh-and-retry cycle when credentials are rejected

Example:
    ```python
    from twitch_api_client import ApiClient
    from twitch_api_client.auth import ScopeCheckError

    async def refresh_token() -> str:
        return await my_oauth_flow()

    api = ApiClient.from_env({"on_authentication_failure": refresh_token})
    await api.initialize()
    try:
        await api.has_scope("user_read")
    except ScopeCheckError:
        user = None
    else:
        user = await api.get("user")
    ```
"""

from twitch_api_client.client import ApiClient, ApiStatus, ReadyState, RetryState
from twitch_api_client.options import ClientOptions, LogOptions

__version__ = "0.1.0"

__all__ = [
    "ApiClient",
    "ApiStatus",
    "ClientOptions",
    "LogOptions",
    "ReadyState",
    "RetryState",
    "__version__",
]
