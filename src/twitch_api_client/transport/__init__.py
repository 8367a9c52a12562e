"""Transport layer for the Twitch API client.

Modules:
    http: httpx-backed transport that raises typed errors for failed responses

Example:
    ```python
    import httpx
    from twitch_api_client.transport import Transport

    transport = Transport(client=httpx.AsyncClient(timeout=10))
    ```
"""

from twitch_api_client.transport.http import Transport

__all__ = ["Transport"]
