"""httpx-backed transport used by the API client.

The transport sends one request and decodes its body. It does not know about
API versions or credentials; headers arrive fully composed. Failed responses
are raised through :func:`twitch_api_client.errors.raise_for_status` so that a
401 surfaces as :class:`~twitch_api_client.errors.AuthenticationError` and
everything else as another :class:`~twitch_api_client.errors.APIError`.

Example:
    ```python
    import httpx
    from twitch_api_client.transport import Transport

    async with Transport() as transport:
        streams = await transport.fetch(
            "https://api.twitch.tv/helix/streams",
            headers={"Client-ID": "abc"},
            search={"first": 10},
        )
    ```
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from twitch_api_client.constants import DEFAULT_TIMEOUT
from twitch_api_client.errors import decode_body, raise_for_status

logger = logging.getLogger(__name__)


class Transport:
    """Thin async wrapper around :class:`httpx.AsyncClient`.

    Args:
        client: An existing client to send requests with. When omitted the
            transport creates and owns one, and closes it in :meth:`aclose`.
        timeout: Timeout in seconds for a created client (default: 30).
        owns_client: Close an injected ``client`` in :meth:`aclose`. Defaults to
            True only when the transport created the client itself.
    """

    def __init__(
        self,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        owns_client: bool | None = None,
    ) -> None:
        self._owns_client = client is None if owns_client is None else owns_client
        self._client = client if client is not None else httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this transport owns it."""
        if self._owns_client:
            await self._client.aclose()

    async def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        search: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send a request and return its decoded body.

        Args:
            url: Absolute request URL.
            method: HTTP method.
            headers: Request headers.
            body: Sent as JSON when it is a dict or list, as raw content otherwise.
            search: Query string parameters.

        Returns:
            Decoded JSON, the response text if it is not JSON, or None for an
            empty body.

        Raises:
            AuthenticationError: On 401.
            APIError: On any other non-2xx status.
            httpx.HTTPError: On network failures and timeouts.
        """
        kwargs: dict[str, Any] = {"headers": dict(headers or {})}
        if search:
            kwargs["params"] = dict(search)
        if isinstance(body, (dict, list)):
            kwargs["json"] = body
        elif body is not None:
            kwargs["content"] = body

        response = await self._client.request(method.upper(), url, **kwargs)
        logger.debug(f"{method.upper()} {url} -> {response.status_code}")

        raise_for_status(response)
        return decode_body(response)
