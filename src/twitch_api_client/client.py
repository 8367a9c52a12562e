"""Async client for the Twitch Kraken and Helix APIs.

Example:
    ```python
    from twitch_api_client import ApiClient

    async with ApiClient({"client_id": "abc", "token": "cfabdegwdoklmawdzdo98xt2fo512y"}) as api:
        featured = await api.get("streams/featured")
        streams = await api.get("helix:streams", search={"first": 10})
    ```
"""

import asyncio
import inspect
import logging
from collections.abc import Mapping
from enum import Enum, IntEnum, auto
from typing import Any, TypedDict

from twitch_api_client.auth import (
    CredentialResolver,
    MissingScopeError,
    NotInitializedError,
    compose_headers,
    merge_headers,
)
from twitch_api_client.endpoints import resolve_url
from twitch_api_client.errors import AuthenticationError
from twitch_api_client.options import ClientOptions, OptionsInput, OptionsStore
from twitch_api_client.profiling import Profiler
from twitch_api_client.transport import Transport


class ReadyState(IntEnum):
    UNINITIALIZED = 1
    INITIALIZED = 2


class RetryState(Enum):
    """Where a request is in its authentication-retry cycle."""

    FIRST_ATTEMPT = auto()
    RETRIED_AFTER_REAUTH = auto()


class TokenAuthorization(TypedDict, total=False):
    scopes: list[str]
    created_at: str
    updated_at: str


class TokenStatus(TypedDict, total=False):
    authorization: TokenAuthorization
    client_id: str
    user_id: str
    user_name: str
    valid: bool


class ApiStatus(TypedDict, total=False):
    """Root endpoint response describing the current token."""

    token: TokenStatus


class ApiClient:
    """Client for both Twitch API generations.

    Endpoints prefixed with ``helix:`` go to Helix with a ``Bearer`` token;
    everything else goes to Kraken with an ``OAuth`` token. A request rejected
    with 401 asks ``on_authentication_failure`` for a new token and is sent
    once more.

    Args:
        options: Client options, validated as :class:`ClientOptions`.
        transport: Transport to send requests with. A default
            :class:`Transport` is created when omitted.

    Raises:
        pydantic.ValidationError: If ``options`` is malformed.
    """

    def __init__(self, options: OptionsInput | None = None, *, transport: Transport | None = None) -> None:
        self._store = OptionsStore(options)
        self.log = self._create_profiler()
        self._transport = transport if transport is not None else Transport()
        self._ready_state = ReadyState.UNINITIALIZED
        self._status: ApiStatus = {}
        self._initializing: asyncio.Task | None = None

    @classmethod
    def from_env(
        cls,
        options: OptionsInput | None = None,
        *,
        resolver: CredentialResolver | None = None,
        transport: Transport | None = None,
    ) -> "ApiClient":
        """Create a client with credentials resolved from the environment.

        Explicit ``client_id``/``token`` in ``options`` take precedence over
        ``TWITCH_CLIENT_ID``, ``TWITCH_TOKEN`` and ``TWITCH_TOKEN_FILE``.
        """
        options = dict(options or {})
        resolver = resolver or CredentialResolver()
        credentials = resolver.resolve_client_options(
            client_id=options.pop("client_id", None),
            token=options.pop("token", None),
        )
        return cls({**options, **credentials}, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        await self._transport.aclose()

    @property
    def options(self) -> ClientOptions:
        return self._store.get_options()

    @property
    def ready_state(self) -> ReadyState:
        return self._ready_state

    @property
    def status(self) -> ApiStatus:
        return self._status

    def _create_profiler(self) -> Profiler:
        log_options = self.options.log_options
        return Profiler(log_options.name, log_options.level)

    def update_options(self, options: OptionsInput) -> ClientOptions:
        """Update client options other than credentials.

        ``client_id`` and ``token`` are kept; change them with
        :meth:`initialize`.
        """
        updated = self._store.update_options(options)
        self.log = self._create_profiler()
        return updated

    async def initialize(self, options: OptionsInput | None = None) -> ApiStatus | None:
        """Fetch the API status and mark the client initialized.

        Args:
            options: New options, credentials included, merged in before the
                status is fetched.

        Returns:
            The status payload, or None when the client was already
            initialized and no new options were given.

        Concurrent calls share one in-flight status fetch.
        """
        if options is not None:
            self._store.replace_credentials(options)
        elif self._ready_state is ReadyState.INITIALIZED:
            return None
        elif self._initializing is not None:
            return await asyncio.shield(self._initializing)

        task = asyncio.ensure_future(self._fetch_status())
        self._initializing = task
        task.add_done_callback(self._clear_initializing)
        return await asyncio.shield(task)

    def _clear_initializing(self, task: asyncio.Task) -> None:
        if self._initializing is task:
            self._initializing = None

    async def _fetch_status(self) -> ApiStatus:
        status = await self.get()
        if not isinstance(status, Mapping):
            status = {}
        self._ready_state = ReadyState.INITIALIZED
        self._status = status
        return status

    async def has_scope(self, scope: str) -> bool:
        """Check whether the current token was granted ``scope``.

        Returns:
            True if it was.

        Raises:
            NotInitializedError: If :meth:`initialize` has not completed.
            MissingScopeError: If the scope was not granted.
        """
        if self._ready_state is not ReadyState.INITIALIZED:
            raise NotInitializedError(f"Cannot check scope '{scope}' before initialization", scope=scope)

        scopes: Any = self._status
        for key in ("token", "authorization", "scopes"):
            scopes = scopes.get(key) if isinstance(scopes, Mapping) else None
        if isinstance(scopes, (list, tuple)) and scope in scopes:
            return True

        raise MissingScopeError(f"Token was not granted scope '{scope}'", scope=scope)

    async def get(self, endpoint: str = "", **options: Any) -> Any:
        """GET ``endpoint``.

        Example:
            ```python
            streams = await api.get("streams", search={"game": "Overwatch"})
            ```
        """
        return await self.request(endpoint, **{**options, "method": "GET"})

    async def post(self, endpoint: str = "", **options: Any) -> Any:
        """POST ``endpoint``."""
        return await self.request(endpoint, **{**options, "method": "POST"})

    async def put(self, endpoint: str = "", **options: Any) -> Any:
        """PUT ``endpoint``."""
        return await self.request(endpoint, **{**options, "method": "PUT"})

    async def request(
        self,
        endpoint: str = "",
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        search: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send a request to ``endpoint`` and return the decoded response.

        Args:
            endpoint: ``[<version>:]<path>``, e.g. ``"helix:users"``.
            method: HTTP method.
            headers: Extra headers. ``Accept`` and any configured
                ``Client-ID``/``Authorization`` replace caller values.
            body: JSON body (dict or list) or raw content.
            search: Query string parameters.

        Raises:
            AuthenticationError: If credentials are rejected and either no
                ``on_authentication_failure`` is configured or the retry with
                the refreshed token is rejected too.
            APIError: For any other failed response, without retry.
        """
        method = method.upper()
        version, url = resolve_url(endpoint)
        message = f"{method} {url}"
        retry_state = RetryState.FIRST_ATTEMPT

        while True:
            # Read credentials per attempt so a refreshed token is picked up
            request_headers = merge_headers(headers, compose_headers(version, self.options))
            timer = self.log.start_timer()
            try:
                response = await self._transport.fetch(
                    url, method=method, headers=request_headers, body=body, search=search
                )
            except AuthenticationError as error:
                timer.done(error.body, level=logging.ERROR)
                if retry_state is RetryState.RETRIED_AFTER_REAUTH or self.options.on_authentication_failure is None:
                    raise
                await self._reauthenticate()
                retry_state = RetryState.RETRIED_AFTER_REAUTH
                continue
            except asyncio.CancelledError:
                timer.done(f"{message} cancelled", level=logging.WARNING)
                raise
            except Exception as error:
                timer.done(getattr(error, "body", None) or error, level=logging.ERROR)
                raise

            timer.done(message)
            return response

    async def _reauthenticate(self) -> None:
        token = self.options.on_authentication_failure()
        if inspect.isawaitable(token):
            token = await token
        self._store.replace_credentials({"token": token})
        self.log.info("Retrying (with new credentials)")
