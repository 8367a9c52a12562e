"""Client options and the store that validates every change to them.

Options are immutable pydantic models. Every write, including the one made at
construction, goes through :meth:`OptionsStore.set_options`, which validates
the complete new value before swapping it in. A failed validation raises
:class:`pydantic.ValidationError` and leaves the previous options in place.

Example:
    ```python
    store = OptionsStore({"client_id": "abc"})
    store.update_options({"log_options": {"level": "DEBUG"}})
    store.get_options().client_id  # "abc"
    ```
"""

from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from twitch_api_client.constants import DEFAULT_LOGGER_NAME

AuthenticationFailureCallback = Callable[[], Awaitable[str] | str]

OptionsInput = Mapping[str, Any] | BaseModel

_CREDENTIAL_FIELDS = ("client_id", "token")


class LogOptions(BaseModel):
    """Logger configuration for a client."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = DEFAULT_LOGGER_NAME
    level: int | str | None = None


class ClientOptions(BaseModel):
    """Validated client configuration.

    Attributes:
        client_id: Application client id, sent as ``Client-ID``.
        token: OAuth token, sent as ``Authorization``.
        on_authentication_failure: Called when the server rejects the token;
            returns (or resolves to) a fresh token.
        log_options: Logger name and level.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    client_id: str | None = None
    token: str | None = None
    on_authentication_failure: AuthenticationFailureCallback | None = None
    log_options: LogOptions = Field(default_factory=LogOptions)

    @field_validator("client_id", "token", mode="before")
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


def _as_mapping(options: OptionsInput) -> dict[str, Any]:
    # Only explicitly set fields count, so a partial model never resets others
    if isinstance(options, BaseModel):
        return {name: getattr(options, name) for name in options.model_fields_set}
    return dict(options)


class OptionsStore:
    """Owner of the current :class:`ClientOptions` snapshot."""

    def __init__(self, options: OptionsInput | None = None) -> None:
        self._options = ClientOptions()
        self.set_options(options or {})

    def get_options(self) -> ClientOptions:
        return self._options

    def set_options(self, options: OptionsInput) -> ClientOptions:
        """Validate ``options`` and replace the stored options with them.

        Raises:
            pydantic.ValidationError: If ``options`` is malformed.
        """
        validated = ClientOptions.model_validate(_as_mapping(options))
        self._options = validated
        return validated

    def update_options(self, options: OptionsInput) -> ClientOptions:
        """Merge ``options`` over the current ones, keeping the credentials.

        ``client_id`` and ``token`` are only changed by
        :meth:`replace_credentials`.
        """
        current = dict(self._options)
        merged = {**current, **_as_mapping(options)}
        for name in _CREDENTIAL_FIELDS:
            merged[name] = current[name]
        return self.set_options(merged)

    def replace_credentials(self, options: OptionsInput) -> ClientOptions:
        """Merge ``options`` over the current ones, credentials included."""
        return self.set_options({**dict(self._options), **_as_mapping(options)})
