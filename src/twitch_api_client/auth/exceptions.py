"""Exceptions for credential resolution and scope checks.

Example:
    ```python
    from twitch_api_client.auth.exceptions import MissingScopeError

    try:
        await api.has_scope("user_read")
    except MissingScopeError as e:
        print(f"Token lacks {e.scope}")
    ```
"""


class CredentialError(Exception):
    """Base exception for credential-related errors."""

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass


class ScopeCheckError(Exception):
    """Negative result of :meth:`ApiClient.has_scope`.

    Instances are falsy, so ``bool(error)`` reads the same as a plain
    ``False`` result. Catch a subclass to tell the two causes apart.

    Attributes:
        scope: The scope that was checked.
    """

    def __init__(self, message: str, scope: str):
        super().__init__(message)
        self.scope = scope

    def __bool__(self) -> bool:
        return False


class NotInitializedError(ScopeCheckError):
    """Scopes were checked before the client fetched its status."""

    pass


class MissingScopeError(ScopeCheckError):
    """The current token was not granted the scope."""

    pass
