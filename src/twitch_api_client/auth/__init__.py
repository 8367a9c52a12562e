"""Authentication components for the Twitch API client.

This module provides:
- Authorization header composition for Helix (``Bearer``) and Kraken (``OAuth``)
- Credential resolution (value → env → .env → token file → default)
- Scope check results

Example:
    ```python
    from twitch_api_client.auth import CredentialResolver

    resolver = CredentialResolver()
    token = resolver.resolve(env_var_name="TWITCH_TOKEN", required=True)
    ```
"""

from twitch_api_client.auth.credentials import CredentialResolver
from twitch_api_client.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
    MissingScopeError,
    NotInitializedError,
    ScopeCheckError,
)
from twitch_api_client.auth.headers import compose_headers, get_authorization_type, merge_headers

__all__ = [
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "MissingScopeError",
    "NotInitializedError",
    "ScopeCheckError",
    "compose_headers",
    "get_authorization_type",
    "merge_headers",
]
