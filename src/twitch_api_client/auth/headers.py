"""Authorization header composition for both API generations.

Helix expects ``Authorization: Bearer <token>``, Kraken expects
``Authorization: OAuth <token>``. Both accept ``Client-ID``. Credentials that
are not configured are left out of the headers entirely.
"""

from collections.abc import Mapping

from twitch_api_client.constants import ACCEPT_HEADER
from twitch_api_client.endpoints import is_modern
from twitch_api_client.options import ClientOptions


def get_authorization_type(version: str | None) -> str:
    if is_modern(version):
        return "Bearer"
    return "OAuth"


def compose_headers(version: str | None, options: ClientOptions) -> dict[str, str]:
    """Build the auth headers for a request to API ``version``."""
    headers = {"Accept": ACCEPT_HEADER}
    if options.client_id:
        headers["Client-ID"] = options.client_id
    if options.token:
        headers["Authorization"] = f"{get_authorization_type(version)} {options.token}"
    return headers


def merge_headers(caller_headers: Mapping[str, str] | None, auth_headers: Mapping[str, str]) -> dict[str, str]:
    """Overlay ``auth_headers`` on ``caller_headers``.

    A caller header is dropped when ``auth_headers`` sets the same name, in any
    casing; all other caller headers are kept.
    """
    overridden = {name.lower() for name in auth_headers}
    merged = {name: value for name, value in (caller_headers or {}).items() if name.lower() not in overridden}
    merged.update(auth_headers)
    return merged
