"""Endpoint parsing and base URL resolution.

Endpoints are written ``[<version>:]<path>``, e.g. ``"helix:streams"`` or
``"streams/featured"``. Only the Helix tag selects the modern API; every other
tag, and no tag at all, selects Kraken.
"""

import re
from typing import NamedTuple

from twitch_api_client.constants import HELIX_URL_ROOT, HELIX_VERSION, KRAKEN_URL_ROOT

_ENDPOINT_PATTERN = re.compile(r"^(?:([a-z]+):)?/?(.*)$", re.IGNORECASE | re.DOTALL)


class EndpointSpec(NamedTuple):
    version: str | None
    path: str


def parse_endpoint(endpoint: str = "") -> EndpointSpec:
    """Split ``endpoint`` into its version tag and path.

    A single leading slash on the path is dropped.
    """
    match = _ENDPOINT_PATTERN.match(endpoint or "")
    version, path = match.groups()
    return EndpointSpec(version, path)


def is_modern(version: str | None) -> bool:
    return version is not None and version.upper() == HELIX_VERSION.upper()


def get_base_url(version: str | None) -> str:
    if is_modern(version):
        return HELIX_URL_ROOT
    return KRAKEN_URL_ROOT


def resolve_url(endpoint: str = "") -> tuple[str | None, str]:
    """Return the version tag of ``endpoint`` and its absolute URL."""
    version, path = parse_endpoint(endpoint)
    return version, f"{get_base_url(version)}/{path}"
