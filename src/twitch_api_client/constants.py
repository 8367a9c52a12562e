"""Constants for the Twitch HTTP APIs."""

HELIX_URL_ROOT = "https://api.twitch.tv/helix"
KRAKEN_URL_ROOT = "https://api.twitch.tv/kraken"

# Version tag selecting the modern (Helix) API generation
HELIX_VERSION = "helix"

ACCEPT_HEADER = "application/vnd.twitchtv.v5+json"

DEFAULT_TIMEOUT = 30.0

DEFAULT_LOGGER_NAME = "twitch_api_client.api"
