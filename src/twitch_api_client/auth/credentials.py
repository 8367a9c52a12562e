"""Twitch credential resolution.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv)
4. Token file (``TWITCH_TOKEN_FILE``, token only)
5. Default value

Example:
    ```python
    from twitch_api_client.auth import CredentialResolver

    resolver = CredentialResolver()
    options = resolver.resolve_client_options()
    # {"client_id": "...", "token": "..."}
    ```

Credential values are never logged; only their source is.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from twitch_api_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

CLIENT_ID_ENV_VAR = "TWITCH_CLIENT_ID"
TOKEN_ENV_VAR = "TWITCH_TOKEN"
TOKEN_FILE_ENV_VAR = "TWITCH_TOKEN_FILE"


class CredentialResolver:
    """Resolve Twitch credentials from explicit values, the environment or files.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Set to False to skip .env loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for credential resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Resolve one credential.

        Args:
            value: Explicit value; wins over every other source.
            env_var_name: Environment variable to read (after .env loading).
            default: Fallback when nothing else is set.
            required: Raise instead of returning None.

        Raises:
            CredentialNotFoundError: If ``required`` and nothing resolved.
        """
        if value is not None:
            logger.debug("Resolved credential from explicit parameter (***)")
            return value

        if env_var_name and os.environ.get(env_var_name):
            logger.debug(f"Resolved credential from environment variable '{env_var_name}' (***)")
            return os.environ[env_var_name]

        if default is not None:
            logger.debug("Resolved credential from default value")
            return default

        if required:
            message = "Required credential not found"
            if env_var_name:
                message += f" (checked environment variable '{env_var_name}')"
            raise CredentialNotFoundError(message, env_var_name=env_var_name)

        return None

    def resolve_from_file(self, file_path: str | Path | None = None, *, required: bool = False) -> str | None:
        """Read a credential from ``file_path`` or the path in ``TWITCH_TOKEN_FILE``.

        ``~`` and ``$VARS`` in the path are expanded; surrounding whitespace is
        stripped from the contents.

        Raises:
            CredentialFileError: If ``required`` and the file cannot be read.
        """
        path = str(file_path) if file_path is not None else os.environ.get(TOKEN_FILE_ENV_VAR)

        if not path:
            if required:
                raise CredentialFileError(f"No credential file given (env var '{TOKEN_FILE_ENV_VAR}' not set)")
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path)))

        try:
            content = path_obj.read_text().strip()
        except OSError as e:
            message = f"Cannot read credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(message) from e
            logger.warning(message)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content or None

    def resolve_client_options(
        self,
        *,
        client_id: str | None = None,
        token: str | None = None,
        required: bool = False,
    ) -> dict[str, str | None]:
        """Resolve ``client_id`` and ``token`` for :class:`ClientOptions`.

        With ``required`` set, at least one of the two must resolve.
        """
        resolved_client_id = self.resolve(value=client_id, env_var_name=CLIENT_ID_ENV_VAR)
        resolved_token = self.resolve(value=token, env_var_name=TOKEN_ENV_VAR)
        if resolved_token is None:
            resolved_token = self.resolve_from_file()

        if required and resolved_client_id is None and resolved_token is None:
            raise CredentialNotFoundError(
                f"Neither '{CLIENT_ID_ENV_VAR}' nor '{TOKEN_ENV_VAR}' is set",
                env_var_name=CLIENT_ID_ENV_VAR,
            )

        return {"client_id": resolved_client_id, "token": resolved_token}
