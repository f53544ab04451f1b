# =============================================================================
# core/config.py  —  Process-wide settings, read once at startup
# =============================================================================
#
# ENVIRONMENT VARIABLES:
#   KENALL_API_KEY       The ken-all API token.  Missing is NOT fatal at
#                        startup; every tool call fails until it is set.
#   KENALL_API_BASE_URL  Upstream base URL (default https://api.kenall.jp/v1).
#   KENALL_API_TIMEOUT   Optional socket timeout in seconds.  Unset means no
#                        timeout beyond what urllib itself applies.
#
# The entry point calls load_dotenv() first, so a local .env file works too.
# Nothing below the entry point reads os.environ: the Settings object is
# passed explicitly into the adapter.
# =============================================================================

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

SERVER_NAME = "kenall-mcp"
SERVER_VERSION = "0.1.0"
DEFAULT_BASE_URL = "https://api.kenall.jp/v1"

API_KEY_ENV = "KENALL_API_KEY"
BASE_URL_ENV = "KENALL_API_BASE_URL"
TIMEOUT_ENV = "KENALL_API_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None

    @property
    def has_credential(self) -> bool:
        return bool(self.api_key)


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {TIMEOUT_ENV}={raw!r}: not a number")
        return None
    if value <= 0:
        logger.warning(f"Ignoring {TIMEOUT_ENV}={raw!r}: must be positive")
        return None
    return value


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the process environment (or the given mapping).

    Args:
        environ: Mapping to read instead of ``os.environ`` (used by tests).

    Returns:
        A frozen Settings instance.  ``api_key`` is None when the variable is
        unset or empty.
    """
    env = os.environ if environ is None else environ

    api_key = env.get(API_KEY_ENV) or None
    base_url = (env.get(BASE_URL_ENV) or DEFAULT_BASE_URL).rstrip("/")
    timeout = _parse_timeout(env.get(TIMEOUT_ENV))

    if api_key is None:
        logger.warning(f"{API_KEY_ENV} is not set; tool calls will fail until it is")

    return Settings(api_key=api_key, base_url=base_url, timeout=timeout)
