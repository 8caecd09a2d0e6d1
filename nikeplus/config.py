"""Central configuration for the Nike+ activity client.

All values are constants imported by the rest of the package. Overrides are
read from environment variables (optionally via a local `.env`).
"""

from __future__ import annotations

import importlib
import os


def _env_str(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_timeout(key: str) -> float | None:
    """Return a positive timeout in seconds, or None to keep the transport default."""

    value = os.getenv(key)
    if value is None:
        return None
    try:
        seconds = float(value)
    except ValueError:
        return None
    return seconds if seconds > 0 else None


# Load .env variables when python-dotenv is available.
_load_dotenv = None
try:
    _dotenv_mod = importlib.import_module("dotenv")
    _load_dotenv = getattr(_dotenv_mod, "load_dotenv", None)
except Exception:
    _load_dotenv = None

if callable(_load_dotenv):
    # Load .env from the current directory or any parent folder.
    _load_dotenv()


# ---------------------------------------------------------------------------
# Nike+ endpoints
# ---------------------------------------------------------------------------
# Public API host serving the /me/sport resources.
NIKEPLUS_API_BASE_URL = _env_str("NIKEPLUS_API_BASE_URL", "https://api.nike.com")

# Developer portal host handling the form login and the token exchange.
NIKEPLUS_DEVELOPER_URL = _env_str(
    "NIKEPLUS_DEVELOPER_URL", "https://developer.nike.com"
)
NIKEPLUS_LOGIN_URL = f"{NIKEPLUS_DEVELOPER_URL}/login"
NIKEPLUS_TOKEN_URL = f"{NIKEPLUS_DEVELOPER_URL}/get_auth_token"

# Path the login form asks the portal to continue to after authenticating.
NIKEPLUS_LOGIN_CONTINUE_URL = _env_str("NIKEPLUS_LOGIN_CONTINUE_URL", "/categories")


# ---------------------------------------------------------------------------
# HTTP transport
# ---------------------------------------------------------------------------
# Request timeout in seconds. Unset or 0 leaves the transport default (none).
REQUEST_TIMEOUT = _env_timeout("NIKEPLUS_REQUEST_TIMEOUT")

# HTTP session pool sizes.
HTTP_POOL_CONNECTIONS = _env_int("NIKEPLUS_HTTP_POOL_CONNECTIONS", 4)
HTTP_POOL_MAXSIZE = _env_int("NIKEPLUS_HTTP_POOL_MAXSIZE", 4)
