"""
Process configuration from the environment (and an optional .env file).
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parent.parent

DEFAULT_PORT = 10000
DEFAULT_PROTOCOL_VERSION = "2024-11-05"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def load_env() -> None:
    """Load .env from the project root or cwd. Real environment variables win."""
    for env_path in [ROOT / ".env", Path(os.getcwd()).resolve() / ".env"]:
        if env_path.exists():
            load_dotenv(env_path, override=False)
            break


def _env_bool(environ, key: str, default: bool) -> bool:
    raw = environ.get(key, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{key} must be a boolean (true/false), got {raw!r}")


def _env_port(environ) -> int:
    raw = environ.get("PORT", "").strip()
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"PORT must be an integer, got {raw!r}") from None
    if not 0 <= port <= 65535:
        raise ValueError(f"PORT out of range: {port}")
    return port


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    enforce_accept: bool = True
    enable_resources: bool = True
    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from `environ` (defaults to os.environ)."""
        if environ is None:
            environ = os.environ
        return cls(
            host=environ.get("HOST", "").strip() or "0.0.0.0",
            port=_env_port(environ),
            enforce_accept=_env_bool(environ, "GDS_ENFORCE_ACCEPT", True),
            enable_resources=_env_bool(environ, "GDS_ENABLE_RESOURCES", True),
            protocol_version=environ.get("GDS_PROTOCOL_VERSION", "").strip() or DEFAULT_PROTOCOL_VERSION,
            log_level=(environ.get("LOG_LEVEL", "").strip() or "INFO").upper(),
        )
