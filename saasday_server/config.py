"""
Runtime configuration for the SaaS Day auth API.

Values come from the process environment. A ``.env`` file at the project root
is loaded first when present; variables already set in the environment win.

- PORT: listening port (default 3000)
- HOST: bind address (default 0.0.0.0)
- LOG_LEVEL: root log level (default INFO, DEBUG when FLASK_ENV=development)
- CORS_ORIGINS: comma separated allowed origins (default *)
- AUTH_API_KEYS: comma separated keys; enables the API key gate when set
- SECURITY_LOG_FILE: optional file for the security log
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from saasday_server.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).resolve().parent.parent
ENV_PATH = _ROOT / ".env"

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"


def load_env_file(env_path: Path = ENV_PATH) -> bool:
    """Load ``.env`` into os.environ without overriding existing values."""
    if not env_path.exists():
        return False
    loaded = load_dotenv(env_path, override=False)
    if loaded:
        logger.debug("[BOOT] Environment loaded from %s", env_path)
    return loaded


def _split_csv(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def parse_port(raw: Optional[str]) -> int:
    """Resolve a port number, falling back to the default when unset."""
    if raw is None or not str(raw).strip():
        return DEFAULT_PORT
    try:
        port = int(str(raw).strip())
    except ValueError:
        raise ConfigurationError(
            f"PORT must be an integer, got {raw!r}",
            details={'PORT': raw},
        ) from None
    if not 1 <= port <= 65535:
        raise ConfigurationError(
            f"PORT must be between 1 and 65535, got {port}",
            details={'PORT': raw},
        )
    return port


@dataclass
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    auth_api_keys: List[str] = field(default_factory=list)
    security_log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, load_dotenv_file: bool = True) -> "Settings":
        """Build settings from ``environ`` (defaults to os.environ)."""
        if environ is None:
            if load_dotenv_file:
                load_env_file()
            environ = os.environ

        default_level = "DEBUG" if environ.get("FLASK_ENV") == "development" else "INFO"
        log_level = (environ.get("LOG_LEVEL") or default_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"Unknown LOG_LEVEL {log_level!r}", details={'LOG_LEVEL': log_level})

        return cls(
            port=parse_port(environ.get("PORT")),
            host=(environ.get("HOST") or DEFAULT_HOST).strip(),
            log_level=log_level,
            cors_origins=_split_csv(environ.get("CORS_ORIGINS")) or ["*"],
            auth_api_keys=_split_csv(environ.get("AUTH_API_KEYS")),
            security_log_file=(environ.get("SECURITY_LOG_FILE") or "").strip() or None,
        )
