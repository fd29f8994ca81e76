from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

ENV_PREFIX = "GAMES_API_"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "DEBUG"
    max_body_bytes: int = 1024 * 32
    seed_example_data: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``GAMES_API_*`` variables, loading ``.env`` first."""
        if environ is None:
            load_dotenv()
            environ = os.environ

        defaults = cls()
        return cls(
            host=environ.get(f"{ENV_PREFIX}HOST", defaults.host),
            port=_int(environ, "PORT", defaults.port),
            log_level=environ.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level).upper(),
            max_body_bytes=_int(environ, "MAX_BODY_BYTES", defaults.max_body_bytes),
            seed_example_data=_bool(environ, "SEED_EXAMPLE_DATA", defaults.seed_example_data),
        )


def _int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{ENV_PREFIX}{name} must not be negative, got {value}")
    return value


def _bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(f"{ENV_PREFIX}{name}")
    if raw is None or raw.strip() == "":
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")
