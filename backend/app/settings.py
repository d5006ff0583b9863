from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Mapping

from dotenv import load_dotenv
from pydantic import Field, field_validator

from app.schemas.common import APIModel, _strip_or_none


# backend/app/settings.py -> project root
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "info"

LogLevel = Literal["critical", "error", "warning", "info", "debug", "trace"]


def debug_enabled(environ: Mapping[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    return (env.get("WEBAPP_DEBUG") or "false").strip().lower() == "true"


def log_debug(msg: str, debug: bool | None = None) -> None:
    """Print a diagnostic line. `debug=None` defers to WEBAPP_DEBUG."""
    if debug is None:
        debug = debug_enabled()
    if debug:
        print(msg)


class ServerSettings(APIModel):
    host: str = Field(default=DEFAULT_HOST, min_length=1)
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    log_level: LogLevel = DEFAULT_LOG_LEVEL
    debug: bool = False

    strip_strings = field_validator("host", "log_level", mode="before")(_strip_or_none)

    @field_validator("log_level", mode="before")
    @classmethod
    def lower_log_level(cls, v: object) -> object:
        if isinstance(v, str):
            return v.lower()
        return v

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


def load_env_file() -> Path | None:
    """
    Load `.env` from the project root (or the current directory).

    Shell variables always win: the file never overrides what is already set.
    """
    possible_paths = [
        _PROJECT_ROOT / ".env",
        Path.cwd() / ".env",
    ]
    for env_path in possible_paths:
        env_path = env_path.resolve()
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)
            log_debug(f"[CONFIG] Loaded .env from: {env_path}")
            return env_path

    log_debug(f"[CONFIG] No .env file found. Tried paths: {[str(p) for p in possible_paths]}")
    return None


def load_settings(environ: Mapping[str, str] | None = None) -> ServerSettings:
    """
    Central listener configuration.

    Reads WEBAPP_HOST / WEBAPP_PORT / WEBAPP_LOG_LEVEL / WEBAPP_DEBUG.
    Blank values fall back to the defaults. Raises pydantic.ValidationError
    on anything invalid (e.g. a port outside 1..65535).
    """
    env = os.environ if environ is None else environ

    values: dict[str, object] = {"debug": debug_enabled(env)}
    for key, var in (("host", "WEBAPP_HOST"), ("port", "WEBAPP_PORT"), ("log_level", "WEBAPP_LOG_LEVEL")):
        raw = (env.get(var) or "").strip()
        if raw:
            values[key] = raw

    return ServerSettings(**values)
