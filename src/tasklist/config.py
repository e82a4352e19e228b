# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default, so an empty environment is a valid config.
- Bad values fall back to defaults instead of failing at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Console ----
    prompt: str
    quit_command: str

    # ---- Behavior ----
    reset_existing_projects: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklist").strip() or "tasklist"
        log_level = _env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING"
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/tasklist"))
        log_to_file = _env_bool(_k("LOG_TO_FILE"), False)

        # Prompt keeps its trailing space, so it is not stripped.
        prompt = _env(_k("PROMPT"), "> ") or "> "
        quit_command = _env(_k("QUIT_COMMAND"), "quit").strip() or "quit"

        reset_existing_projects = _env_bool(_k("RESET_EXISTING_PROJECTS"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            log_to_file=log_to_file,
            prompt=prompt,
            quit_command=quit_command,
            reset_existing_projects=reset_existing_projects,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Load settings once (reads a local .env first, never overriding real env vars)."""
    global _SETTINGS
    if _SETTINGS is None:
        load_dotenv(override=False)
        _SETTINGS = Settings.from_env()
    return _SETTINGS
