"""
config.py
---------
Central configuration module. Reads settings from the process environment,
optionally overridden by a `.env` file, and exposes them as a typed Config.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

from utils.errors import ConfigError

DEFAULT_ENV_FILE = ".env"
DEFAULT_SQLITE_PATH = "./database/quiz.db"
DEFAULT_POLL_TIMEOUT = 30
DEFAULT_RETRY_DELAY = 5.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Config:
    """
    Resolved bot settings.

    Attributes:
        bot_token: Telegram Bot API token.
        sqlite_path: Location of the SQLite question store.
        poll_timeout: Long-polling timeout passed to getUpdates, in seconds.
        retry_delay: Pause after a failed poll before retrying, in seconds.
        log_level: Root log level name.
    """
    bot_token: str
    sqlite_path: str = DEFAULT_SQLITE_PATH
    poll_timeout: int = DEFAULT_POLL_TIMEOUT
    retry_delay: float = DEFAULT_RETRY_DELAY
    log_level: str = DEFAULT_LOG_LEVEL


def _read_settings(env_file: str | os.PathLike) -> dict[str, str]:
    """Merge the environment with the override file (file wins)."""
    settings = dict(os.environ)
    if Path(env_file).is_file():
        overrides = dotenv_values(env_file)
        settings.update({k: v for k, v in overrides.items() if v is not None})
    return settings


def _parse_number(settings: dict[str, str], key: str, default, cast):
    raw = settings.get(key, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        raise ConfigError(f"{key} must be a number, got {raw!r}") from None
    if value < 0:
        raise ConfigError(f"{key} must not be negative, got {raw!r}")
    return value


def load_config(env_file: str | os.PathLike = DEFAULT_ENV_FILE) -> Config:
    """
    Load and validate the bot configuration.

    Args:
        env_file: Optional KEY=VALUE override file. Missing files are ignored.

    Returns:
        A populated Config.

    Raises:
        ConfigError: If BOT_TOKEN is absent, a numeric setting is malformed,
            or the store directory cannot be created.
    """
    settings = _read_settings(env_file)

    # ── Telegram ──────────────────────────────────────────────
    bot_token = settings.get("BOT_TOKEN", "").strip()
    if not bot_token:
        raise ConfigError("BOT_TOKEN is not set")

    # ── SQLite ────────────────────────────────────────────────
    sqlite_path = settings.get("SQLITE_PATH", "").strip() or DEFAULT_SQLITE_PATH
    try:
        Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Cannot create directory for {sqlite_path}: {e}") from e

    # ── Polling ───────────────────────────────────────────────
    poll_timeout = _parse_number(settings, "POLL_TIMEOUT", DEFAULT_POLL_TIMEOUT, int)
    retry_delay = _parse_number(settings, "RETRY_DELAY", DEFAULT_RETRY_DELAY, float)

    log_level = settings.get("LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL

    return Config(
        bot_token=bot_token,
        sqlite_path=sqlite_path,
        poll_timeout=poll_timeout,
        retry_delay=retry_delay,
        log_level=log_level,
    )
