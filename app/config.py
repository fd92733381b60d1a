"""Configuration from environment."""

import os

from dotenv import load_dotenv

load_dotenv()


def _read_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def get_host() -> str:
    return os.environ.get("HOST", "127.0.0.1").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000


def get_debug() -> bool:
    """Verbose finder logging for every root, whatever its options say."""
    return _read_flag("STRING_LITERAL_FINDER_DEBUG")


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
