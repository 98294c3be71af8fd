# treezip/config.py
"""Environment-backed settings for treezip."""

from dataclasses import dataclass
from functools import lru_cache
import os
from typing import Optional

DEFAULT_PLACEHOLDER = "// Your code here"
DEFAULT_ARCHIVE_NAME = "project.zip"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _get_env(name: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    """Fetch an environment variable with optional default and required enforcement."""
    value = os.getenv(name, default)
    if required and (value is None or value == ""):
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _get_bool(name: str, default: bool = False) -> bool:
    value = _get_env(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise RuntimeError(f"Invalid boolean for {name}: {value!r}")


def _get_positive_int(name: str) -> Optional[int]:
    value = _get_env(name)
    if value is None or value.strip() == "":
        return None
    try:
        number = int(value)
    except ValueError:
        raise RuntimeError(f"Invalid integer for {name}: {value!r}") from None
    if number < 1:
        raise RuntimeError(f"{name} must be >= 1, got {number}")
    return number


@dataclass(frozen=True)
class Settings:
    # None means the indent unit is inferred once per parse
    indent_width: Optional[int] = None
    placeholder: str = DEFAULT_PLACEHOLDER
    archive_name: str = DEFAULT_ARCHIVE_NAME
    strict_structure: bool = False
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load environment-backed settings once and cache the result."""
    return Settings(
        indent_width=_get_positive_int("TREEZIP_INDENT_WIDTH"),
        placeholder=_get_env("TREEZIP_PLACEHOLDER", DEFAULT_PLACEHOLDER),
        archive_name=_get_env("TREEZIP_ARCHIVE_NAME", DEFAULT_ARCHIVE_NAME) or DEFAULT_ARCHIVE_NAME,
        strict_structure=_get_bool("TREEZIP_STRICT_STRUCTURE"),
        log_level=(_get_env("TREEZIP_LOG_LEVEL", "INFO") or "INFO").upper(),
    )


__all__ = ["Settings", "load_settings", "DEFAULT_PLACEHOLDER", "DEFAULT_ARCHIVE_NAME"]
