"""Configuration for seo-json-ld.

Settings come from the process environment. A ``.env`` file is read only
when the application calls ``load_env_file``.
"""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Get environment variable."""
    return os.getenv(key, default)


def get_bool(key: str, default: bool = False) -> bool:
    """Read a boolean flag (1/true/yes/on, case-insensitive)."""
    raw = get_env(key)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Library settings read from the environment."""

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        self.log_level: str = get_env("SEO_JSON_LD_LOG_LEVEL", "INFO") or "INFO"
        self.log_json: bool = get_bool("SEO_JSON_LD_LOG_JSON", True)
        # Raise on partial option combinations instead of dropping them
        self.strict: bool = get_bool("SEO_JSON_LD_STRICT", False)

    def resolve_strict(self, strict: Optional[bool]) -> bool:
        return self.strict if strict is None else strict


settings = Settings()


def load_env_file(path: Union[str, Path, None] = None) -> Settings:
    """Load a ``.env`` file (default: ./.env) without overriding set variables, then refresh settings."""
    env_path = Path(path) if path is not None else Path.cwd() / ".env"
    load_dotenv(env_path, override=False)
    settings.reload()
    return settings
