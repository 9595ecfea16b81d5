"""
Runtime settings for the bookshelf catalogue.

Values are read once from the environment and cached. Tests that patch
the environment should call ``_reset_settings()`` before and after.
"""

from os import environ
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_RESULT_LIMIT = 10


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Maximum number of books either lookup query returns.
    result_limit: int = Field(default=DEFAULT_RESULT_LIMIT, ge=1)
    # Substring containment policy shared by both lookup queries.
    case_sensitive: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


_cached_settings: Optional[Settings] = None


def _reset_settings() -> None:
    """Reset cached settings — for testing only."""
    global _cached_settings
    _cached_settings = None


def get_settings() -> Settings:
    global _cached_settings
    if _cached_settings is not None:
        return _cached_settings

    _cached_settings = Settings(
        result_limit=environ.get("BOOKSHELF_RESULT_LIMIT", str(DEFAULT_RESULT_LIMIT)),
        case_sensitive=environ.get("BOOKSHELF_CASE_SENSITIVE", "true"),
        log_level=environ.get("BOOKSHELF_LOG_LEVEL", "INFO").upper(),
    )
    return _cached_settings
