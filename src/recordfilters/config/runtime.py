"""Pydantic-based runtime settings for recordfilters.

Loads from environment variables prefixed ``RECORDFILTERS_`` (with optional
.env file). Invalid values fail fast on first access.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class RuntimeSettings(BaseSettings):
    """Defaults for the query codec and the filter engine."""

    model_config = {"env_prefix": "RECORDFILTERS_", "env_file": ".env", "env_file_encoding": "utf-8"}

    # --- Query codec ---
    logic_key: str = Field(default="logic", min_length=1, description="Query parameter carrying the logic mode")
    separator: str = Field(default="|", description="Separator between kind token and value")
    key_format: Literal["strings", "atoms"] = Field(
        default="strings",
        description="'strings' accepts any key; 'atoms' restricts keys to a known set",
    )

    # --- Engine ---
    preserve_input_order: bool = Field(
        default=False,
        description="If True, FilterEngine returns kept records in input order instead of reversed",
    )

    # --- Logging ---
    log_level: str = Field(default="WARNING", description="Level for the 'recordfilters' logger")

    @field_validator("separator")
    @classmethod
    def _separator_usable(cls, v: str) -> str:
        if not v:
            raise ValueError("separator must not be empty")
        if "&" in v or "=" in v:
            raise ValueError(f"separator must not contain '&' or '=', got {v!r}")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    """Return the singleton RuntimeSettings (cached after first call)."""
    return RuntimeSettings()
