"""
Settings and configuration for pathalgebra.

Centralizes configuration values and provides validation with fail-fast behavior.
Loads settings from environment variables when the CLI starts.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Tuple

from .ordering import DEFAULT_EXTENSION_GROUPS, build_extension_table, validate_extension_groups

__all__ = ["Settings", "create_settings_from_env", "parse_extension_groups"]

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for the pathalgebra CLI.

    Ordering Settings:
        extension_groups: Ordered groups of related extensions for filename sorting

    Logging Settings:
        log_level: Standard logging level name
    """
    extension_groups: Tuple[Tuple[str, ...], ...] = DEFAULT_EXTENSION_GROUPS
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings on construction."""
        # Building the table rejects duplicated extensions
        build_extension_table(self.extension_groups)

        validate_extension_groups(self.extension_groups)

        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}. Use one of {', '.join(_LOG_LEVELS)}")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level.upper())


def parse_extension_groups(value: str) -> Tuple[Tuple[str, ...], ...]:
    """
    Parse the ``h,c;mli,ml`` environment format into extension groups.

    Blank groups and blank extensions are dropped.
    """
    groups = []
    for raw_group in value.split(";"):
        group = tuple(ext.strip() for ext in raw_group.split(",") if ext.strip())
        if group:
            groups.append(group)
    return tuple(groups)


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - PATHALGEBRA_EXTENSION_GROUPS (default: "h,c;mli,ml")
        - PATHALGEBRA_LOG_LEVEL (default: WARNING)

    Returns:
        Settings object with validated configuration

    Raises:
        ValueError: If configuration is invalid

    Note:
        Creates a fresh Settings instance every time (no caching).
        This ensures test isolation and eliminates global state.
    """
    groups_value = os.getenv("PATHALGEBRA_EXTENSION_GROUPS")
    extension_groups = (
        parse_extension_groups(groups_value) if groups_value is not None
        else DEFAULT_EXTENSION_GROUPS
    )
    log_level = os.getenv("PATHALGEBRA_LOG_LEVEL", "WARNING")

    return Settings(extension_groups=extension_groups, log_level=log_level)
