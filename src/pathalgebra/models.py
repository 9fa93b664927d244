"""
Data models for sort configuration files.

A sort configuration is a small YAML document naming the extension groups the
filename comparator should keep together::

    extension_groups:
      - [h, c]
      - [mli, ml]
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .ordering import (
    DEFAULT_EXTENSION_GROUPS, ExtensionTable, build_extension_table, validate_extension_groups
)

__all__ = ["SortSpec", "load_sort_spec"]


class SortSpec(BaseModel):
    """Sort configuration parsed from YAML."""
    extension_groups: List[List[str]] = Field(
        default_factory=lambda: [list(group) for group in DEFAULT_EXTENSION_GROUPS],
        description="Ordered groups of extensions that sort next to each other",
    )

    @field_validator("extension_groups")
    @classmethod
    def validate_extensions(cls, v: List[List[str]]) -> List[List[str]]:
        """Extensions are bare names: no dots, no separators, not empty."""
        validate_extension_groups(v)
        return v

    def to_table(self) -> ExtensionTable:
        """Build the extension table; raises DuplicateExtensionError on repeats."""
        return build_extension_table(self.extension_groups)


def load_sort_spec(path: Union[str, Path]) -> SortSpec:
    """
    Load a sort configuration file.

    Args:
        path: YAML file path

    Returns:
        Validated SortSpec (defaults when the file is empty)

    Raises:
        FileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the content does not match the model
    """
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return SortSpec.model_validate(data)
