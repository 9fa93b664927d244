"""
CLI Context for managing application dependencies.

Provides a clean way to manage CLI-level dependencies like settings and the
extension table, avoiding global state and enabling proper dependency injection.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .ordering import ExtensionTable, build_extension_table
from .settings import Settings, create_settings_from_env


@dataclass
class CLIContext:
    """
    Shared context for CLI commands.
    
    Manages application-level dependencies (settings, extension table) that
    are initialized once and shared across a CLI command execution.
    """
    settings: Settings
    _extension_table: Optional[ExtensionTable] = None
    
    @classmethod
    def from_env(cls) -> CLIContext:
        """
        Create CLI context from environment variables.
        
        Returns:
            CLIContext with settings loaded from environment
        """
        settings = create_settings_from_env()
        return cls(settings=settings)
    
    @property
    def extension_table(self) -> ExtensionTable:
        """
        Get or create the extension table (lazy initialization).
        
        Returns:
            ExtensionTable built from the configured extension groups
        """
        if self._extension_table is None:
            self._extension_table = build_extension_table(self.settings.extension_groups)
        return self._extension_table
