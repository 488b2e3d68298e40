"""
Core settings management for factorio-calcdata.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

from .types import ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .processing import ProcessingSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to application settings with automatic
    cross-platform storage and validation.
    """

    def __init__(self, profile: str = "default"):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")
        """
        self.settings = QSettings("factorio-calcdata", "factorio_calcdata")
        self.profile = profile

        # Profile group: factorio-calcdata/factorio_calcdata/<profile>/...
        self.settings.beginGroup(profile)

        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._processing = ProcessingSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def input_path(self) -> Optional[Path]:
        """Get path to the prototype dump."""
        return self._paths.input_path

    @input_path.setter
    def input_path(self, value: Optional[Path]) -> None:
        """Set path to the prototype dump."""
        self._paths.input_path = value

    @property
    def output_dir(self) -> Path:
        """Get output directory."""
        return self._paths.output_dir

    @output_dir.setter
    def output_dir(self, value: Path) -> None:
        """Set output directory."""
        self._paths.output_dir = value

    # === PROCESSING SETTINGS (DELEGATED) ===

    @property
    def language(self) -> str:
        """Get target display language."""
        return self._processing.language

    @language.setter
    def language(self, value: str) -> None:
        """Set target display language."""
        self._processing.language = value

    @property
    def render_sprite_sheet(self) -> bool:
        """Check if the icon atlas image should be rendered."""
        return self._processing.render_sprite_sheet

    @render_sprite_sheet.setter
    def render_sprite_sheet(self, value: bool) -> None:
        """Set sprite sheet rendering."""
        self._processing.render_sprite_sheet = value

    @property
    def icon_size(self) -> int:
        """Get atlas cell size in pixels."""
        return self._processing.icon_size

    @icon_size.setter
    def icon_size(self, value: int) -> None:
        """Set atlas cell size in pixels."""
        self._processing.icon_size = value

    @property
    def pretty_output(self) -> bool:
        """Check if data.json should be indented."""
        return self._processing.pretty_output

    @pretty_output.setter
    def pretty_output(self, value: bool) -> None:
        """Set indented JSON output."""
        self._processing.pretty_output = value

    # === LOGGING SETTINGS (DELEGATED) ===

    @property
    def verbose(self) -> bool:
        """Check if diagnostics should be printed."""
        return self._logging.diagnostics_verbose

    @verbose.setter
    def verbose(self, value: bool) -> None:
        """Set verbose diagnostics output."""
        self._logging.diagnostics_verbose = value

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._logging.console_logging

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        """Set console logging enabled state."""
        self._logging.console_logging = value

    @property
    def console_log_level(self) -> str:
        """Get console logging level."""
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        """Set console logging level."""
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        """Check if console should use colors."""
        return self._logging.console_use_colors

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        """Set console color usage."""
        self._logging.console_use_colors = value

    @property
    def file_logging(self) -> bool:
        """Check if file logging is enabled."""
        return self._logging.file_logging

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        """Set file logging enabled state."""
        self._logging.file_logging = value

    @property
    def log_file_path(self) -> str:
        """Get log file path (read-only)."""
        return self._logging.log_file_path

    # === VALIDATION ===

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        return self._validator.validate()

