"""
Logging and diagnostics settings for factorio-calcdata.

Everything ``setup_logging`` needs: console and CSV file output, and
whether normalizer diagnostics are shown at all.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

LOG_FILE_PATH = "logs/factorio_calcdata.csv"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingSettings:
    """Manages log output and diagnostics visibility."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_bool(self, key: str, default: bool) -> bool:
        value = self.settings.value(key, default)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _store(self, key: str, value: object) -> None:
        self.settings.setValue(key, value)
        self.settings.sync()

    @property
    def diagnostics_verbose(self) -> bool:
        """Check if skip/fallback diagnostics are printed."""
        return self._get_bool("logging/diagnostics_verbose", False)

    @diagnostics_verbose.setter
    def diagnostics_verbose(self, value: bool) -> None:
        self._store("logging/diagnostics_verbose", value)

    @property
    def console_logging(self) -> bool:
        """Check if console logging is enabled."""
        return self._get_bool("logging/console_enabled", True)

    @console_logging.setter
    def console_logging(self, value: bool) -> None:
        self._store("logging/console_enabled", value)

    @property
    def console_log_level(self) -> str:
        """Get console level name (one of ``VALID_LEVELS``)."""
        value = self.settings.value("logging/console_level", "INFO")
        return str(value) if value else "INFO"

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        level = value.upper()
        if level not in VALID_LEVELS:
            logger.warning(
                f"Invalid console log level: {value}, keeping {self.console_log_level}"
            )
            return
        self._store("logging/console_level", level)

    @property
    def console_use_colors(self) -> bool:
        """Check if the console colours level names."""
        return self._get_bool("logging/console_use_colors", True)

    @console_use_colors.setter
    def console_use_colors(self, value: bool) -> None:
        self._store("logging/console_use_colors", value)

    @property
    def file_logging(self) -> bool:
        """Check if the rotating CSV log file is written."""
        return self._get_bool("logging/file_enabled", False)

    @file_logging.setter
    def file_logging(self, value: bool) -> None:
        self._store("logging/file_enabled", value)

    @property
    def log_file_path(self) -> str:
        """CSV log file location, relative to the working directory."""
        return LOG_FILE_PATH
