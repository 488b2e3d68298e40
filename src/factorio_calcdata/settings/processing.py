"""
Processing-related settings for factorio-calcdata.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
DEFAULT_ICON_SIZE = 32


class ProcessingSettings:
    """Manages options of the normalization pipeline."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_int(self, key: str, default: int = 0) -> int:
        """Type-safe integer retrieval from settings."""
        value = self.settings.value(key, default)
        try:
            return int(str(value)) if value is not None else default
        except (ValueError, TypeError):
            return default

    @property
    def language(self) -> str:
        """Get target display language of the locale tables."""
        return self._get_str("processing/language", DEFAULT_LANGUAGE) or DEFAULT_LANGUAGE

    @language.setter
    def language(self, value: str) -> None:
        """Set target display language."""
        self.settings.setValue("processing/language", value)
        self.settings.sync()

    @property
    def render_sprite_sheet(self) -> bool:
        """Check if the icon atlas image should be rendered."""
        return self._get_bool("processing/render_sprite_sheet", True)

    @render_sprite_sheet.setter
    def render_sprite_sheet(self, value: bool) -> None:
        """Set sprite sheet rendering."""
        self.settings.setValue("processing/render_sprite_sheet", value)
        self.settings.sync()

    @property
    def icon_size(self) -> int:
        """Get edge length in pixels of one atlas cell."""
        return self._get_int("processing/icon_size", DEFAULT_ICON_SIZE)

    @icon_size.setter
    def icon_size(self, value: int) -> None:
        """Set atlas cell size."""
        if value > 0:
            self.settings.setValue("processing/icon_size", value)
            self.settings.sync()
        else:
            logger.warning(
                f"Invalid icon size: {value}, keeping current: {self.icon_size}"
            )

    @property
    def pretty_output(self) -> bool:
        """Check if data.json should be indented."""
        return self._get_bool("processing/pretty_output", False)

    @pretty_output.setter
    def pretty_output(self, value: bool) -> None:
        """Set indented JSON output."""
        self.settings.setValue("processing/pretty_output", value)
        self.settings.sync()
