"""
Path-related settings for factorio-calcdata.
"""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

DEFAULT_OUTPUT_DIR = "output"


class PathSettings:
    """Manages input and output locations."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    @property
    def input_path(self) -> Optional[Path]:
        """Get path to the prototype dump produced by the data loader."""
        path_str = self._get_str("paths/input", "")
        return Path(path_str) if path_str else None

    @input_path.setter
    def input_path(self, value: Optional[Path]) -> None:
        """Set path to the prototype dump."""
        self.settings.setValue("paths/input", str(value) if value else "")
        self.settings.sync()

    @property
    def output_dir(self) -> Path:
        """Get directory receiving data.json and the sprite sheet."""
        return Path(self._get_str("paths/output", DEFAULT_OUTPUT_DIR) or DEFAULT_OUTPUT_DIR)

    @output_dir.setter
    def output_dir(self, value: Path) -> None:
        """Set output directory."""
        self.settings.setValue("paths/output", str(value))
        self.settings.sync()
