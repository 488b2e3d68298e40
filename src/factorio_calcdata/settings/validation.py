"""
Settings validation system for factorio-calcdata.
"""

import logging
from typing import List, TYPE_CHECKING

from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(self) -> ValidationResult:
        """Validate current configuration."""
        errors: List[str] = []
        warnings: List[str] = []

        input_path = self.settings.input_path
        if input_path:
            if not input_path.exists():
                errors.append(f"Input dump does not exist: {input_path}")
            elif not input_path.is_file():
                errors.append(f"Input dump is not a file: {input_path}")
        else:
            warnings.append("Input dump path not set")

        output_dir = self.settings.output_dir
        if output_dir.exists() and not output_dir.is_dir():
            warnings.append(f"Output path exists but is not a directory: {output_dir}")

        if self.settings.icon_size <= 0:
            errors.append(f"Icon size must be positive: {self.settings.icon_size}")

        if errors:
            logger.debug(f"Settings validation failed with {len(errors)} errors")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
