"""
Settings package for factorio-calcdata.

This package provides a type-safe configuration management system
using Qt's QSettings for cross-platform storage.

Usage:
    from factorio_calcdata.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ValidationResult
from .paths import PathSettings
from .processing import ProcessingSettings
from .logging import LoggingSettings

__all__ = [
    "AppSettings",
    "ValidationResult",
    "PathSettings",
    "ProcessingSettings",
    "LoggingSettings",
]
