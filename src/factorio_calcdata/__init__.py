"""
factorio-calcdata: prototype data processor for Factorio calculators

Turns a dump of Factorio prototypes, locale tables and mod locations into
the compact dataset and icon sprite sheet used by the calculator frontend.
"""

import logging

__version__ = "0.1.0"
__author__ = "factorio-calcdata Contributors"

# Core service imports (prototypes first: the other packages build on it)
from .prototypes import (
    DataProcessingService,
    ProcessedDataset,
    ContentDumpLoader,
    ContentLoadError,
    RawContent,
    DatasetWriter,
)
from .icons import IconAtlas, IconAtlasBuilder, SpriteSheetRenderer
from .localization import LocaleResolver, NameLocalizer
from .utils import DiagnosticsSink, setup_logging

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Services
    "DataProcessingService",
    "ContentDumpLoader",
    "DatasetWriter",

    # Logging
    "setup_logging",
    "DiagnosticsSink",

    # Data models
    "ProcessedDataset",
    "RawContent",
    "ContentLoadError",
    "IconAtlas",
    "IconAtlasBuilder",
    "SpriteSheetRenderer",
    "LocaleResolver",
    "NameLocalizer",
]
