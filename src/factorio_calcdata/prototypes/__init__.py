"""
Module for working with Factorio prototype data.

Provides the loader for prototype dumps, the processing service running
the normalization pipeline, and the writer for its output.
"""

from .models import (
    RawObject,
    RawTable,
    ContentTree,
    LocaleTable,
    Record,
    RecordMap,
    GroupMap,
    ITEM_TYPES,
    ENTITY_FIELDS,
    RECIPE_VARIANTS,
    MISSING_ICON_PATH,
)
from .merge import merge_with_override, build_variant
from .loaders import ContentDumpLoader, ContentLoadError, RawContent
from .service import DataProcessingService, ProcessedDataset
from .export import DatasetWriter

# Public exports
__all__ = [
    # Main service
    "DataProcessingService",
    "ProcessedDataset",
    # Loading and output
    "ContentDumpLoader",
    "ContentLoadError",
    "RawContent",
    "DatasetWriter",
    # Type aliases
    "RawObject",
    "RawTable",
    "ContentTree",
    "LocaleTable",
    "Record",
    "RecordMap",
    "GroupMap",
    # Constants
    "ITEM_TYPES",
    "ENTITY_FIELDS",
    "RECIPE_VARIANTS",
    "MISSING_ICON_PATH",
    # Helpers
    "merge_with_override",
    "build_variant",
]
