"""
Icon atlas package.

Deduplicates the icons referenced by normalized prototypes, lays them out
on a grid, resolves where each icon physically lives and renders the
resulting sprite sheet.
"""

from .models import (
    ModuleInfo,
    FileIconSource,
    ArchiveIconSource,
    IconSource,
    IconAtlasEntry,
    IconAtlas,
)
from .resolver import IconSourceResolver, IconResolutionError, LEGACY_PATH_REMAPS
from .atlas import IconAtlasBuilder, grid_layout, icon_sort_key
from .sheet import SpriteSheetRenderer

__all__ = [
    # Models
    "ModuleInfo",
    "FileIconSource",
    "ArchiveIconSource",
    "IconSource",
    "IconAtlasEntry",
    "IconAtlas",
    # Resolution and layout
    "IconSourceResolver",
    "IconResolutionError",
    "LEGACY_PATH_REMAPS",
    "IconAtlasBuilder",
    "grid_layout",
    "icon_sort_key",
    # Rendering
    "SpriteSheetRenderer",
]
