"""
Icon atlas layout.

Deduplicates every referenced icon path, orders the paths so that icons
sharing a base name sit next to each other, and assigns each one a cell of
a square-ish grid. Records then carry grid coordinates instead of paths.
"""

import logging
import math
from pathlib import PurePosixPath
from typing import Iterable, List, Mapping, Optional, Tuple

from ..prototypes.models import Record
from ..utils.diagnostics import DiagnosticsSink
from .models import IconAtlas, IconAtlasEntry, IconSource
from .resolver import IconResolutionError, IconSourceResolver


def icon_stem(path: str) -> str:
    """File name of ``path`` without directory or extension."""
    return PurePosixPath(path).stem


def icon_sort_key(path: str) -> Tuple[str, str]:
    """Sort by stem first, full path as tiebreak (case-sensitive)."""
    return icon_stem(path), path


def grid_layout(paths: Iterable[str]) -> Tuple[int, List[Tuple[str, int, int]]]:
    """Assign grid cells to deduplicated, sorted paths.

    Returns:
        Tuple of (grid width, list of (path, col, row) in assignment order)
    """
    ordered = sorted(set(paths), key=icon_sort_key)
    width = math.isqrt(len(ordered))
    if width == 0:
        return 0, []
    return width, [
        (path, index % width, index // width) for index, path in enumerate(ordered)
    ]


class IconAtlasBuilder:
    """Builds the icon atlas and substitutes coordinates into records."""

    def __init__(self, resolver: IconSourceResolver, diagnostics: DiagnosticsSink):
        self.resolver = resolver
        self.diagnostics = diagnostics
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def build(self, icon_paths: Iterable[str]) -> IconAtlas:
        """Lay out every path and resolve its physical source."""
        width, cells = grid_layout(icon_paths)
        entries = [
            IconAtlasEntry(path=path, col=col, row=row, source=self._resolve(path))
            for path, col, row in cells
        ]
        atlas = IconAtlas(width=width, entries=entries)
        self.logger.info(
            f"Icon atlas: {len(atlas)} icons in {atlas.width}x{atlas.rows} grid"
        )
        return atlas

    def _resolve(self, path: str) -> Optional[IconSource]:
        try:
            return self.resolver.resolve(path)
        except IconResolutionError as e:
            self.diagnostics.emit(f"unresolved icon source: {e}")
            return None

    @staticmethod
    def apply(atlas: IconAtlas, records: Iterable[Record]) -> None:
        """Replace each record's ``icon`` path by ``icon_col``/``icon_row``."""
        for record in records:
            path = record.pop("icon", None)
            if path is None:
                continue
            record["icon_col"], record["icon_row"] = atlas.coordinates(path)

    @staticmethod
    def utility_sprites(
        atlas: IconAtlas, sprites: Mapping[str, Tuple[str, str]]
    ) -> Record:
        """Build the ``sprites.extra`` block.

        Args:
            atlas: Atlas containing every utility icon path
            sprites: Maps sprite key to (display name, icon path)
        """
        extra: Record = {}
        for key, (display_name, path) in sprites.items():
            col, row = atlas.coordinates(path)
            extra[key] = {"name": display_name, "icon_col": col, "icon_row": row}
        return extra
