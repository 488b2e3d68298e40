"""
Sprite sheet rendering for the icon atlas.

Composes every atlas icon into a single RGBA image, one ``icon_size``
square per grid cell. Icons are read from disk or straight out of a mod's
zip archive.
"""

import hashlib
import io
import logging
import zipfile
from pathlib import Path
from typing import Dict, Optional

from PIL import Image

from .models import ArchiveIconSource, FileIconSource, IconAtlas, IconSource


class SpriteSheetRenderer:
    """Renders an `IconAtlas` to a PIL image."""

    def __init__(self, icon_size: int = 32):
        if icon_size <= 0:
            raise ValueError(f"Icon size must be positive: {icon_size}")
        self.icon_size = icon_size
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._archives: Dict[str, zipfile.ZipFile] = {}

    def render(self, atlas: IconAtlas) -> Image.Image:
        """Compose the sprite sheet. Icons that fail to load stay transparent."""
        size = self.icon_size
        sheet = Image.new("RGBA", (atlas.width * size, atlas.rows * size), (0, 0, 0, 0))
        missing = 0
        try:
            for entry in atlas.entries:
                if entry.source is None:
                    missing += 1
                    continue
                icon = self._load_icon(entry.source)
                if icon is None:
                    missing += 1
                    continue
                sheet.paste(icon, (entry.col * size, entry.row * size), icon)
        finally:
            self._close_archives()

        if missing:
            self.logger.warning(f"{missing} icons could not be drawn on the sprite sheet")
        return sheet

    def save(self, sheet: Image.Image, output_dir: Path) -> tuple[Path, str]:
        """Write the sheet as ``sprite-sheet-<md5>.png``.

        Returns:
            Tuple of (written path, hex digest of the PNG bytes)
        """
        buffer = io.BytesIO()
        sheet.save(buffer, format="PNG")
        data = buffer.getvalue()
        digest = hashlib.md5(data).hexdigest()

        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / f"sprite-sheet-{digest}.png"
        path.write_bytes(data)
        self.logger.info(f"Sprite sheet written to {path}")
        return path, digest

    def _load_icon(self, source: IconSource) -> Optional[Image.Image]:
        """Load one icon cropped/resized to the cell size."""
        try:
            if isinstance(source, FileIconSource):
                with Image.open(source.full_path) as image:
                    return self._fit(image)
            archive = self._open_archive(source)
            with archive.open(source.member_path) as member:
                with Image.open(io.BytesIO(member.read())) as image:
                    return self._fit(image)
        except (OSError, KeyError, zipfile.BadZipFile) as e:
            self.logger.warning(f"Cannot load icon {source.to_dict()}: {e}")
            return None

    def _fit(self, image: Image.Image) -> Image.Image:
        """Crop the top-left square (mipmapped icons) and scale to cell size."""
        image = image.convert("RGBA")
        edge = min(image.width, image.height)
        icon = image.crop((0, 0, edge, edge))
        if edge != self.icon_size:
            icon = icon.resize((self.icon_size, self.icon_size), Image.Resampling.LANCZOS)
        return icon

    def _open_archive(self, source: ArchiveIconSource) -> zipfile.ZipFile:
        archive = self._archives.get(source.archive_path)
        if archive is None:
            archive = zipfile.ZipFile(source.archive_path)
            self._archives[source.archive_path] = archive
        return archive

    def _close_archives(self) -> None:
        for archive in self._archives.values():
            archive.close()
        self._archives.clear()
