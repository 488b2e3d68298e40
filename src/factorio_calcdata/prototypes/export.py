"""
Serialization of processed datasets.
"""

import logging
from pathlib import Path
from typing import List, Optional

import orjson

from ..icons.sheet import SpriteSheetRenderer
from .service import ProcessedDataset

DATA_FILE_NAME = "data.json"


class DatasetWriter:
    """Writes ``data.json`` and, optionally, the sprite sheet."""

    def __init__(self, pretty: bool = False):
        self.pretty = pretty
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def dumps(self, dataset: ProcessedDataset) -> bytes:
        """Serialize a dataset to JSON bytes (keys sorted)."""
        option = orjson.OPT_SORT_KEYS
        if self.pretty:
            option |= orjson.OPT_INDENT_2
        return orjson.dumps(dataset.to_dict(), option=option)

    def write(
        self,
        dataset: ProcessedDataset,
        output_dir: Path,
        renderer: Optional[SpriteSheetRenderer] = None,
    ) -> List[Path]:
        """Write the dataset into ``output_dir``.

        When a renderer is given, the sprite sheet is written first and its
        digest is recorded as ``sprites.hash``.

        Returns:
            Paths of all written files
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []

        if renderer is not None:
            sheet = renderer.render(dataset.atlas)
            sheet_path, digest = renderer.save(sheet, output_dir)
            dataset.sprites["hash"] = digest
            written.append(sheet_path)

        data_path = output_dir / DATA_FILE_NAME
        data_path.write_bytes(self.dumps(dataset))
        written.append(data_path)
        self.logger.info(f"Dataset written to {data_path}")
        return written
