"""
Data models for the icon atlas.

Contains the dataclasses describing mod locations, physical icon sources
and atlas grid cells. No file-system logic lives here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union


@dataclass(frozen=True)
class ModuleInfo:
    """Where a mod providing content is physically located.

    A mod is either unpacked on disk (``local_path``) or packaged as a
    zip archive (``zip_path``) whose members live under ``mod_name/``.
    """
    name: str
    local_path: Optional[str] = None
    zip_path: Optional[str] = None
    mod_name: str = ""
    version: str = ""

    @classmethod
    def from_dict(cls, name: str, data: Dict[str, Any]) -> "ModuleInfo":
        """Create ModuleInfo from loader metadata.

        Accepts both camelCase (``zipPath``, ``modName``) and the loader's
        snake_case (``zip_path``, ``mod_name``) spellings.
        """
        return cls(
            name=name,
            local_path=data.get("localPath", data.get("local_path")),
            zip_path=data.get("zipPath", data.get("zip_path")),
            mod_name=str(data.get("modName", data.get("mod_name", name)) or name),
            version=str(data.get("version", "") or ""),
        )


@dataclass(frozen=True)
class FileIconSource:
    """Icon stored as a plain file on disk."""
    full_path: str

    @property
    def kind(self) -> str:
        return "file"

    def to_dict(self) -> Dict[str, Any]:
        return {"source": self.kind, "path": self.full_path}


@dataclass(frozen=True)
class ArchiveIconSource:
    """Icon stored as a member of a mod's zip archive."""
    archive_path: str
    member_path: str

    @property
    def kind(self) -> str:
        return "zip"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.kind,
            "zipfile": self.archive_path,
            "path": self.member_path,
        }


IconSource = Union[FileIconSource, ArchiveIconSource]


@dataclass
class IconAtlasEntry:
    """One deduplicated icon and its 0-based grid cell."""
    path: str
    col: int
    row: int
    source: Optional[IconSource] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.path,
            "icon_col": self.col,
            "icon_row": self.row,
        }
        if self.source is not None:
            data.update(self.source.to_dict())
        return data


@dataclass
class IconAtlas:
    """Grid layout of every referenced icon.

    Entries are stored in assignment order, so entry ``i`` sits at
    ``(i % width, i // width)``.
    """
    width: int
    entries: List[IconAtlasEntry] = field(default_factory=lambda: [])
    _cells: Dict[str, IconAtlasEntry] = field(
        init=False, repr=False, default_factory=lambda: {}
    )

    def __post_init__(self):
        self._cells = {entry.path: entry for entry in self.entries}

    @property
    def rows(self) -> int:
        """Number of grid rows in use."""
        if not self.entries or self.width <= 0:
            return 0
        return (len(self.entries) + self.width - 1) // self.width

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, path: object) -> bool:
        return path in self._cells

    def get(self, path: str) -> Optional[IconAtlasEntry]:
        """Return the entry for a virtual icon path, if present."""
        return self._cells.get(path)

    def coordinates(self, path: str) -> Tuple[int, int]:
        """Return ``(col, row)`` of a virtual icon path.

        Raises:
            KeyError: If the path was not registered with the atlas
        """
        entry = self._cells[path]
        return entry.col, entry.row
