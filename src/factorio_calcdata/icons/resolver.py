"""
Resolution of virtual icon paths to physical locations.

Prototype icons are referenced as ``__<mod>__/<relative path>``. The mod
metadata tells whether the mod is unpacked on disk or packaged as a zip.
"""

import logging
import re
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from .models import ArchiveIconSource, FileIconSource, IconSource, ModuleInfo

VIRTUAL_PATH_PATTERN = re.compile(r"^__([\w\s-]+)__/(.*)$")

# Paths that the data files reference but that live elsewhere on disk
LEGACY_PATH_REMAPS: Mapping[str, str] = MappingProxyType(
    {
        "__base__/graphics/icons/coal.png": "__base__/graphics/icons/icons-new/coal.png",
        "__base__/graphics/icons/copper-ore.png": "__base__/graphics/icons/icons-new/copper-ore.png",
        "__base__/graphics/icons/iron-ore.png": "__base__/graphics/icons/icons-new/iron-ore.png",
        "__base__/graphics/icons/stone.png": "__base__/graphics/icons/icons-new/stone.png",
        "__base__/graphics/icons/uranium-ore.png": "__base__/graphics/icons/icons-new/uranium-ore.png",
    }
)


class IconResolutionError(LookupError):
    """Raised when a virtual icon path cannot be mapped to a source."""
    pass


class IconSourceResolver:
    """Maps virtual icon paths to files or zip archive members."""

    def __init__(
        self,
        module_info: Mapping[str, ModuleInfo],
        path_remaps: Optional[Mapping[str, str]] = None,
    ):
        self.module_info = module_info
        self.path_remaps: Mapping[str, str] = (
            LEGACY_PATH_REMAPS if path_remaps is None else path_remaps
        )
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._cache: Dict[str, IconSource] = {}

    def resolve(self, path: str) -> IconSource:
        """Resolve a virtual icon path.

        Raises:
            IconResolutionError: If the path is malformed or names an
                unknown mod
        """
        cached = self._cache.get(path)
        if cached is not None:
            return cached

        actual = self.path_remaps.get(path, path)
        match = VIRTUAL_PATH_PATTERN.match(actual)
        if not match:
            raise IconResolutionError(f"Not a virtual icon path: {path!r}")

        mod_name, relative_path = match.groups()
        mod = self.module_info.get(mod_name)
        if mod is None:
            raise IconResolutionError(f"Unknown mod '{mod_name}' for icon {path!r}")

        source: IconSource
        if mod.local_path is not None:
            source = FileIconSource(full_path=f"{mod.local_path}/{relative_path}")
        elif mod.zip_path is not None:
            source = ArchiveIconSource(
                archive_path=mod.zip_path,
                member_path=f"{mod.mod_name}/{relative_path}",
            )
        else:
            raise IconResolutionError(f"Mod '{mod_name}' has no known location")

        self._cache[path] = source
        return source
