"""
Loader for prototype dumps.

The dump is a single JSON document written by the external data loader
(mod loading, archive extraction and table merging happen there):

    {
        "content": {"<type>": {"<name>": {...}}},
        "locales": {"<language>": {"<section>": {"<key>": "<text>"}}},
        "module_info": {"<mod>": {"localPath": ..., "zip_path": ..., ...}}
    }

A single-language ``"locale"`` table is accepted in place of ``"locales"``.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import orjson

from ..icons.models import ModuleInfo
from .models import ContentTree, LocaleTable

CORE_MODULE = "core"


class ContentLoadError(Exception):
    """Raised when a prototype dump cannot be read or has the wrong shape."""
    pass


@dataclass
class RawContent:
    """Everything the pipeline needs from the external loader."""
    content: ContentTree
    locale: LocaleTable
    module_info: Dict[str, ModuleInfo] = field(default_factory=dict)
    core_version: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any], language: str = "en") -> "RawContent":
        """Create RawContent from a parsed dump.

        Raises:
            ContentLoadError: If the content tree or the locale table for
                ``language`` is missing
        """
        content = data.get("content")
        if not isinstance(content, dict):
            raise ContentLoadError("Dump has no 'content' table")

        if "locales" in data:
            locale = (data.get("locales") or {}).get(language)
        else:
            locale = data.get("locale")
        if not isinstance(locale, dict):
            raise ContentLoadError(f"Dump has no locale table for language '{language}'")

        module_info = {
            name: ModuleInfo.from_dict(name, info)
            for name, info in (data.get("module_info") or {}).items()
            if isinstance(info, dict)
        }
        core = module_info.get(CORE_MODULE)
        return cls(
            content=content,
            locale=locale,
            module_info=module_info,
            core_version=core.version if core else "",
        )


class ContentDumpLoader:
    """Reads prototype dumps with orjson."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load(self, path: str | Path, language: str = "en") -> RawContent:
        """Read and validate a dump file.

        Raises:
            ContentLoadError: If the file cannot be read, is not valid JSON
                or lacks required tables
        """
        dump_path = Path(path)
        self.logger.info(f"Loading prototype dump: {dump_path}")
        try:
            with dump_path.open("rb") as f:  # orjson works with bytes
                data = orjson.loads(f.read())
        except OSError as e:
            raise ContentLoadError(f"Cannot read {dump_path}: {e}") from e
        except orjson.JSONDecodeError as e:
            raise ContentLoadError(f"Invalid JSON in {dump_path}: {e}") from e

        if not isinstance(data, dict):
            raise ContentLoadError(f"Dump {dump_path} is not a JSON object")

        raw = RawContent.from_dict(data, language)
        self.logger.info(
            f"Loaded {len(raw.content)} prototype types, "
            f"{len(raw.locale)} locale sections, {len(raw.module_info)} mods"
        )
        return raw
