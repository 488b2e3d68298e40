"""
Main service for turning prototype dumps into calculator data.

Runs the whole pipeline: locale expansion, item, recipe and entity
normalization, icon atlas layout and icon coordinate substitution.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple, TYPE_CHECKING

from ..icons.atlas import IconAtlasBuilder
from ..icons.models import IconAtlas
from ..icons.resolver import IconSourceResolver
from ..localization.localizer import NameLocalizer
from ..localization.templates import LocaleResolver
from ..normalizers.entities import EntityNormalizer
from ..normalizers.items import ItemNormalizer
from ..normalizers.recipes import RecipeNormalizer
from ..utils.diagnostics import DiagnosticsSink
from .loaders import ContentDumpLoader, ContentLoadError, RawContent
from .models import (
    UTILITY_SPRITES,
    UTILITY_SPRITES_TYPE,
    ContentTree,
    GroupMap,
    Record,
    RecordMap,
)

if TYPE_CHECKING:
    from ..settings import AppSettings


@dataclass
class ProcessedDataset:
    """Render-ready dataset handed to serialization."""
    items: RecordMap = field(default_factory=dict)
    fluids: List[str] = field(default_factory=list)
    fuel: List[str] = field(default_factory=list)
    modules: List[str] = field(default_factory=list)
    groups: GroupMap = field(default_factory=dict)
    entities: Dict[str, RecordMap] = field(default_factory=dict)
    normal_recipes: RecordMap = field(default_factory=dict)
    alternate_recipes: RecordMap = field(default_factory=dict)
    sprites: Record = field(default_factory=dict)
    atlas: IconAtlas = field(default_factory=lambda: IconAtlas(width=0))
    version: str = ""

    @property
    def width(self) -> int:
        """Icon atlas width in cells."""
        return self.atlas.width

    def to_dict(self) -> Dict[str, Any]:
        """Return the logical output structure."""
        data: Dict[str, Any] = {
            "items": self.items,
            "fluids": self.fluids,
            "fuel": self.fuel,
            "modules": self.modules,
            "groups": self.groups,
        }
        data.update(self.entities)
        data.update(
            {
                "normalRecipes": self.normal_recipes,
                "alternateRecipes": self.alternate_recipes,
                "sprites": self.sprites,
                "icons": [entry.to_dict() for entry in self.atlas.entries],
                "width": self.width,
                "version": self.version,
            }
        )
        return data


class DataProcessingService:
    """Service producing a `ProcessedDataset` from raw prototypes.

    Stages run strictly in order; the icon atlas is built only after the
    item, recipe and entity normalizers have all handed over the icon
    paths they reference.
    """

    def __init__(
        self,
        settings: Optional["AppSettings"] = None,
        diagnostics: Optional[DiagnosticsSink] = None,
        language: Optional[str] = None,
    ):
        """Initialize the service.

        Args:
            settings: App settings providing language and input path defaults
            diagnostics: Sink receiving non-fatal skip/fallback messages
            language: Target locale language, overrides settings
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.settings = settings
        self.diagnostics = diagnostics or DiagnosticsSink()
        if language is None:
            language = settings.language if settings else "en"
        self.language = language
        self.loader = ContentDumpLoader()
        self.locale_resolver = LocaleResolver()

    def process_file(self, path: Optional[str | Path] = None) -> ProcessedDataset:
        """Load a prototype dump and process it.

        Args:
            path: Dump file; defaults to the configured input path

        Raises:
            ContentLoadError: If no path is known or the dump is invalid
        """
        if path is None:
            path = self.settings.input_path if self.settings else None
        if path is None:
            raise ContentLoadError("No prototype dump given")
        return self.process(self.loader.load(path, self.language))

    def process(self, raw: RawContent) -> ProcessedDataset:
        """Run the full pipeline over already-loaded content."""
        self.logger.info("Starting prototype processing...")

        passes = self.locale_resolver.resolve(raw.locale)
        self.logger.debug(f"Locale templates expanded in {passes} passes")

        localizer = NameLocalizer(
            raw.locale, raw.content, self.diagnostics, self.language
        )
        item_catalog = ItemNormalizer(localizer, self.diagnostics).normalize(raw.content)
        recipe_catalog = RecipeNormalizer(localizer, self.diagnostics).normalize(
            raw.content, item_catalog.items
        )
        entity_catalog = EntityNormalizer(localizer, self.diagnostics).normalize(
            raw.content
        )

        utility_sprites = self.utility_sprite_paths(raw.content)
        icon_paths: Set[str] = {path for _, path in utility_sprites.values()}
        icon_paths |= item_catalog.icon_paths
        icon_paths |= recipe_catalog.icon_paths
        icon_paths |= entity_catalog.icon_paths

        builder = IconAtlasBuilder(IconSourceResolver(raw.module_info), self.diagnostics)
        atlas = builder.build(icon_paths)

        record_maps: List[RecordMap] = [
            item_catalog.items,
            recipe_catalog.normal,
            recipe_catalog.alternate,
            *entity_catalog.entities.values(),
        ]
        builder.apply(atlas, self._iter_records(record_maps))

        dataset = ProcessedDataset(
            items=item_catalog.items,
            fluids=item_catalog.fluids,
            fuel=item_catalog.fuel,
            modules=item_catalog.modules,
            groups=item_catalog.groups,
            entities=entity_catalog.entities,
            normal_recipes=recipe_catalog.normal,
            alternate_recipes=recipe_catalog.alternate,
            sprites={"extra": builder.utility_sprites(atlas, utility_sprites)},
            atlas=atlas,
            version=raw.core_version,
        )

        self.logger.info(
            f"Processing completed: {len(dataset.items)} items, "
            f"{len(dataset.normal_recipes)} normal and "
            f"{len(dataset.alternate_recipes)} alternate recipes, "
            f"{sum(len(e) for e in dataset.entities.values())} entities, "
            f"{len(atlas)} icons ({len(self.diagnostics)} diagnostics)"
        )
        return dataset

    @staticmethod
    def utility_sprite_paths(content: ContentTree) -> Dict[str, Tuple[str, str]]:
        """Return sprite key -> (display name, icon path) for utility icons.

        Raises:
            ContentLoadError: If a utility sprite is missing from the content
        """
        default = (content.get(UTILITY_SPRITES_TYPE) or {}).get("default") or {}
        sprites: Dict[str, Tuple[str, str]] = {}
        for key, display_name in UTILITY_SPRITES.items():
            filename = (default.get(key) or {}).get("filename")
            if not filename:
                raise ContentLoadError(f"Utility sprite '{key}' has no filename")
            sprites[key] = (display_name, filename)
        return sprites

    @staticmethod
    def _iter_records(record_maps: Iterable[RecordMap]) -> Iterable[Record]:
        for records in record_maps:
            yield from records.values()
