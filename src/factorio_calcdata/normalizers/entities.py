"""
Entity normalization.

Projects production entities (assemblers, furnaces, drills, belts...) into
uniform records. The fields kept per entity type come from
``ENTITY_FIELDS``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Set

from ..localization.localizer import NameLocalizer
from ..prototypes.models import (
    ENTITY_FIELDS,
    MISSING_ICON_PATH,
    MODULE_SPECIFICATION_FIELD,
    ContentTree,
    RawObject,
    Record,
    RecordMap,
    get_raw_table,
)
from ..utils.diagnostics import DiagnosticsSink
from .units import UnitConversionError, convert_field


@dataclass
class EntityCatalog:
    """Result of entity normalization, one map per entity type."""
    entities: Dict[str, RecordMap] = field(default_factory=dict)
    icon_paths: Set[str] = field(default_factory=set)


def canonical_minable(minable: Dict[str, Any]) -> Dict[str, Any]:
    """Rewrite a single ``result`` into a one-entry ``results`` list."""
    minable = dict(minable)
    result = minable.pop("result", None)
    if result is not None:
        minable["results"] = [{"name": result, "amount": 1}]
    return minable


class EntityNormalizer:
    """Builds one record map per supported entity type."""

    def __init__(self, localizer: NameLocalizer, diagnostics: DiagnosticsSink):
        self.localizer = localizer
        self.diagnostics = diagnostics
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def normalize(self, content: ContentTree) -> EntityCatalog:
        """Normalize all entities of the supported types."""
        catalog = EntityCatalog()

        for entity_type, attrs in ENTITY_FIELDS.items():
            entities: RecordMap = {}
            for name, raw_entity in get_raw_table(content, entity_type).items():
                try:
                    entity = self.normalize_entity(name, raw_entity, attrs)
                except UnitConversionError as e:
                    self.logger.error(f"Malformed {entity_type} '{name}': {e}")
                    self.diagnostics.emit(f"skipped {entity_type} {name}: {e}")
                    continue
                entities[name] = entity
                catalog.icon_paths.add(entity["icon"])
            catalog.entities[entity_type] = entities
            self.logger.debug(f"Normalized {len(entities)} {entity_type} entities")

        return catalog

    def normalize_entity(
        self, name: str, raw_entity: RawObject, attrs: Iterable[str]
    ) -> Record:
        """Normalize a single entity record."""
        icon = raw_entity.get("icon")
        if icon is None:
            self.diagnostics.emit(f"entity missing icon: {name}")
            icon = MISSING_ICON_PATH

        entity: Record = {"name": raw_entity.get("name", name), "icon": icon}
        self.localizer.assign(entity, raw_entity)

        has_modules = False
        for attr in attrs:
            if attr == MODULE_SPECIFICATION_FIELD:
                has_modules = True
            if raw_entity.get(attr) is not None:
                entity[attr] = raw_entity[attr]

        module_specification = entity.pop(MODULE_SPECIFICATION_FIELD, None)
        if module_specification is not None:
            entity["module_slots"] = module_specification.get("module_slots", 0)
        elif has_modules:
            entity["module_slots"] = 0

        if "energy_usage" in entity:
            convert_field(entity, "energy_usage")

        if isinstance(entity.get("minable"), dict):
            entity["minable"] = canonical_minable(entity["minable"])

        return entity
