"""
Data models for Factorio prototype data.

Contains type definitions and the fixed lookup tables used throughout the
processing pipeline. Keeps the dict-based approach for raw and normalized
records while providing clear type hints.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, TypeAlias

# Type aliases for clarity
RawObject: TypeAlias = Dict[str, Any]
"""A single raw prototype (item, recipe, entity...) as a dict."""

RawTable: TypeAlias = Dict[str, RawObject]
"""Maps prototype name to the raw prototype of one type."""

ContentTree: TypeAlias = Dict[str, RawTable]
"""Maps prototype type (e.g. 'item', 'recipe') to its raw table."""

LocaleTable: TypeAlias = Dict[str, Dict[str, str]]
"""Maps locale section (e.g. 'item-name') to key -> display string."""

Record: TypeAlias = Dict[str, Any]
"""A normalized output record."""

RecordMap: TypeAlias = Dict[str, Record]
"""Maps record name to normalized record."""

GroupMap: TypeAlias = Dict[str, Dict[str, Any]]
"""Maps group name to {'order': ..., 'subgroups': {name: order}}."""


# Item-like prototype types, in lookup order
ITEM_TYPES: Tuple[str, ...] = (
    "ammo",
    "armor",
    "blueprint",
    "blueprint-book",
    "capsule",
    "deconstruction-item",
    "fluid",
    "gun",
    "item",
    "item-with-entity-data",
    "mining-tool",
    "module",
    "rail-planner",
    "repair-tool",
    "tool",
)

ITEM_FIELDS: Tuple[str, ...] = (
    "category",
    "effect",
    "fuel_category",
    "fuel_value",
    "icon",
    "icons",
    "limitation",
    "name",
    "order",
    "stack_size",
    "subgroup",
    "type",
)

DEFAULT_SUBGROUP = "other"
CHEMICAL_FUEL_CATEGORY = "chemical"

# Barrel filling/emptying and gas bottles are kept out of the catalog
EXCLUDED_ITEM_SUBGROUPS = frozenset({"fill-barrel", "bob-gas-bottle"})
EXCLUDED_RECIPE_SUBGROUPS = frozenset({"empty-barrel", "fill-barrel"})

# Recipe variants: output name -> override key inside the raw recipe
RECIPE_VARIANTS: Mapping[str, str] = MappingProxyType(
    {"normal": "normal", "alternate": "expensive"}
)
INHERITED_RECIPE_FIELDS: Tuple[str, ...] = ("subgroup", "order", "icon")
DEFAULT_ENERGY_REQUIRED = 0.5
DEFAULT_RECIPE_CATEGORY = "crafting"

MODULE_SPECIFICATION_FIELD = "module_specification"

# Entity type -> fields retained on the normalized entity
ENTITY_FIELDS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "accumulator": ("energy_source",),
        "assembling-machine": (
            "allowed_effects",
            "crafting_categories",
            "crafting_speed",
            "energy_source",
            "energy_usage",
            "ingredient_count",
            "module_specification",
        ),
        "boiler": ("energy_consumption", "energy_source"),
        "furnace": (
            "allowed_effects",
            "crafting_categories",
            "crafting_speed",
            "energy_source",
            "energy_usage",
            "module_specification",
        ),
        "generator": ("effectivity", "fluid_usage_per_tick"),
        "mining-drill": (
            "energy_source",
            "energy_usage",
            "mining_power",
            "mining_speed",
            "module_specification",
            "resource_categories",
        ),
        "offshore-pump": ("fluid", "pumping_speed"),
        "reactor": ("burner", "consumption"),
        "resource": ("category", "minable"),
        "rocket-silo": (
            "active_energy_usage",
            "allowed_effects",
            "crafting_categories",
            "crafting_speed",
            "energy_usage",
            "idle_energy_usage",
            "lamp_energy_usage",
            "module_specification",
            "rocket_parts_required",
        ),
        "solar-panel": ("production",),
        "transport-belt": ("speed",),
    }
)

MISSING_ICON_PATH = "__core__/graphics/too-far.png"

# Utility sprites that must always be present in the atlas
UTILITY_SPRITES_TYPE = "utility-sprites"
UTILITY_SPRITES: Mapping[str, str] = MappingProxyType(
    {"slot_icon_module": "no module", "clock": "time"}
)


def get_raw_table(content: ContentTree, prototype_type: str) -> RawTable:
    """Return the raw table for a prototype type (empty if the type is absent)."""
    return content.get(prototype_type) or {}


def find_item_prototype(content: ContentTree, name: str) -> Optional[RawObject]:
    """Find a raw item-like prototype by name across all item types."""
    for item_type in ITEM_TYPES:
        obj = get_raw_table(content, item_type).get(name)
        if obj is not None:
            return obj
    return None


def single_result_name(recipe: Mapping[str, Any]) -> Optional[str]:
    """Return the name of a recipe's single declared output, if it has one.

    Handles the scalar ``result`` form as well as a one-element ``results``
    list whose entry is either named (``{"name": ...}``) or positional.
    """
    result = recipe.get("result")
    if result:
        return str(result)
    results: Optional[List[Any]] = recipe.get("results")
    if not results or len(results) != 1:
        return None
    entry = results[0]
    if isinstance(entry, dict):
        name = entry.get("name")
        return str(name) if name else None
    if isinstance(entry, (list, tuple)) and entry:
        return str(entry[0])
    return None
