"""
Item normalization.

Projects every item-like prototype (items, fluids, tools, modules...) into
a uniform item record, attaches it to its subgroup and group, and collects
the fuel, fluid and module name lists.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Set

from ..localization.localizer import NameLocalizer
from ..prototypes.models import (
    CHEMICAL_FUEL_CATEGORY,
    DEFAULT_SUBGROUP,
    EXCLUDED_ITEM_SUBGROUPS,
    ITEM_FIELDS,
    ITEM_TYPES,
    ContentTree,
    GroupMap,
    RawObject,
    Record,
    RecordMap,
    get_raw_table,
)
from ..utils.diagnostics import DiagnosticsSink
from .units import UnitConversionError, convert_field


@dataclass
class ItemCatalog:
    """Result of item normalization."""
    items: RecordMap = field(default_factory=dict)
    groups: GroupMap = field(default_factory=dict)
    fluids: List[str] = field(default_factory=list)
    fuel: List[str] = field(default_factory=list)
    modules: List[str] = field(default_factory=list)
    icon_paths: Set[str] = field(default_factory=set)


def pick_layer_icon(
    record: Record, name: str, diagnostics: DiagnosticsSink
) -> Optional[str]:
    """Use the first icon layer as a stand-in for a missing ``icon``.

    Removes the ``icons`` layer list from ``record`` and returns the chosen
    path, or None if there is nothing usable.
    """
    layers: Any = record.pop("icons", None)
    if not layers:
        return None
    first = layers[0] if isinstance(layers, list) else None
    icon = first.get("icon") if isinstance(first, dict) else None
    if icon:
        diagnostics.emit(f"using first icon layer for {name}: {icon}")
    else:
        diagnostics.emit(f"first icon layer of {name} has no icon")
    return icon


class ItemNormalizer:
    """Builds the item catalog from raw item-like prototypes."""

    def __init__(self, localizer: NameLocalizer, diagnostics: DiagnosticsSink):
        self.localizer = localizer
        self.diagnostics = diagnostics
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def normalize(self, content: ContentTree) -> ItemCatalog:
        """Normalize all item-like prototypes of ``content``."""
        catalog = ItemCatalog()
        catalog.groups = self.build_groups(content)
        subgroups = get_raw_table(content, "item-subgroup")

        for item_type in ITEM_TYPES:
            for name, raw_item in get_raw_table(content, item_type).items():
                try:
                    item = self.normalize_item(name, raw_item, subgroups)
                except UnitConversionError as e:
                    self.logger.error(f"Malformed {item_type} '{name}': {e}")
                    self.diagnostics.emit(f"skipped {item_type} {name}: {e}")
                    continue
                if item is None:
                    continue

                catalog.items[name] = item
                catalog.icon_paths.add(item["icon"])
                if (
                    "fuel_value" in item
                    and item.get("fuel_category") == CHEMICAL_FUEL_CATEGORY
                ):
                    catalog.fuel.append(name)

        catalog.fuel.sort()
        catalog.fluids = sorted(get_raw_table(content, "fluid"))
        catalog.modules = sorted(get_raw_table(content, "module"))

        self.logger.info(
            f"Normalized {len(catalog.items)} items "
            f"({len(catalog.fuel)} fuels, {len(catalog.fluids)} fluids, "
            f"{len(catalog.modules)} modules)"
        )
        return catalog

    def build_groups(self, content: ContentTree) -> GroupMap:
        """Build the group -> subgroup taxonomy with display orders."""
        groups: GroupMap = {}
        for name, group in get_raw_table(content, "item-group").items():
            groups[group.get("name", name)] = {"order": group.get("order"), "subgroups": {}}

        for name, subgroup in get_raw_table(content, "item-subgroup").items():
            group = groups.get(subgroup.get("group", ""))
            if group is None:
                self.diagnostics.emit(
                    f"subgroup {name} belongs to unknown group {subgroup.get('group')}"
                )
                continue
            group["subgroups"][name] = subgroup.get("order")
        return groups

    def normalize_item(
        self, name: str, raw_item: RawObject, subgroups: Mapping[str, RawObject]
    ) -> Optional[Record]:
        """Normalize a single item; returns None when the item is omitted."""
        item: Record = {
            attr: raw_item[attr] for attr in ITEM_FIELDS if attr in raw_item
        }
        self.localizer.assign(item, raw_item)

        subgroup = item.setdefault("subgroup", DEFAULT_SUBGROUP)
        if subgroup in EXCLUDED_ITEM_SUBGROUPS:
            self.diagnostics.emit(f"skipped item {name}: excluded subgroup {subgroup}")
            return None
        subgroup_obj = subgroups.get(subgroup)
        if subgroup_obj is None:
            self.diagnostics.emit(f"skipped item {name}: unknown subgroup {subgroup}")
            return None
        item["group"] = subgroup_obj.get("group")

        if "icon" in item:
            item.pop("icons", None)
        else:
            icon = pick_layer_icon(item, name, self.diagnostics)
            if not icon:
                self.diagnostics.emit(f"skipped item {name}: no icon")
                return None
            item["icon"] = icon

        if "fuel_value" in item and "fuel_category" in item:
            convert_field(item, "fuel_value")
        return item
