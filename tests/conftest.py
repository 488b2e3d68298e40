"""Shared fixtures for factorio-calcdata tests."""

from pathlib import Path
from typing import Any, Dict, Iterator

import pytest

from factorio_calcdata.icons.models import ModuleInfo
from factorio_calcdata.prototypes.loaders import RawContent
from factorio_calcdata.utils.diagnostics import DiagnosticsSink


def _item(name: str, subgroup: str, order: str, **extra: Any) -> Dict[str, Any]:
    item: Dict[str, Any] = {
        "type": "item",
        "name": name,
        "icon": f"__base__/graphics/icons/{name}.png",
        "subgroup": subgroup,
        "order": order,
        "stack_size": 100,
    }
    item.update(extra)
    return item


@pytest.fixture
def content() -> Dict[str, Any]:
    """A small prototype tree covering every normalizer branch."""
    return {
        "item-group": {
            "logistics": {"type": "item-group", "name": "logistics", "order": "a"},
            "intermediate-products": {
                "type": "item-group",
                "name": "intermediate-products",
                "order": "c",
            },
            "other": {"type": "item-group", "name": "other", "order": "z"},
        },
        "item-subgroup": {
            "belt": {"name": "belt", "group": "logistics", "order": "b"},
            "raw-material": {"name": "raw-material", "group": "intermediate-products", "order": "c"},
            "intermediate-product": {
                "name": "intermediate-product",
                "group": "intermediate-products",
                "order": "g",
            },
            "fluid": {"name": "fluid", "group": "intermediate-products", "order": "a"},
            "module": {"name": "module", "group": "intermediate-products", "order": "m"},
            "fill-barrel": {"name": "fill-barrel", "group": "intermediate-products", "order": "x"},
            "other": {"name": "other", "group": "other", "order": "d"},
        },
        "item": {
            "iron-plate": _item("iron-plate", "raw-material", "b[iron-plate]"),
            "iron-gear-wheel": _item("iron-gear-wheel", "intermediate-product", "c[iron-gear-wheel]"),
            "coal": _item(
                "coal", "raw-material", "a[coal]", fuel_value="4MJ", fuel_category="chemical"
            ),
            "transport-belt": _item(
                "transport-belt", "belt", "a[transport-belt]", place_result="transport-belt"
            ),
            "water-barrel": _item("water-barrel", "fill-barrel", "b[water-barrel]"),
            "layered-widget": {
                "type": "item",
                "name": "layered-widget",
                "icons": [
                    {"icon": "__base__/graphics/icons/layered-widget.png"},
                    {"icon": "__base__/graphics/icons/overlay.png", "tint": {"r": 1}},
                ],
                "subgroup": "intermediate-product",
                "order": "z",
                "stack_size": 10,
            },
            "iconless": {"type": "item", "name": "iconless", "order": "z", "stack_size": 1},
        },
        "fluid": {
            "water": {
                "type": "fluid",
                "name": "water",
                "icon": "__base__/graphics/icons/fluid/water.png",
                "subgroup": "fluid",
                "order": "a[fluid]-a[water]",
            },
            "crude-oil": {
                "type": "fluid",
                "name": "crude-oil",
                "icon": "__base__/graphics/icons/fluid/crude-oil.png",
                "subgroup": "fluid",
                "order": "a[fluid]-b[crude-oil]",
            },
        },
        "module": {
            "speed-module": {
                "type": "module",
                "name": "speed-module",
                "icon": "__base__/graphics/icons/speed-module.png",
                "subgroup": "module",
                "category": "speed",
                "effect": {"speed": {"bonus": 0.2}},
                "order": "a[speed]-a[speed-module-1]",
                "stack_size": 50,
            },
        },
        "recipe": {
            "iron-gear-wheel": {
                "type": "recipe",
                "name": "iron-gear-wheel",
                "normal": {"ingredients": [["iron-plate", 2]], "result": "iron-gear-wheel"},
                "expensive": {"ingredients": [["iron-plate", 4]], "result": "iron-gear-wheel"},
            },
            "iron-plate": {
                "type": "recipe",
                "name": "iron-plate",
                "category": "smelting",
                "energy_required": 3.2,
                "ingredients": [["iron-ore", 1]],
                "result": "iron-plate",
            },
            "transport-belt": {
                "type": "recipe",
                "name": "transport-belt",
                "ingredients": [
                    {"type": "item", "name": "iron-plate", "amount": 1},
                    {"name": "iron-gear-wheel", "amount": 1},
                ],
                "result": "transport-belt",
                "result_count": 2,
            },
            "advanced-oil-processing": {
                "type": "recipe",
                "name": "advanced-oil-processing",
                "category": "oil-processing",
                "icon": "__base__/graphics/icons/fluid/advanced-oil-processing.png",
                "subgroup": "fluid",
                "order": "a[oil-processing]-b",
                "energy_required": 5,
                "ingredients": [{"type": "fluid", "name": "crude-oil", "amount": 100}],
                "results": [
                    {"type": "fluid", "name": "heavy-oil", "amount": 25},
                    {"type": "fluid", "name": "water", "amount": 45},
                ],
            },
            "fill-water-barrel": {
                "type": "recipe",
                "name": "fill-water-barrel",
                "icon": "__base__/graphics/icons/fluid/barreling/fill-water-barrel.png",
                "subgroup": "fill-barrel",
                "order": "a",
                "ingredients": [{"type": "fluid", "name": "water", "amount": 50}],
                "result": "water-barrel",
            },
            "mystery": {
                "type": "recipe",
                "name": "mystery",
                "ingredients": [["iron-plate", 1]],
                "result": "unobtainium",
            },
            "gear-from-scrap": {
                "type": "recipe",
                "name": "gear-from-scrap",
                "ingredients": [["iron-plate", 1]],
                "results": [
                    {"name": "iron-gear-wheel", "amount": 1},
                    {"name": "scrap", "amount_min": 0, "amount_max": 2},
                ],
                "main_product": "iron-gear-wheel",
            },
        },
        "assembling-machine": {
            "assembling-machine-1": {
                "type": "assembling-machine",
                "name": "assembling-machine-1",
                "icon": "__base__/graphics/icons/assembling-machine-1.png",
                "crafting_speed": 0.5,
                "crafting_categories": ["crafting"],
                "energy_usage": "75kW",
                "energy_source": {"type": "electric"},
                "ingredient_count": 2,
                "max_health": 300,
            },
            "assembling-machine-2": {
                "type": "assembling-machine",
                "name": "assembling-machine-2",
                "icon": "__base__/graphics/icons/assembling-machine-2.png",
                "crafting_speed": 0.75,
                "crafting_categories": ["crafting", "advanced-crafting"],
                "energy_usage": "150kW",
                "energy_source": {"type": "electric"},
                "module_specification": {"module_slots": 2},
                "allowed_effects": ["speed", "consumption"],
            },
        },
        "mining-drill": {
            "electric-mining-drill": {
                "type": "mining-drill",
                "name": "electric-mining-drill",
                "icon": "__base__/graphics/icons/electric-mining-drill.png",
                "energy_usage": "90kW",
                "mining_speed": 0.5,
                "mining_power": 3,
                "resource_categories": ["basic-solid"],
                "module_specification": {"module_slots": 3},
            },
        },
        "resource": {
            "iron-ore": {
                "type": "resource",
                "name": "iron-ore",
                "icon": "__base__/graphics/icons/iron-ore.png",
                "category": "basic-solid",
                "minable": {"mining_time": 1, "result": "iron-ore"},
            },
        },
        "transport-belt": {
            "transport-belt": {
                "type": "transport-belt",
                "name": "transport-belt",
                "icon": "__base__/graphics/icons/transport-belt.png",
                "speed": 0.03125,
            },
        },
        "solar-panel": {
            "solar-panel": {"type": "solar-panel", "name": "solar-panel", "production": "60kW"},
        },
        "utility-sprites": {
            "default": {
                "slot_icon_module": {"filename": "__core__/graphics/slot-icon-module.png"},
                "clock": {"filename": "__core__/graphics/clock-icon.png"},
            },
        },
    }


@pytest.fixture
def locale() -> Dict[str, Dict[str, str]]:
    """English locale table with one nested template."""
    return {
        "item-name": {
            "iron-plate": "Iron plate",
            "iron-gear-wheel": "Iron gear wheel",
            "coal": "Coal",
            "speed-module": "Speed module",
            "layered-widget": "Layered widget",
            "water-barrel": "__FLUID__water__ barrel",
        },
        "fluid-name": {
            "water": "Water",
            "crude-oil": "Crude oil",
            "heavy-oil": "Heavy oil",
        },
        "entity-name": {
            "transport-belt": "Transport belt",
            "assembling-machine-1": "Assembling machine 1",
            "assembling-machine-2": "Assembling machine 2",
            "electric-mining-drill": "Electric mining drill",
            "iron-ore": "Iron ore",
            "solar-panel": "Solar panel",
        },
        "recipe-name": {
            "advanced-oil-processing": "Advanced oil processing",
            "fill-barrel": "Fill __1__ barrel",
            "gear-from-scrap": "__ITEM__iron-gear-wheel__ from scrap",
        },
    }


@pytest.fixture
def module_info() -> Dict[str, ModuleInfo]:
    """Core and base unpacked on disk."""
    return {
        "core": ModuleInfo(
            name="core", local_path="/opt/factorio/data/core", mod_name="core", version="0.17.79"
        ),
        "base": ModuleInfo(
            name="base", local_path="/opt/factorio/data/base", mod_name="base", version="0.17.79"
        ),
    }


@pytest.fixture
def raw_content(
    content: Dict[str, Any],
    locale: Dict[str, Dict[str, str]],
    module_info: Dict[str, ModuleInfo],
) -> RawContent:
    """Loaded input as the external loader would provide it."""
    return RawContent(
        content=content, locale=locale, module_info=module_info, core_version="0.17.79"
    )


@pytest.fixture
def diagnostics() -> DiagnosticsSink:
    """Fresh diagnostics sink."""
    return DiagnosticsSink()


@pytest.fixture
def settings_dir(tmp_path: Path) -> Path:
    """Redirect QSettings storage into the test's temporary directory."""
    from PySide6.QtCore import QSettings

    path = tmp_path / "settings"
    for fmt in (QSettings.Format.NativeFormat, QSettings.Format.IniFormat):
        QSettings.setPath(fmt, QSettings.Scope.UserScope, str(path))
    return path


@pytest.fixture
def app_settings(settings_dir: Path) -> Iterator[Any]:
    """AppSettings on an isolated storage location."""
    from factorio_calcdata.settings import AppSettings

    settings = AppSettings(profile="pytest")
    yield settings
    settings.settings.clear()
    settings.settings.sync()
