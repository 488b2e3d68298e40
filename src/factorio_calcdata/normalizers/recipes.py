"""
Recipe normalization.

Every raw recipe yields up to two normalized variants, ``normal`` and
``alternate`` (the prototype's ``expensive`` difficulty). Each variant is
the base recipe with that variant's overrides merged in, completed with
display attributes inherited from the recipe's principal output and with
its ingredient/result lists rewritten to ``{name, amount}`` entries.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

from ..localization.localizer import NameLocalizer
from ..prototypes.merge import build_variant
from ..prototypes.models import (
    DEFAULT_ENERGY_REQUIRED,
    DEFAULT_RECIPE_CATEGORY,
    EXCLUDED_RECIPE_SUBGROUPS,
    INHERITED_RECIPE_FIELDS,
    RECIPE_VARIANTS,
    ContentTree,
    RawObject,
    Record,
    RecordMap,
    get_raw_table,
    single_result_name,
)
from ..utils.diagnostics import DiagnosticsSink


@dataclass
class RecipeCatalog:
    """Result of recipe normalization, one map per variant."""
    variants: Dict[str, RecordMap] = field(
        default_factory=lambda: {variant: {} for variant in RECIPE_VARIANTS}
    )
    icon_paths: Set[str] = field(default_factory=set)

    @property
    def normal(self) -> RecordMap:
        return self.variants["normal"]

    @property
    def alternate(self) -> RecordMap:
        return self.variants["alternate"]


def canonical_entry(
    entry: Any, recipe_name: str, diagnostics: DiagnosticsSink
) -> Any:
    """Rewrite a positional ``[name, amount]`` entry as ``{name, amount}``.

    Named entries are copied unchanged, including range results that give
    ``amount_min``/``amount_max`` instead of ``amount``.
    """
    if isinstance(entry, (list, tuple)):
        canonical: Dict[str, Any] = {"name": entry[0] if entry else None}
        if len(entry) > 1:
            canonical["amount"] = entry[1]
        return canonical
    if isinstance(entry, dict):
        if (
            "amount" not in entry
            and "amount_min" not in entry
            and "amount_max" not in entry
        ):
            diagnostics.emit(
                f"entry {entry.get('name')} of recipe {recipe_name} has no amount"
            )
        return dict(entry)
    diagnostics.emit(f"unexpected entry in recipe {recipe_name}: {entry!r}")
    return entry


def canonicalize_recipe(
    recipe: Record, recipe_name: str, diagnostics: DiagnosticsSink
) -> None:
    """Canonicalize results, ingredients and defaults of ``recipe`` in place."""
    result = recipe.pop("result", None)
    result_count = recipe.pop("result_count", None)
    if result is not None:
        recipe["results"] = [
            {"name": result, "amount": 1 if result_count is None else result_count}
        ]

    recipe["results"] = [
        canonical_entry(entry, recipe_name, diagnostics)
        for entry in recipe.get("results") or []
    ]
    recipe["ingredients"] = [
        canonical_entry(entry, recipe_name, diagnostics)
        for entry in recipe.get("ingredients") or []
    ]

    if recipe.get("energy_required") is None:
        recipe["energy_required"] = DEFAULT_ENERGY_REQUIRED
    if recipe.get("category") is None:
        recipe["category"] = DEFAULT_RECIPE_CATEGORY


class RecipeNormalizer:
    """Builds the normal and alternate recipe maps."""

    def __init__(self, localizer: NameLocalizer, diagnostics: DiagnosticsSink):
        self.localizer = localizer
        self.diagnostics = diagnostics
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def normalize(self, content: ContentTree, items: RecordMap) -> RecipeCatalog:
        """Normalize every raw recipe against the normalized item table."""
        catalog = RecipeCatalog()
        raw_recipes = get_raw_table(content, "recipe")

        for name, raw_recipe in raw_recipes.items():
            for variant, variant_key in RECIPE_VARIANTS.items():
                recipe = self.normalize_variant(name, raw_recipe, variant_key, items)
                if recipe is None:
                    continue
                catalog.variants[variant][name] = recipe
                catalog.icon_paths.add(recipe["icon"])

        self.logger.info(
            f"Normalized {len(raw_recipes)} recipes: "
            + ", ".join(
                f"{len(recipes)} {variant}"
                for variant, recipes in catalog.variants.items()
            )
        )
        return catalog

    def normalize_variant(
        self,
        name: str,
        raw_recipe: RawObject,
        variant_key: str,
        items: RecordMap,
    ) -> Optional[Record]:
        """Normalize one variant of a recipe; returns None when omitted."""
        recipe = build_variant(raw_recipe, variant_key)
        # Layered icons are not drawn; icon comes from the recipe or its output
        recipe.pop("icons", None)

        principal, explicit = self.find_principal_output(name, recipe, items)
        if principal is not None:
            if explicit:
                recipe["display_name"] = principal.get("name", recipe["main_product"])
            for attr in INHERITED_RECIPE_FIELDS:
                if recipe.get(attr) is None and principal.get(attr) is not None:
                    recipe[attr] = principal[attr]

        missing = [attr for attr in INHERITED_RECIPE_FIELDS if recipe.get(attr) is None]
        if missing:
            self.diagnostics.emit(
                f"recipe skip: {name} because of {', '.join(missing)}"
            )
            return None
        if recipe["subgroup"] in EXCLUDED_RECIPE_SUBGROUPS:
            self.diagnostics.emit(
                f"recipe skip: {name} in excluded subgroup {recipe['subgroup']}"
            )
            return None

        canonicalize_recipe(recipe, name, self.diagnostics)

        source = raw_recipe if raw_recipe.get("type") else {**raw_recipe, "type": "recipe"}
        results: List[Any] = recipe["results"]
        fallback = results[0] if results and isinstance(results[0], dict) else None
        self.localizer.assign(recipe, source, fallback)
        return recipe

    def find_principal_output(
        self, name: str, recipe: Mapping[str, Any], items: RecordMap
    ) -> Tuple[Optional[Record], bool]:
        """Find the item a recipe is considered to produce.

        Precedence: an explicit ``main_product`` that is a known item, then
        the single declared result, then an item named like the recipe.

        Returns:
            Tuple of (principal output item or None, whether it came from
            an explicit ``main_product``)
        """
        principal: Optional[Record] = None
        result_name = single_result_name(recipe)
        if result_name:
            principal = items.get(result_name)
            if principal is None:
                self.diagnostics.emit(f"main product does not exist: {name}")

        main_product = recipe.get("main_product")
        if main_product:
            if result_name and main_product != result_name:
                self.diagnostics.emit(f"main_product differs from result: {name}")
            explicit = items.get(main_product)
            if explicit is not None:
                return explicit, True
            self.diagnostics.emit(f"main product is not an item: {main_product}")

        if principal is None and name in items:
            self.diagnostics.emit(f"fell back on name: {name}")
            principal = items[name]
        return principal, False
