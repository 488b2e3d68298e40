"""
Override merging for recipe variants.

A raw recipe may carry ``normal`` and ``expensive`` sub-records whose
fields replace the top-level ones for that difficulty. Merging never
mutates the raw prototype.
"""

from typing import Any, Iterable, Mapping, Optional

from .models import RECIPE_VARIANTS, RawObject


def merge_with_override(
    base: Mapping[str, Any],
    override: Optional[Mapping[str, Any]],
    drop_keys: Iterable[str] = (),
) -> RawObject:
    """Merge ``override`` over ``base`` into a new dict.

    Args:
        base: Record providing default values
        override: Record whose fields take precedence (may be None)
        drop_keys: Keys removed from the merged result

    Returns:
        New shallow-merged dict; neither input is modified
    """
    merged = dict(base)
    if override:
        merged.update(override)
    for key in drop_keys:
        merged.pop(key, None)
    return merged


def build_variant(raw_recipe: Mapping[str, Any], variant_key: str) -> RawObject:
    """Return the flattened recipe for one difficulty variant.

    Both variant sub-records are removed from the result regardless of
    which one was applied.
    """
    override = raw_recipe.get(variant_key)
    if not isinstance(override, Mapping):
        override = None
    return merge_with_override(raw_recipe, override, RECIPE_VARIANTS.values())
