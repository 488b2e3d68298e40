"""
Normalizers turning raw prototypes into render-ready records.

Each normalizer returns a catalog of records plus the set of icon paths
its records reference; the icon atlas is built from the union of those
sets once every normalizer has run.
"""

from .units import convert_power, UnitConversionError, SI_PREFIX_FACTORS
from .items import ItemNormalizer, ItemCatalog
from .recipes import RecipeNormalizer, RecipeCatalog
from .entities import EntityNormalizer, EntityCatalog

__all__ = [
    "ItemNormalizer",
    "ItemCatalog",
    "RecipeNormalizer",
    "RecipeCatalog",
    "EntityNormalizer",
    "EntityCatalog",
    "convert_power",
    "UnitConversionError",
    "SI_PREFIX_FACTORS",
]
