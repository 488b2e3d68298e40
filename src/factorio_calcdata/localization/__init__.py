"""
Localization of prototype display names.

Expands the templated locale table and derives the display name of every
normalized prototype from it.
"""

from .templates import LocaleResolver, MAX_PASSES
from .localizer import NameLocalizer, NAME_SECTIONS

__all__ = [
    "LocaleResolver",
    "NameLocalizer",
    "MAX_PASSES",
    "NAME_SECTIONS",
]
