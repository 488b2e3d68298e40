"""
Locale template expansion.

Locale strings may reference other strings with ``__<Section>__<Key>__``
markers (e.g. ``__ITEM__iron-plate__`` refers to ``item-name.iron-plate``).
Expansion runs in passes until the table stops changing.
"""

import logging
import re
from typing import Dict, Tuple

from ..prototypes.models import LocaleTable

TEMPLATE_PATTERN = re.compile(r"__(.*?)__(.*?)__")
MAX_PASSES = 10


class LocaleResolver:
    """Expands nested locale templates in place up to a fixed point.

    References may form cycles, so expansion is capped at ``max_passes``.
    Hitting the cap is not an error: the table simply keeps its best effort.
    """

    def __init__(self, max_passes: int = MAX_PASSES):
        self.max_passes = max_passes
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def resolve(self, locale: LocaleTable) -> int:
        """Expand templates in ``locale`` in place.

        Returns:
            Number of passes performed
        """
        passes = 0
        while passes < self.max_passes:
            changed = self._expand_pass(locale)
            passes += 1
            self.logger.debug(f"Locale pass {passes}: {changed} strings changed")
            if changed == 0:
                return passes

        self.logger.warning(
            f"Locale expansion stopped after {passes} passes, cyclic references remain"
        )
        return passes

    def _expand_pass(self, locale: LocaleTable) -> int:
        """Run one pass against a snapshot of the table and apply changes."""
        snapshot = {section: dict(strings) for section, strings in locale.items()}
        updates: Dict[Tuple[str, str], str] = {}

        for section_name, strings in snapshot.items():
            for key, text in strings.items():
                if not isinstance(text, str):
                    continue
                expanded = self.expand(snapshot, text)
                if expanded != text:
                    updates[(section_name, key)] = expanded

        for (section_name, key), expanded in updates.items():
            locale[section_name][key] = expanded
        return len(updates)

    @staticmethod
    def expand(locale: LocaleTable, text: str) -> str:
        """Substitute every resolvable template marker in ``text`` once."""

        def replace(match: "re.Match[str]") -> str:
            section = match.group(1).lower() + "-name"
            strings = locale.get(section)
            if strings is None:
                return match.group(0)
            value = strings.get(match.group(2))
            return value if value is not None else match.group(0)

        return TEMPLATE_PATTERN.sub(replace, text)
