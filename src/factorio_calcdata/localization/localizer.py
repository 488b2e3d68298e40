"""
Display name localization for prototypes.

Resolves the name shown for an item, recipe or entity from the expanded
locale table, using the prototype's own ``localised_name`` when it has
one and a chain of well-known locale sections otherwise.
"""

import logging
import re
from typing import Any, Mapping, Optional, Sequence

from ..prototypes.models import (
    ContentTree,
    LocaleTable,
    Record,
    find_item_prototype,
    single_result_name,
)
from ..utils.diagnostics import DiagnosticsSink

PLACEHOLDER_PATTERN = re.compile(r"__(\d+)__")

# Sections searched for a prototype's plain name, in priority order
NAME_SECTIONS = (
    "recipe-name",
    "item-name",
    "fluid-name",
    "equipment-name",
    "entity-name",
)


class NameLocalizer:
    """Produces display names from a resolved locale table.

    The lookup order is:
    1. A recipe without its own ``localised_name`` whose single output is a
       known item is named after that item instead.
    2. A native ``localised_name`` template (``[template_ref, [arg_refs]]``).
    3. The object's name (or an item's ``place_result``) looked up in the
       name sections, first for the object and then for the fallback.
    """

    def __init__(
        self,
        locale: LocaleTable,
        content: ContentTree,
        diagnostics: DiagnosticsSink,
        language: str = "en",
    ):
        self.locale = locale
        self.content = content
        self.diagnostics = diagnostics
        self.language = language
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def localize(
        self,
        raw_object: Mapping[str, Any],
        fallback: Optional[Mapping[str, Any]] = None,
    ) -> Optional[str]:
        """Return the display name of ``raw_object`` or None if not found."""
        source = self._substitute_recipe_output(raw_object)

        native = source.get("localised_name")
        if native:
            localized = self._resolve_native(native)
            if localized is not None:
                return localized
            self.diagnostics.emit(
                f"unresolvable localised_name for {source.get('type')} "
                f"named {source.get('name')}: {native!r}"
            )

        for candidate in (source, fallback):
            if candidate is None:
                continue
            localized = self._lookup_name(self._lookup_key(candidate))
            if localized is not None:
                return localized

        self.diagnostics.emit(
            f"no localized name for {raw_object.get('type')} named {raw_object.get('name')}"
        )
        return None

    def assign(
        self,
        record: Record,
        raw_object: Mapping[str, Any],
        fallback: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """Set ``record['localized_name']`` when a display name is found."""
        localized = self.localize(raw_object, fallback)
        if localized is not None:
            record["localized_name"] = {self.language: localized}

    def _substitute_recipe_output(
        self, raw_object: Mapping[str, Any]
    ) -> Mapping[str, Any]:
        # Overridden recipes keep the name of the item they actually produce
        if raw_object.get("type") != "recipe" or raw_object.get("localised_name"):
            return raw_object
        output_name = single_result_name(raw_object)
        if not output_name:
            return raw_object
        item = find_item_prototype(self.content, output_name)
        return item if item is not None else raw_object

    @staticmethod
    def _lookup_key(obj: Mapping[str, Any]) -> Optional[str]:
        """Name under which ``obj`` is looked up in the name sections."""
        if obj.get("type") == "item" and obj.get("place_result"):
            return str(obj["place_result"])
        name = obj.get("name")
        return str(name) if name is not None else None

    def _lookup_name(self, name: Optional[str]) -> Optional[str]:
        if name is None:
            return None
        for section in NAME_SECTIONS:
            localized = self.locale.get(section, {}).get(name)
            if localized is not None:
                return localized
        return None

    def _lookup_ref(self, ref: Any) -> Optional[str]:
        """Resolve a ``section.key`` reference against the locale table."""
        if isinstance(ref, (list, tuple)):
            if not ref:
                return None
            ref = ref[0]
        if not isinstance(ref, str) or "." not in ref:
            return None
        section, key = ref.split(".", 1)
        return self.locale.get(section, {}).get(key)

    def _resolve_native(self, localised_name: Any) -> Optional[str]:
        """Resolve a ``[template_ref, [arg_refs...]]`` localised name."""
        if isinstance(localised_name, str):
            return self._lookup_ref(localised_name)
        if not isinstance(localised_name, (list, tuple)) or not localised_name:
            return None

        template = self._lookup_ref(localised_name[0])
        if template is None:
            return None

        arguments: Sequence[Any] = []
        if len(localised_name) > 2:
            # One reference per extra element
            arguments = localised_name[1:]
        elif len(localised_name) == 2:
            raw_arguments = localised_name[1]
            if isinstance(raw_arguments, (list, tuple)):
                arguments = raw_arguments
            else:
                arguments = [raw_arguments]

        def replace(match: "re.Match[str]") -> str:
            index = int(match.group(1))
            if 1 <= index <= len(arguments):
                value = self._lookup_ref(arguments[index - 1])
                if value is not None:
                    return value
            return match.group(0)

        return PLACEHOLDER_PATTERN.sub(replace, template)
