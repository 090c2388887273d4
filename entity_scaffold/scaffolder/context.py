"""Merge context construction.

Every render receives the same fixed key set:

- ``package``: the entity's namespace
- ``Entity``: the simple type name
- ``entity``: the simple type name with its first character lower-cased
- ``fields``: the entity's own non-static fields, in declaration order
- ``date``: today's local date, ``YYYY-MM-DD``
- ``scaffold``: a ``ScaffoldHelper`` for calling back into generation

The context is built anew for each render call, so ``date`` is the date of
that call, not of the orchestrator's construction.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Callable

from ..parser.extractor import extract_fields
from ..parser.models import EntityDescriptor
from .naming import derive_names, lower_first, upper_first

if TYPE_CHECKING:
    from .generator import Scaffold

MERGE_KEYS = ("package", "Entity", "entity", "fields", "date", "scaffold")


class FieldList(list):
    """Field sequence that prints one ``<type> <name>`` per line."""

    def __str__(self) -> str:
        return "\n".join(str(f) for f in self)


class ScaffoldHelper:
    """The slice of the orchestrator exposed to templates.

    A template can trigger a further render of the same entity::

        ${ scaffold.render("dao.java.j2", "${Entity}Dao.java") }
    """

    def __init__(self, scaffold: "Scaffold") -> None:
        self._scaffold = scaffold

    @property
    def entity_name(self) -> str:
        return self._scaffold.entity.name

    @property
    def resources_root(self) -> str:
        return str(self._scaffold.resources_dir())

    def render(self, template_name: str, out_file_name: str) -> str:
        """Render another template for the bound entity.

        Returns an empty string so the call can sit inline in a template.
        """
        self._scaffold.render(template_name, out_file_name)
        return ""

    @staticmethod
    def lower_first(value: str) -> str:
        return lower_first(value)

    @staticmethod
    def upper_first(value: str) -> str:
        return upper_first(value)


def build_merge_context(
    entity: EntityDescriptor,
    helper: ScaffoldHelper,
    today: Callable[[], date] = date.today,
) -> dict[str, Any]:
    """Assemble the merge context for one render call."""
    names = derive_names(entity)
    fields: FieldList = FieldList(extract_fields(entity))
    return {
        "package": names.package,
        "Entity": names.Entity,
        "entity": names.entity,
        "fields": fields,
        "date": today().isoformat(),
        "scaffold": helper,
    }
