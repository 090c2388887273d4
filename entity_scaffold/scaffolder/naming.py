"""Conventional name variants derived from an entity.

``Entity`` is the simple type name verbatim, ``entity`` is the same string
with only its first character lower-cased (``Invoice`` -> ``invoice``,
``URLMapping`` -> ``uRLMapping``).  The case converters are also registered
as Jinja2 filters.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from ..parser.models import EntityDescriptor


class EntityNames(NamedTuple):
    package: str
    Entity: str
    entity: str


def derive_names(entity: EntityDescriptor) -> EntityNames:
    """Return the namespace, PascalCase and camelCase names of *entity*."""
    return EntityNames(
        package=entity.package,
        Entity=entity.name,
        entity=lower_first(entity.name),
    )


def lower_first(value: str) -> str:
    """Lower-case the first character only."""
    return value[:1].lower() + value[1:]


def upper_first(value: str) -> str:
    """Upper-case the first character only."""
    return value[:1].upper() + value[1:]


def pascal_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    parts = re.split(r"[-_\s]+", value)
    return "".join(upper_first(word) for word in parts if word)


def snake_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some-thing`` to ``some_thing``."""
    s1 = re.sub(r"(.)([A-Z][a-z]+)", r"\1_\2", value)
    s2 = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", s1)
    return re.sub(r"[-\s]+", "_", s2).lower()


def camel_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    return lower_first(pascal_case(value))
