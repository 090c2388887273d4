"""Entity scaffolder -- renders per-entity templates into a source tree.

Quick usage::

    from entity_scaffold.scaffolder import Scaffold
    from entity_scaffold.parser import load_entity

    entity = load_entity("invoice.yaml")
    Scaffold(entity, "templates", "src/main/java").render(
        "dao.java.j2", "${Entity}Dao.java"
    )
"""

from entity_scaffold.scaffolder.context import MERGE_KEYS, ScaffoldHelper, build_merge_context
from entity_scaffold.scaffolder.generator import Scaffold
from entity_scaffold.scaffolder.naming import EntityNames, derive_names
from entity_scaffold.scaffolder.templates import TemplateRenderer
from entity_scaffold.scaffolder.writer import IdempotentWriter, WriteOutcome

__all__ = [
    "MERGE_KEYS",
    "EntityNames",
    "IdempotentWriter",
    "Scaffold",
    "ScaffoldHelper",
    "TemplateRenderer",
    "WriteOutcome",
    "build_merge_context",
    "derive_names",
]
