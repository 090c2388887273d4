"""Entity descriptor parsing.

Loads the description of the type being scaffolded -- namespace, simple
name, declared fields -- from a JSON/YAML document, a mapping, or a Python
class, and extracts the fields templates get to see.

Usage::

    from entity_scaffold.parser import load_entity, extract_fields

    entity = load_entity("invoice.yaml")
    print(extract_fields(entity))
"""

from entity_scaffold.parser.models import EntityDescriptor, FieldDescriptor
from entity_scaffold.parser.extractor import (
    describe_class,
    entity_from_dict,
    extract_fields,
    load_entity,
)

__all__ = [
    "EntityDescriptor",
    "FieldDescriptor",
    "describe_class",
    "entity_from_dict",
    "extract_fields",
    "load_entity",
]
