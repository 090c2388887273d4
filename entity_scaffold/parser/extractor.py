"""Entity descriptor loading and field extraction.

Descriptors come from one of three places:

- a JSON or YAML document (``load_entity``),
- an in-memory mapping (``entity_from_dict``),
- a live Python class (``describe_class``), whose own annotations are read
  once, ahead of generation.

``extract_fields`` then yields the fields a template should see: those
declared directly on the entity, minus shared (static) members.
"""

from __future__ import annotations

import inspect
import json
from pathlib import Path
from typing import Any, ClassVar, get_origin

import yaml
from pydantic import ValidationError

from ..errors import ConfigurationError
from ..conventions import package_dir
from ..utils import load_document
from .models import EntityDescriptor, FieldDescriptor


# ---------------------------------------------------------------------------
# Field extraction
# ---------------------------------------------------------------------------


def extract_fields(entity: EntityDescriptor) -> list[FieldDescriptor]:
    """Return the entity's own non-static fields in declaration order.

    Inherited fields are left out: scaffolding reflects only the shape the
    entity declares itself.
    """
    return [f for f in entity.fields if not f.static and not f.inherited]


# ---------------------------------------------------------------------------
# Descriptor sources
# ---------------------------------------------------------------------------


def entity_from_dict(data: dict[str, Any]) -> EntityDescriptor:
    """Validate a mapping into an ``EntityDescriptor``.

    Raises:
        ConfigurationError: If the mapping does not describe a valid entity.
    """
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Entity descriptor must be a mapping, got {type(data).__name__}"
        )
    try:
        return EntityDescriptor.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid entity descriptor: {exc}") from exc


def load_entity(path: str | Path) -> EntityDescriptor:
    """Load an entity descriptor from a JSON or YAML file.

    Expected shape::

        package: ca.example
        name: Invoice
        fields:
          - {name: id, type: Long}
          - {name: total, type: BigDecimal}
          - {name: SEQUENCE, type: String, static: true}

    Raises:
        ConfigurationError: If the file is missing, malformed, or invalid.
    """
    file_path = Path(path)
    try:
        data = load_document(file_path)
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Entity descriptor not found: {file_path}") from exc
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Cannot parse entity descriptor {file_path}: {exc}") from exc

    try:
        return entity_from_dict(data)
    except ConfigurationError as exc:
        raise ConfigurationError(f"{file_path}: {exc}") from exc


def describe_class(cls: type) -> EntityDescriptor:
    """Build a descriptor from a Python class's own annotations.

    ``inspect.get_annotations`` only returns annotations declared on *cls*
    itself, so base-class fields never appear.  ``ClassVar`` annotations are
    recorded as static.  The entity's location is the directory of the
    module that defines it.

    Raises:
        ConfigurationError: If the class is not defined in a source file on
            disk (builtins, zip-imported modules).
    """
    location = package_dir(cls)
    module = cls.__module__
    package = module.rpartition(".")[0]

    fields = [
        FieldDescriptor(
            name=name,
            type=_type_name(annotation),
            static=_is_class_var(annotation),
        )
        for name, annotation in inspect.get_annotations(cls).items()
    ]
    return EntityDescriptor(
        package=package,
        name=cls.__name__,
        fields=tuple(fields),
        location=location,
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        head = annotation.strip().split("[", 1)[0]
        return head in ("ClassVar", "typing.ClassVar")
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _type_name(annotation: Any) -> str:
    """Render an annotation as a declared type name."""
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation).replace("typing.", "")
