"""Entity scaffold -- template-driven source generation for a single entity."""

from entity_scaffold.errors import (
    ConfigurationError,
    FilesystemError,
    ScaffoldError,
    TemplateResolutionError,
    TemplateSubstitutionError,
)
from entity_scaffold.parser import EntityDescriptor, FieldDescriptor, describe_class, load_entity
from entity_scaffold.scaffolder import Scaffold

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EntityDescriptor",
    "FieldDescriptor",
    "FilesystemError",
    "Scaffold",
    "ScaffoldError",
    "TemplateResolutionError",
    "TemplateSubstitutionError",
    "describe_class",
    "load_entity",
]
