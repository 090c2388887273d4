"""Pydantic v2 models describing the entity being scaffolded.

An entity is identified by its namespace (``package``) and simple type name,
and carries its declared fields in declaration order.  Both models are frozen
so an entity bound to a ``Scaffold`` cannot change underneath it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldDescriptor(BaseModel):
    """A single field declared on an entity."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Field name, e.g. 'total'")
    type: str = Field(..., min_length=1, description="Declared type name, e.g. 'BigDecimal'")
    static: bool = Field(default=False, description="Shared/class-level member")
    inherited: bool = Field(default=False, description="Declared on a supertype")

    def __str__(self) -> str:
        return f"{self.type} {self.name}"


class EntityDescriptor(BaseModel):
    """Identity and declared shape of the type being scaffolded."""

    model_config = ConfigDict(frozen=True)

    package: str = Field(default="", description="Namespace, e.g. 'ca.example'")
    name: str = Field(..., min_length=1, description="Simple type name, e.g. 'Invoice'")
    fields: tuple[FieldDescriptor, ...] = Field(
        default=(), description="Fields in declaration order"
    )
    location: Optional[Path] = Field(
        default=None,
        description="Directory holding the entity's built artifact, for output-root discovery",
    )

    @property
    def qualified_name(self) -> str:
        """``package.Name``, or just ``Name`` for the root namespace."""
        return f"{self.package}.{self.name}" if self.package else self.name
