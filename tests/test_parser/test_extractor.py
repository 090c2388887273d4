"""Tests for entity descriptor loading and field extraction.

Covers:
- extract_fields: own, non-static fields in declaration order
- entity_from_dict validation
- load_entity from JSON and YAML (valid, missing, malformed, invalid)
- describe_class on live Python classes (own annotations, ClassVar, location)
"""

from __future__ import annotations

import json
import textwrap
from decimal import Decimal
from pathlib import Path
from typing import ClassVar

import pytest

from entity_scaffold.errors import ConfigurationError
from entity_scaffold.parser.extractor import (
    describe_class,
    entity_from_dict,
    extract_fields,
    load_entity,
)
from entity_scaffold.parser.models import EntityDescriptor, FieldDescriptor


# ---------------------------------------------------------------------------
# Markers
# ---------------------------------------------------------------------------

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Sample classes for describe_class
# ---------------------------------------------------------------------------


class Auditable:
    created_by: str
    updated_by: str


class Invoice(Auditable):
    SEQUENCE: ClassVar[int] = 0
    id: int
    total: Decimal
    notes: list[str]


class Empty:
    pass


# ---------------------------------------------------------------------------
# extract_fields
# ---------------------------------------------------------------------------


class TestExtractFields:
    def test_excludes_static_and_inherited(self, invoice_entity):
        fields = extract_fields(invoice_entity)
        assert [f.name for f in fields] == ["id", "total"]

    def test_preserves_declaration_order(self):
        entity = EntityDescriptor(
            name="Order",
            fields=(
                FieldDescriptor(name="zeta", type="int"),
                FieldDescriptor(name="alpha", type="int"),
                FieldDescriptor(name="mid", type="int"),
            ),
        )
        assert [f.name for f in extract_fields(entity)] == ["zeta", "alpha", "mid"]

    def test_no_fields_yields_empty_list(self):
        assert extract_fields(EntityDescriptor(name="Marker")) == []

    def test_only_static_fields_yields_empty_list(self):
        entity = EntityDescriptor(
            name="Constants",
            fields=(FieldDescriptor(name="MAX", type="int", static=True),),
        )
        assert extract_fields(entity) == []

    def test_is_reproducible(self, invoice_entity):
        assert extract_fields(invoice_entity) == extract_fields(invoice_entity)


# ---------------------------------------------------------------------------
# entity_from_dict
# ---------------------------------------------------------------------------


class TestEntityFromDict:
    def test_valid_mapping(self, invoice_dict):
        entity = entity_from_dict(invoice_dict)
        assert entity.package == "ca.example"
        assert entity.name == "Invoice"
        assert [f.name for f in entity.fields] == ["id", "total", "SERIAL_VERSION"]
        assert entity.fields[2].static is True

    def test_missing_name_raises(self):
        with pytest.raises(ConfigurationError, match="Invalid entity descriptor"):
            entity_from_dict({"package": "ca.example"})

    def test_field_without_type_raises(self):
        with pytest.raises(ConfigurationError):
            entity_from_dict({"name": "Invoice", "fields": [{"name": "id"}]})

    def test_non_mapping_raises(self):
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            entity_from_dict(["Invoice"])  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# load_entity
# ---------------------------------------------------------------------------


class TestLoadEntity:
    def test_json(self, tmp_path: Path, invoice_dict):
        path = tmp_path / "invoice.json"
        path.write_text(json.dumps(invoice_dict), encoding="utf-8")
        entity = load_entity(path)
        assert entity.qualified_name == "ca.example.Invoice"
        assert [f.name for f in extract_fields(entity)] == ["id", "total"]

    def test_yaml(self, tmp_path: Path):
        path = tmp_path / "invoice.yaml"
        path.write_text(
            textwrap.dedent("""\
                package: ca.example
                name: Invoice
                location: build/classes
                fields:
                  - {name: id, type: Long}
                  - {name: total, type: BigDecimal}
                  - {name: createdBy, type: String, inherited: true}
            """),
            encoding="utf-8",
        )
        entity = load_entity(str(path))
        assert entity.location == Path("build/classes")
        assert [f.type for f in extract_fields(entity)] == ["Long", "BigDecimal"]

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_entity(tmp_path / "nope.json")

    def test_malformed_json(self, tmp_path: Path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Cannot parse"):
            load_entity(path)

    def test_malformed_yaml(self, tmp_path: Path):
        path = tmp_path / "bad.yml"
        path.write_text("name: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigurationError, match="Cannot parse"):
            load_entity(path)

    def test_invalid_descriptor_names_file(self, tmp_path: Path):
        path = tmp_path / "invalid.json"
        path.write_text(json.dumps({"package": "x"}), encoding="utf-8")
        with pytest.raises(ConfigurationError, match="invalid.json"):
            load_entity(path)


# ---------------------------------------------------------------------------
# describe_class
# ---------------------------------------------------------------------------


class TestDescribeClass:
    def test_own_annotations_only(self):
        entity = describe_class(Invoice)
        names = [f.name for f in entity.fields]
        assert "created_by" not in names
        assert "updated_by" not in names
        assert [f.name for f in extract_fields(entity)] == ["id", "total", "notes"]

    def test_class_var_is_static(self):
        entity = describe_class(Invoice)
        sequence = next(f for f in entity.fields if f.name == "SEQUENCE")
        assert sequence.static is True

    def test_type_names(self):
        entity = describe_class(Invoice)
        types = {f.name: f.type for f in extract_fields(entity)}
        assert types == {"id": "int", "total": "Decimal", "notes": "list[str]"}

    def test_runtime_annotations(self):
        order = type(
            "Order",
            (),
            {
                "__module__": __name__,
                "__annotations__": {"id": int, "RATE": ClassVar[float]},
            },
        )
        entity = describe_class(order)
        assert [(f.name, f.type, f.static) for f in entity.fields] == [
            ("id", "int", False),
            ("RATE", "ClassVar[float]", True),
        ]

    def test_name_and_location(self):
        entity = describe_class(Invoice)
        assert entity.name == "Invoice"
        assert entity.location == Path(__file__).resolve().parent

    def test_class_without_fields(self):
        assert extract_fields(describe_class(Empty)) == []

    def test_builtin_class_raises(self):
        with pytest.raises(ConfigurationError, match="Can't find package directory"):
            describe_class(int)
