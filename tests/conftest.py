"""Shared pytest fixtures for the entity scaffold test suite.

Provides reusable fixtures for:
- Sample entity descriptors (the ``Invoice`` entity)
- Template and output roots populated in a temporary directory
- A recording Rich console so progress lines can be asserted on
- A ``Scaffold`` wired to all of the above
"""

from __future__ import annotations

import io
import textwrap
from datetime import date
from pathlib import Path

import pytest
from rich.console import Console

from entity_scaffold.parser.models import EntityDescriptor, FieldDescriptor
from entity_scaffold.scaffolder.generator import Scaffold


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------

@pytest.fixture
def invoice_entity() -> EntityDescriptor:
    """``ca.example.Invoice`` with two own fields, a static and an inherited one."""
    return EntityDescriptor(
        package="ca.example",
        name="Invoice",
        fields=(
            FieldDescriptor(name="id", type="Long"),
            FieldDescriptor(name="SERIAL_VERSION", type="long", static=True),
            FieldDescriptor(name="total", type="BigDecimal"),
            FieldDescriptor(name="createdBy", type="String", inherited=True),
        ),
    )


@pytest.fixture
def invoice_dict() -> dict:
    """The ``Invoice`` entity as a plain descriptor document."""
    return {
        "package": "ca.example",
        "name": "Invoice",
        "fields": [
            {"name": "id", "type": "Long"},
            {"name": "total", "type": "BigDecimal"},
            {"name": "SERIAL_VERSION", "type": "long", "static": True},
        ],
    }


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    """Template directory with a handful of small templates."""
    root = tmp_path / "templates"
    root.mkdir()
    (root / "class.txt").write_text(
        "package ${package};\nclass ${Entity} {\n${fields}\n}",
        encoding="utf-8",
    )
    (root / "dao.txt").write_text(
        textwrap.dedent("""\
            // ${date}
            interface ${Entity}Dao {
            {% for field in fields %}
                ${field.type} findBy${field.name | upper_first}(${field.type} ${field.name});
            {% endfor %}
                void save(${Entity} ${entity});
            }
        """),
        encoding="utf-8",
    )
    (root / "date.txt").write_text("${date}", encoding="utf-8")
    (root / "undefined.txt").write_text("value=${missing}", encoding="utf-8")
    (root / "broken.txt").write_text("{% for x in %}", encoding="utf-8")
    return root


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Output directory (created lazily by the writer when needed)."""
    return tmp_path / "out"


# ---------------------------------------------------------------------------
# Console & Scaffold
# ---------------------------------------------------------------------------

@pytest.fixture
def recording_console() -> Console:
    """A Rich console that writes to an in-memory buffer."""
    return Console(file=io.StringIO(), width=400, color_system=None)


@pytest.fixture
def console_output(recording_console: Console):
    """Callable returning everything printed to ``recording_console`` so far."""
    return lambda: recording_console.file.getvalue()


@pytest.fixture
def fixed_today():
    """A clock pinned to 2015-03-14."""
    return lambda: date(2015, 3, 14)


@pytest.fixture
def scaffold(
    invoice_entity: EntityDescriptor,
    template_root: Path,
    output_root: Path,
    recording_console: Console,
    fixed_today,
) -> Scaffold:
    """A Scaffold for ``Invoice`` wired to the temporary roots."""
    return Scaffold(
        invoice_entity,
        template_root=template_root,
        output_root=output_root,
        console=recording_console,
        today=fixed_today,
    )
