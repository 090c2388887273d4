"""Command-line entry point.

Examples::

    entity-scaffold invoice.yaml -t templates/dao.java.j2='${Entity}Dao.java'
    entity-scaffold invoice.json --output-root src/main/java \\
        -t templates/entity.java.j2='${Entity}.java' -t templates/dao.java.j2='dao/${Entity}Dao.java'
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ScaffoldConfig
from .errors import ScaffoldError
from .parser.extractor import extract_fields, load_entity
from .scaffolder.generator import Scaffold
from .utils import print_error, print_success, print_summary_table


def _render_unit(value: str) -> tuple[str, str]:
    """Parse ``TEMPLATE=OUTPUT`` into a ``(template, output)`` pair."""
    template, sep, output = value.partition("=")
    if not sep or not template.strip() or not output.strip():
        raise argparse.ArgumentTypeError(
            f"expected TEMPLATE=OUTPUT, got {value!r}"
        )
    return template.strip(), output.strip()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entity-scaffold",
        description="Render per-entity templates, skipping files that already exist",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  entity-scaffold invoice.yaml -t templates/dao.java.j2='${Entity}Dao.java'\n"
            "  entity-scaffold invoice.json --output-root src/main/java \\\n"
            "      -t templates/entity.java.j2='${Entity}.java' -t templates/dao.java.j2='dao/${Entity}Dao.java'\n"
        ),
    )
    parser.add_argument(
        "entity",
        help="Path to the entity descriptor (JSON or YAML)",
    )
    parser.add_argument(
        "--template", "-t",
        dest="units",
        action="append",
        required=True,
        type=_render_unit,
        metavar="TEMPLATE=OUTPUT",
        help="Template to render and its output name template (repeatable)",
    )
    parser.add_argument(
        "--template-root",
        default=None,
        help="Directory templates are read from",
    )
    parser.add_argument(
        "--output-root", "-o",
        default=None,
        help="Directory generated files are written under",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON configuration file (defaults come from SCAFFOLD_* env vars)",
    )
    parser.add_argument(
        "--lenient",
        action="store_true",
        help="Render unknown placeholders as empty text instead of failing",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``entity-scaffold`` and ``python -m entity_scaffold``."""
    args = build_parser().parse_args(argv)

    try:
        config = ScaffoldConfig.load(Path(args.config)) if args.config else ScaffoldConfig.from_env()
        if args.lenient:
            config = config.model_copy(update={"strict": False})

        entity = load_entity(args.entity)
        scaffold = Scaffold(
            entity,
            template_root=args.template_root,
            output_root=args.output_root,
            config=config,
        )
        print_summary_table(
            {
                "Entity": entity.qualified_name,
                "Fields": str(len(extract_fields(entity))),
                "Templates": str(scaffold.template_root),
                "Output": str(scaffold.output_root),
            },
            title="Scaffold",
        )
        scaffold.render_all(args.units)
    except ScaffoldError as exc:
        print_error(str(exc))
        sys.exit(1)

    print_success(f"Scaffolded {entity.qualified_name}")


if __name__ == "__main__":
    main()
