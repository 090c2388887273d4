"""Jinja2 template rendering for entity scaffolding.

Provides the TemplateRenderer class, which loads templates from a template
root directory and renders them against a merge context.  The same renderer
resolves output-path templates (``"${Entity}Dao.java"``) and file bodies, so
both see identical placeholders.

Variables use ``${...}`` by default; statements keep Jinja2's ``{% ... %}``
syntax::

    package ${package};
    {% for field in fields %}
    private ${field.type} ${field.name};
    {% endfor %}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    Undefined,
)

from ..errors import TemplateResolutionError, TemplateSubstitutionError
from .naming import camel_case, lower_first, pascal_case, snake_case, upper_first


class TemplateRenderer:
    """Renders Jinja2 templates found under a template root.

    In strict mode a placeholder missing from the context raises
    ``TemplateSubstitutionError``; in lenient mode it renders as empty text.
    """

    def __init__(
        self,
        template_dir: str | Path,
        *,
        strict: bool = True,
        variable_start: str = "${",
        variable_end: str = "}",
        encoding: str = "utf-8",
    ) -> None:
        self.template_dir = Path(template_dir)
        self.strict = strict
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir), encoding=encoding),
            undefined=StrictUndefined if strict else Undefined,
            variable_start_string=variable_start,
            variable_end_string=variable_end,
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        # Register custom filters
        self.env.filters["lower_first"] = lower_first
        self.env.filters["upper_first"] = upper_first
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["snake_case"] = snake_case
        self.env.filters["camel_case"] = camel_case

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render the template at *template_path* (relative to the root).

        Raises:
            TemplateResolutionError: If the template is missing or unreadable.
            TemplateSubstitutionError: If rendering fails.
        """
        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as exc:
            raise TemplateResolutionError(
                f"Template not found: {self.template_dir / template_path}"
            ) from exc
        except TemplateSyntaxError as exc:
            raise TemplateSubstitutionError(
                f"Syntax error in template {template_path} (line {exc.lineno}): {exc.message}"
            ) from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise TemplateResolutionError(
                f"Cannot read template {self.template_dir / template_path}: {exc}"
            ) from exc

        return self._render(template, context, template_path)

    def render_string(self, template_string: str, context: dict[str, Any]) -> str:
        """Render an inline template string, e.g. an output file name."""
        try:
            template = self.env.from_string(template_string)
        except TemplateSyntaxError as exc:
            raise TemplateSubstitutionError(
                f"Syntax error in template {template_string!r}: {exc.message}"
            ) from exc
        return self._render(template, context, repr(template_string))

    def _render(self, template: Any, context: dict[str, Any], label: str) -> str:
        try:
            return template.render(**context)
        except TemplateError as exc:
            raise TemplateSubstitutionError(f"Cannot render template {label}: {exc}") from exc
