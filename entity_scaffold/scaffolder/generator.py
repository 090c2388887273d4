"""Main scaffolding orchestrator.

A ``Scaffold`` binds one entity descriptor to a template root and an output
root.  Each ``render`` call is a complete unit of work: build a fresh merge
context, resolve the output path template, render the body template, and
write it unless the target already exists.

Quick usage::

    scaffold = Scaffold(entity, template_root="templates", output_root="src")
    scaffold.render("dao.java.j2", "${Entity}Dao.java").render(
        "service.java.j2", "service/${Entity}Service.java"
    )

Specialised generators subclass ``Scaffold`` and extend
``get_merge_fields``; a subclass that sets no template root reads templates
from the directory of its own module.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Callable, Iterable

from rich.console import Console

from ..config import ScaffoldConfig
from ..conventions import package_dir, resources_dir_for, source_dir_for
from ..errors import ConfigurationError, TemplateSubstitutionError
from ..parser.models import EntityDescriptor
from .context import ScaffoldHelper, build_merge_context
from .templates import TemplateRenderer
from .writer import IdempotentWriter


class Scaffold:
    """Renders templates for a single entity into an output tree."""

    def __init__(
        self,
        entity: EntityDescriptor,
        template_root: str | Path | None = None,
        output_root: str | Path | None = None,
        *,
        config: ScaffoldConfig | None = None,
        console: Console | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Bind *entity* and resolve both root directories.

        Args:
            entity: The entity to scaffold.
            template_root: Directory templates are read from.  Defaults to
                ``config.template_root``, then to this class's own directory.
            output_root: Directory output paths are relative to.  Defaults to
                ``config.output_root``, then to the source directory that the
                build conventions associate with ``entity.location``.
            config: Shared settings; a default ``ScaffoldConfig`` if omitted.
            console: Where progress lines go (the shared console if omitted).
            today: Clock used for the ``date`` key on every render.

        Raises:
            ConfigurationError: If no output root can be determined.
        """
        self.config = config or ScaffoldConfig()
        self._entity = entity
        self._today = today
        self._rendered = False

        self._template_root = Path(
            template_root or self.config.template_root or package_dir(type(self))
        )
        self._output_root = self._default_output_root(output_root)

        self.renderer = TemplateRenderer(
            self._template_root,
            strict=self.config.strict,
            variable_start=self.config.variable_start,
            variable_end=self.config.variable_end,
            encoding=self.config.encoding,
        )
        self.writer = IdempotentWriter(console, encoding=self.config.encoding)
        self._helper = ScaffoldHelper(self)

    # -- Properties --------------------------------------------------------

    @property
    def entity(self) -> EntityDescriptor:
        return self._entity

    @property
    def template_root(self) -> Path:
        return self._template_root

    @property
    def output_root(self) -> Path:
        return self._output_root

    # -- Public API --------------------------------------------------------

    def set_output_root(self, directory: str | Path) -> "Scaffold":
        """Override the output root.

        Allowed until a render has resolved its output and template names;
        a render that fails while resolving them leaves the root open.
        """
        if self._rendered:
            raise ConfigurationError(
                f"Output root for {self._entity.qualified_name} is fixed once rendering has started"
            )
        self._output_root = Path(directory)
        return self

    def get_merge_fields(self) -> dict[str, Any]:
        """Return the merge context for one render.

        Subclasses may override this to add keys, but should start from the
        base mapping::

            def get_merge_fields(self):
                fields = super().get_merge_fields()
                fields["table"] = snake_case(self.entity.name)
                return fields
        """
        return build_merge_context(self._entity, self._helper, self._today)

    def resources_dir(self) -> Path:
        """Return the resources directory matching the entity's location.

        The counterpart of the default output root for non-source files
        (``target/classes`` -> ``src/main/resources`` unless configured).

        Raises:
            ConfigurationError: If the entity has no location.
        """
        location = self._entity.location
        if location is None:
            raise ConfigurationError(
                f"No resources directory for {self._entity.qualified_name}: the entity has no location"
            )
        return resources_dir_for(
            location, self.config.build_segment, self.config.resources_segment
        )

    def render(self, template_name: str, out_file_name: str) -> "Scaffold":
        """Render *template_name* to *out_file_name* under the output root.

        Both arguments are templates themselves, so ``"${Entity}Dao.java"``
        is a valid output name.  An existing target is skipped without the
        template being loaded.

        Returns:
            ``self``, so calls can be chained.
        """
        context = self.get_merge_fields()

        relative = self.renderer.render_string(out_file_name, context)
        if not relative.strip():
            raise TemplateSubstitutionError(
                f"Output name {out_file_name!r} resolved to an empty path"
            )
        template_path = self.renderer.render_string(template_name, context)
        self._rendered = True

        self.writer.write(
            self._output_root / relative,
            lambda: self.renderer.render(template_path, context),
        )
        return self

    def render_all(self, units: Iterable[tuple[str, str]]) -> "Scaffold":
        """Render each ``(template_name, out_file_name)`` pair in order."""
        for template_name, out_file_name in units:
            self.render(template_name, out_file_name)
        return self

    # -- Internal helpers --------------------------------------------------

    def _default_output_root(self, output_root: str | Path | None) -> Path:
        if output_root:
            return Path(output_root)
        if self.config.output_root:
            return self.config.output_root

        location = self._entity.location
        if location is None:
            raise ConfigurationError(
                f"No output root for {self._entity.qualified_name}: pass output_root, "
                "set it in the configuration, or give the entity a location"
            )
        if not Path(location).is_dir():
            raise ConfigurationError(
                f"Can't find package directory for {self._entity.qualified_name}: "
                f"{location} is not a directory"
            )
        return source_dir_for(
            location, self.config.build_segment, self.config.source_segment
        )
