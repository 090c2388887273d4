"""Entity scaffold configuration.

Typed settings for the scaffolding engine.  Uses a Pydantic v2 model so the
configuration can be validated at construction time and serialised to/from
JSON or environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .errors import ConfigurationError

_FALSE_VALUES = {"0", "false", "no", "off"}


class ScaffoldConfig(BaseModel):
    """Settings shared by every ``Scaffold`` instance.

    ``template_root`` and ``output_root`` are optional: when unset the
    orchestrator falls back to its own directory for templates and to the
    build-convention source directory of the entity for output.
    """

    template_root: Path | None = Field(default=None)
    output_root: Path | None = Field(default=None)

    # Directory convention: compiled-output segment swapped for a source one.
    build_segment: str = Field(default="target/classes", min_length=1)
    source_segment: str = Field(default="src/main/java", min_length=1)
    resources_segment: str = Field(default="src/main/resources", min_length=1)

    strict: bool = Field(
        default=True, description="Fail on placeholders missing from the context"
    )
    variable_start: str = Field(default="${", min_length=1)
    variable_end: str = Field(default="}", min_length=1)
    encoding: str = Field(default="utf-8")

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "ScaffoldConfig":
        """Load a previously-saved configuration from JSON.

        Raises:
            ConfigurationError: If the file is missing or does not validate.
        """
        try:
            raw = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration file {path}: {exc}") from exc

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_TEMPLATE_ROOT, SCAFFOLD_OUTPUT_ROOT,
            SCAFFOLD_BUILD_SEGMENT, SCAFFOLD_SOURCE_SEGMENT,
            SCAFFOLD_RESOURCES_SEGMENT, SCAFFOLD_STRICT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_TEMPLATE_ROOT"):
            kwargs["template_root"] = Path(os.environ["SCAFFOLD_TEMPLATE_ROOT"])
        if os.environ.get("SCAFFOLD_OUTPUT_ROOT"):
            kwargs["output_root"] = Path(os.environ["SCAFFOLD_OUTPUT_ROOT"])
        if os.environ.get("SCAFFOLD_BUILD_SEGMENT"):
            kwargs["build_segment"] = os.environ["SCAFFOLD_BUILD_SEGMENT"]
        if os.environ.get("SCAFFOLD_SOURCE_SEGMENT"):
            kwargs["source_segment"] = os.environ["SCAFFOLD_SOURCE_SEGMENT"]
        if os.environ.get("SCAFFOLD_RESOURCES_SEGMENT"):
            kwargs["resources_segment"] = os.environ["SCAFFOLD_RESOURCES_SEGMENT"]
        if os.environ.get("SCAFFOLD_STRICT"):
            kwargs["strict"] = os.environ["SCAFFOLD_STRICT"].strip().lower() not in _FALSE_VALUES

        return cls(**kwargs)
