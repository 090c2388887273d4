"""Build-directory conventions.

Maps the directory an artifact was loaded from to the directory its sources
conventionally live in, by substituting a build-output path segment for a
source path segment (Maven-style ``target/classes`` -> ``src/main/java`` by
default).
"""

from __future__ import annotations

import inspect
from pathlib import Path
from typing import Any

from .errors import ConfigurationError

DEFAULT_BUILD_SEGMENT = "target/classes"
DEFAULT_SOURCE_SEGMENT = "src/main/java"
DEFAULT_RESOURCES_SEGMENT = "src/main/resources"


def package_dir(obj: Any) -> Path:
    """Return the filesystem directory containing the source of *obj*.

    *obj* may be a class, function or module.

    Raises:
        ConfigurationError: If *obj* has no source file, or the file is not
            a loose file on disk (e.g. it was imported from a zip archive).
    """
    name = getattr(obj, "__qualname__", None) or getattr(obj, "__name__", repr(obj))
    try:
        source = inspect.getfile(obj)
    except TypeError as exc:
        raise ConfigurationError(
            f"Can't find package directory for {name}: it has no source file"
        ) from exc

    path = Path(source)
    if not path.is_file():
        raise ConfigurationError(
            f"Can't find package directory for {name}: {source} is not a file on disk. "
            "Cannot scaffold from a packaged archive."
        )
    return path.resolve().parent


def substitute_segment(location: str | Path, old: str, new: str) -> Path:
    """Replace the first occurrence of path segment *old* with *new*.

    Matching is done on whole segments, so ``target/classes`` does not match
    inside ``mytarget/classes``.  A location without the segment is returned
    unchanged.
    """
    parts = Path(location).parts
    old_parts = Path(old).parts
    new_parts = Path(new).parts
    width = len(old_parts)

    for index in range(len(parts) - width + 1):
        if parts[index:index + width] == old_parts:
            return Path(*parts[:index], *new_parts, *parts[index + width:])
    return Path(location)


def source_dir_for(
    location: str | Path,
    build_segment: str = DEFAULT_BUILD_SEGMENT,
    source_segment: str = DEFAULT_SOURCE_SEGMENT,
) -> Path:
    """Return the source directory matching a build-output *location*."""
    return substitute_segment(location, build_segment, source_segment)


def resources_dir_for(
    location: str | Path,
    build_segment: str = DEFAULT_BUILD_SEGMENT,
    resources_segment: str = DEFAULT_RESOURCES_SEGMENT,
) -> Path:
    """Return the resources directory matching a build-output *location*."""
    return substitute_segment(location, build_segment, resources_segment)
