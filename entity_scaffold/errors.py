"""Exception hierarchy for entity scaffolding.

Every failure raised by the engine derives from ``ScaffoldError`` so callers
(and the CLI) can report it uniformly.  None of these are caught or retried
inside the engine; each one halts the render call that raised it.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class ConfigurationError(ScaffoldError):
    """The scaffold cannot be configured (bad descriptor, unresolvable root)."""


class TemplateResolutionError(ScaffoldError):
    """A template file is missing or unreadable at its resolved path."""


class TemplateSubstitutionError(ScaffoldError):
    """A template could not be rendered (undefined placeholder, bad syntax)."""


class FilesystemError(ScaffoldError):
    """Creating a directory or writing an output file failed."""
