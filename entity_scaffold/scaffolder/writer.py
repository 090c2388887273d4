"""Idempotent output writer.

A target that already exists is never read, rewritten or touched: the write
becomes a reported skip.  Regenerating therefore never clobbers a generated
file that has since been edited by hand.

The existence check and the write are not atomic.  Scaffolding is a
single-operator offline step, so that window is left unguarded.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Union

from rich.console import Console

from ..errors import FilesystemError
from ..utils import print_notice

Content = Union[str, Callable[[], str]]


class WriteOutcome(str, Enum):
    """Result of a single write request."""

    CREATED = "created"
    SKIPPED = "skipped"


class IdempotentWriter:
    """Writes rendered content to files that do not exist yet."""

    def __init__(self, console: Console | None = None, encoding: str = "utf-8") -> None:
        self.console = console
        self.encoding = encoding

    def write(self, path: str | Path, content: Content) -> WriteOutcome:
        """Create *path* with *content* unless it already exists.

        Args:
            path: Target file.
            content: The full file body, or a zero-argument callable that
                produces it.  The callable is only invoked when the target
                is absent; if it raises, nothing is created.

        Returns:
            ``WriteOutcome.CREATED`` or ``WriteOutcome.SKIPPED``.

        Raises:
            FilesystemError: If a directory or the file cannot be written.
        """
        target = Path(path)

        if target.exists():
            print_notice(f"Skipping {target}: already exists", self.console)
            return WriteOutcome.SKIPPED

        body = content() if callable(content) else content

        print_notice(f"Creating {target}", self.console)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(f"Cannot create directory {target.parent}: {exc}") from exc

        try:
            with target.open("w", encoding=self.encoding) as handle:
                handle.write(body)
        except (OSError, UnicodeEncodeError) as exc:
            target.unlink(missing_ok=True)
            raise FilesystemError(f"Cannot write {target}: {exc}") from exc

        return WriteOutcome.CREATED
