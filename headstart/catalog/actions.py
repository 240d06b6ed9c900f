"""Provisioning actions.

Two layers live here:

* *Specs* (``CommandSpec``, ``FileMutationSpec``) are the static catalog
  entries.  They hold Jinja2 templates and are resolved against the answers
  by the plan builder.
* *Actions* (``Command``, ``FileMutation``) are the resolved, concrete steps
  the executor runs.  A ``Command`` is an opaque shell command line; a
  ``FileMutation`` is a write or prepend on a path relative to the project
  root.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path, PurePosixPath
from typing import Any, Union

from ..errors import CatalogError
from .templates import TemplateRenderer


class Phase(IntEnum):
    """Ordering key of an action within a plan.

    Steps are stable-sorted by phase, so an action that edits a file created
    by an install must carry a phase no lower than that install's.
    """

    SCAFFOLD = 0
    INSTALL = 1
    CONFIGURE = 2


class MutationMode(str, Enum):
    """How a file mutation treats existing content."""

    WRITE = "write"
    PREPEND = "prepend"


# ---------------------------------------------------------------------------
# Resolved actions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Command:
    """An external command line run to completion; exit code 0 is success."""

    command: str

    def describe(self) -> str:
        return self.command


@dataclass(frozen=True)
class FileMutation:
    """A write or idempotent prepend on a file below the project root."""

    path: PurePosixPath
    content: str
    mode: MutationMode = MutationMode.WRITE

    def describe(self) -> str:
        return f"{self.mode.value} {self.path}"

    def apply(self, root: Path) -> Path:
        """Perform the mutation under *root* and return the touched file.

        Parent directories are created as needed.  I/O errors propagate.
        """
        target = root.joinpath(*self.path.parts)
        target.parent.mkdir(parents=True, exist_ok=True)

        if self.mode is MutationMode.PREPEND:
            existing = target.read_text(encoding="utf-8") if target.exists() else ""
            target.write_text(prepend_block(self.content, existing), encoding="utf-8")
        else:
            target.write_text(self.content, encoding="utf-8")
        return target


Action = Union[Command, FileMutation]


def prepend_block(block: str, existing: str) -> str:
    """Return *existing* with *block* at the top, exactly once.

    Every line of *existing* that already belongs to *block* is dropped
    first, wherever it sits, so prepending to a file that holds the block
    (or a partial copy of it) after a comment or blank line does not
    duplicate it.

    Examples::

        prepend_block("a;\\nb;\\n", "")              -> "a;\\nb;\\n"
        prepend_block("a;\\nb;\\n", "a;\\nb;\\nx\\n")    -> "a;\\nb;\\nx\\n"
        prepend_block("a;\\nb;\\n", "/* c */\\na;\\nb;\\n") -> "a;\\nb;\\n/* c */\\n"
    """
    if block and not block.endswith("\n"):
        block += "\n"
    block_lines = {line.strip() for line in block.splitlines() if line.strip()}

    kept = [
        line
        for line in existing.splitlines(keepends=True)
        if line.strip() not in block_lines
    ]
    return block + "".join(kept)


# ---------------------------------------------------------------------------
# Catalog specs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CommandSpec:
    """Catalog entry for an external command.

    ``template`` is rendered with the plan context; interpolate user input
    through the ``shquote`` filter, e.g. ``{{ app_name | shquote }}``.
    """

    label: str
    template: str
    phase: Phase = Phase.INSTALL

    def resolve(self, renderer: TemplateRenderer, context: dict[str, Any]) -> Command:
        return Command(renderer.render_string(self.template, context))


@dataclass(frozen=True)
class FileMutationSpec:
    """Catalog entry for a file mutation.

    ``path`` is an inline template (e.g. ``"{{ stylesheet }}"``) and
    ``template`` names the literal body under ``catalog/templates``.
    """

    label: str
    path: str
    template: str
    mode: MutationMode = MutationMode.WRITE
    phase: Phase = Phase.INSTALL

    def resolve(self, renderer: TemplateRenderer, context: dict[str, Any]) -> FileMutation:
        path = PurePosixPath(renderer.render_string(self.path, context))
        if path.is_absolute() or ".." in path.parts:
            raise CatalogError(f"{self.label}: file mutation path must stay inside the project: {path}")
        return FileMutation(
            path=path,
            content=renderer.render(self.template, context),
            mode=self.mode,
        )


ActionSpec = Union[CommandSpec, FileMutationSpec]
