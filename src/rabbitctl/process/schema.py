from __future__ import annotations

from typing import Self

from attrs import field, frozen

from .exceptions import CommandFailed, CommandTimedOut


@frozen
class ExecutionResult:
    """Outcome of one external command."""

    args: tuple[str, ...] = field(converter=tuple)
    """Full argument vector that was run, executable first."""

    exit_code: int
    """Exit status. Not meaningful when `timed_out` is set."""

    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False

    @property
    def success(self) -> bool:
        """True if the command ran to completion with exit code 0."""
        return self.exit_code == 0 and not self.timed_out

    def check(self) -> Self:
        """Return self, or raise if the command timed out or failed."""
        if self.timed_out:
            raise CommandTimedOut(self)
        if self.exit_code != 0:
            raise CommandFailed(self)
        return self
