from __future__ import annotations

import shlex
from collections.abc import Sequence
from typing import TYPE_CHECKING

from rabbitctl.exceptions import RabbitCtlError

if TYPE_CHECKING:
    from .schema import ExecutionResult


class ProcessError(RabbitCtlError):
    """Base exception for the process module."""


class ToolNotFound(ProcessError):
    """Raised when an external tool cannot be located."""

    def __init__(self, name: str, search_path: str | None = None) -> None:
        self.name = name
        self.search_path = search_path
        where = search_path if search_path is not None else "PATH"
        super().__init__(f"Executable {name!r} not found on {where}")


class LaunchFailed(ProcessError):
    """Raised when the operating system refuses to start the process."""

    def __init__(self, args: Sequence[str], reason: str) -> None:
        self.args_attempted = tuple(args)
        super().__init__(f"Failed to launch {shlex.join(args)}: {reason}")


class CommandFailed(ProcessError):
    """Raised by `ExecutionResult.check` when a command exited with non-zero status."""

    def __init__(self, result: ExecutionResult) -> None:
        self.result = result
        super().__init__(self._describe(result))

    @staticmethod
    def _describe(result: ExecutionResult) -> str:
        return (
            f"Command {shlex.join(result.args)} failed with exit code "
            f"{result.exit_code}: {result.stderr or result.stdout}"
        )


class CommandTimedOut(CommandFailed):
    """Raised by `ExecutionResult.check` when a command was killed on timeout."""

    @staticmethod
    def _describe(result: ExecutionResult) -> str:
        return f"Command {shlex.join(result.args)} timed out: {result.stderr}"
