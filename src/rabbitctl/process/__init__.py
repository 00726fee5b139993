from __future__ import annotations

from .exceptions import (
    CommandFailed,
    CommandTimedOut,
    LaunchFailed,
    ProcessError,
    ToolNotFound,
)
from .invoke import invoke
from .locator import resolve
from .schema import ExecutionResult

__all__ = [
    "CommandFailed",
    "CommandTimedOut",
    "ExecutionResult",
    "LaunchFailed",
    "ProcessError",
    "ToolNotFound",
    "invoke",
    "resolve",
]
