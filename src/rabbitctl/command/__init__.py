from __future__ import annotations

from .builder import build_args, format_flag, validate_timeout
from .exceptions import InvalidOption
from .schema import CommandSpec, CommonOptions, Flags, FlagValue

__all__ = [
    "CommandSpec",
    "CommonOptions",
    "FlagValue",
    "Flags",
    "InvalidOption",
    "build_args",
    "format_flag",
    "validate_timeout",
]
