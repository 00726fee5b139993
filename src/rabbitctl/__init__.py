from __future__ import annotations

from loguru import logger

from .command import CommandSpec, CommonOptions, InvalidOption, build_args
from .config import RabbitCtlSettings
from .ctl import PluginState, RabbitCtl, RabbitPlugins
from .exceptions import RabbitCtlError
from .process import (
    CommandFailed,
    CommandTimedOut,
    ExecutionResult,
    LaunchFailed,
    ToolNotFound,
    invoke,
    resolve,
)
from .table import ColumnRegistry, ColumnSpec, Matcher, Record, parse, parse_table

logger.disable("rabbitctl")

__all__ = [
    "ColumnRegistry",
    "ColumnSpec",
    "CommandFailed",
    "CommandSpec",
    "CommandTimedOut",
    "CommonOptions",
    "ExecutionResult",
    "InvalidOption",
    "LaunchFailed",
    "Matcher",
    "PluginState",
    "RabbitCtl",
    "RabbitCtlError",
    "RabbitCtlSettings",
    "RabbitPlugins",
    "Record",
    "ToolNotFound",
    "build_args",
    "invoke",
    "parse",
    "parse_table",
    "resolve",
]
