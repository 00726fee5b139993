from __future__ import annotations

from .abc import ToolClient
from .plugins import PluginState, RabbitPlugins
from .rabbitmqctl import RabbitCtl

__all__ = [
    "PluginState",
    "RabbitCtl",
    "RabbitPlugins",
    "ToolClient",
]
