from __future__ import annotations

from typing import Self, final, override

import attrs
from attrs import define, frozen

from rabbitctl.command import CommonOptions, InvalidOption
from rabbitctl.process import ExecutionResult
from rabbitctl.table import Record

from . import columns as cols
from .abc import ToolClient


@frozen
class PluginState:
    """A plugin row from ``rabbitmq-plugins list``, with its ``[E*]`` marker decoded."""

    name: str
    version: str
    explicit: bool
    """Enabled by name (``E``)."""

    implicit: bool
    """Enabled as a dependency of another plugin (``e``)."""

    running: bool
    """Running on the target node (``*``)."""

    @property
    def enabled(self) -> bool:
        return self.explicit or self.implicit

    @classmethod
    def from_record(cls, record: Record) -> Self:
        marker = record["state"]
        return cls(
            name=record["name"],
            version=record["version"],
            explicit="E" in marker,
            implicit="e" in marker,
            running="*" in marker,
        )


@final
@define
class RabbitPlugins(ToolClient):
    """Typed wrapper around ``rabbitmq-plugins``. Plugins are not vhost scoped."""

    @property
    @override
    def tool(self) -> str:
        return self.settings.plugins_tool

    @override
    def prepare_options(self, options: CommonOptions) -> CommonOptions:
        return attrs.evolve(options, vhost=None)

    async def list_plugins(
        self,
        pattern: str | None = None,
        *,
        enabled_only: bool = False,
        implicit: bool = False,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> list[PluginState]:
        """List plugins whose name matches the regex `pattern`.

        `enabled_only` limits the list to explicitly enabled plugins;
        `implicit` to plugins enabled either way.
        """
        flags: dict[str, None] = {}
        if enabled_only:
            flags["-E"] = None
        elif implicit:
            flags["-e"] = None

        records = await self.query(
            "list",
            cols.PLUGINS,
            cols.PLUGIN_COLUMNS,
            positionals=(pattern,) if pattern else (),
            pass_columns=False,
            flags=flags,
            options=options,
            check=check,
        )
        return [PluginState.from_record(record) for record in records]

    async def enable(
        self,
        *plugins: str,
        offline: bool = False,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        return await self._toggle("enable", plugins, offline, options, check)

    async def disable(
        self,
        *plugins: str,
        offline: bool = False,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        return await self._toggle("disable", plugins, offline, options, check)

    async def is_enabled(
        self, *plugins: str, options: CommonOptions | None = None
    ) -> bool:
        """True if every plugin is enabled; reported through the exit status."""
        if not plugins:
            raise InvalidOption("at least one plugin name is required")
        result = await self.run("is_enabled", *plugins, options=options, check=False)
        return result.success

    async def _toggle(
        self,
        verb: str,
        plugins: tuple[str, ...],
        offline: bool,
        options: CommonOptions | None,
        check: bool,
    ) -> ExecutionResult:
        if not plugins:
            raise InvalidOption(f"{verb} requires at least one plugin name")
        flags = {"--offline": None} if offline else None
        return await self.run(verb, *plugins, flags=flags, options=options, check=check)
