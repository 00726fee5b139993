from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from attrs import define, field
from loguru import logger

from rabbitctl.command import CommandSpec, CommonOptions, Flags
from rabbitctl.config import RabbitCtlSettings
from rabbitctl.process import ExecutionResult, invoke, resolve
from rabbitctl.table import ColumnRegistry, Record, parse


@define
class ToolClient(ABC):
    """Runs verbs of one external administration tool."""

    settings: RabbitCtlSettings = field(factory=RabbitCtlSettings)
    options: CommonOptions = field()
    """Default options; per-call `options` are merged on top."""

    @options.default
    def _default_options(self) -> CommonOptions:
        return self.settings.common_options()

    @property
    @abstractmethod
    def tool(self) -> str:
        """Name or path of the executable, resolved on every call."""

    def prepare_options(self, options: CommonOptions) -> CommonOptions:
        """Adjust the merged options before they are rendered."""
        return options

    async def run(
        self,
        verb: str,
        *positionals: str,
        flags: Flags | None = None,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        """Run one verb and return its result.

        With `check` a timeout or non-zero exit raises `CommandFailed`;
        otherwise the result is returned as is.
        """
        opts = self.prepare_options(self.options.merge(options))
        args = CommandSpec(verb, positionals, flags or {}).to_args(opts)
        path = resolve(self.tool, self.settings.search_path)
        if opts.timeout_seconds is not None:
            # leave the tool time to report its own timeout
            timeout = opts.timeout_seconds + self.settings.timeout_grace
        else:
            timeout = self.settings.default_timeout

        with logger.contextualize(tool=self.tool, verb=verb):
            result = await invoke(path, args, timeout, encoding=self.settings.encoding)

        return result.check() if check else result

    async def query(
        self,
        verb: str,
        registry: ColumnRegistry,
        columns: Sequence[str] = (),
        *,
        positionals: Sequence[str] = (),
        pass_columns: bool = True,
        flags: Flags | None = None,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> list[Record]:
        """Run a listing verb and parse its table output.

        Columns are validated against `registry` before anything is run.
        With `pass_columns` the requested column names are appended to the
        positionals, for verbs that accept info items.
        """
        names = [spec.name for spec in registry.resolve(columns)]
        extra = names if pass_columns else []
        result = await self.run(
            verb,
            *positionals,
            *extra,
            flags=flags,
            options=options,
            check=check,
        )
        return parse(result.stdout, names, registry)
