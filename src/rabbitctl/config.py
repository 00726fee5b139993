"""Settings loaded from ``RABBITCTL_*`` environment variables."""

from __future__ import annotations

from pydantic import NonNegativeFloat, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from rabbitctl.command import CommonOptions


class RabbitCtlSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="RABBITCTL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ctl_tool: str = "rabbitmqctl"
    """Name or path of the broker control tool."""

    plugins_tool: str = "rabbitmq-plugins"
    """Name or path of the plugin management tool."""

    search_path: str | None = None
    """Directories searched for the tools instead of ``PATH``."""

    default_timeout: PositiveInt = 20
    """Process timeout in seconds when an operation does not set one."""

    timeout_grace: NonNegativeFloat = 2.0
    """Seconds added to an explicit ``-t`` timeout before the process is killed."""

    encoding: str = "utf-8"

    # defaults for CommonOptions
    node: str | None = None
    vhost: str | None = None
    quiet: bool = False

    def common_options(self) -> CommonOptions:
        return CommonOptions(node=self.node, quiet=self.quiet, vhost=self.vhost)
