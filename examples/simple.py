from __future__ import annotations

import anyio
from loguru import logger

from rabbitctl import CommonOptions, RabbitCtl, RabbitPlugins
from rabbitctl.logging import setup_logging


async def main() -> None:
    ctl = RabbitCtl(options=CommonOptions(node="rabbit@localhost"))
    plugins = RabbitPlugins(options=ctl.options)

    if not await ctl.node_health_check():
        logger.error("Node is not healthy")
        return

    await ctl.add_vhost("staging")
    await ctl.set_permissions(
        "guest", ".*", ".*", ".*", options=CommonOptions(vhost="staging")
    )
    await ctl.set_policy(
        "ttl",
        "^tmp\\.",
        '{"message-ttl":60000}',
        apply_to="queues",
        options=CommonOptions(vhost="staging"),
    )

    for vhost in await ctl.list_vhosts("name", "tracing"):
        print(vhost)

    for queue in await ctl.list_queues(
        "name", "messages", "consumers", options=CommonOptions(vhost="staging")
    ):
        print(queue["name"], queue["messages"], queue["consumers"])

    for plugin in await plugins.list_plugins(implicit=True):
        print(plugin.name, plugin.version, "running" if plugin.running else "stopped")


if __name__ == "__main__":
    setup_logging("DEBUG")
    anyio.run(main)
