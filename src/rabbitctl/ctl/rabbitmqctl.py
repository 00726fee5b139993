from __future__ import annotations

from typing import Final, Literal, final, override

from attrs import define

from rabbitctl.command import CommonOptions, InvalidOption
from rabbitctl.process import ExecutionResult
from rabbitctl.table import Record

from . import columns as cols
from .abc import ToolClient

NODE_TYPES: Final = frozenset({"disc", "ram"})


@final
@define
class RabbitCtl(ToolClient):
    """Typed wrapper around ``rabbitmqctl``.

    Every method takes keyword-only `options`, merged over the client's
    default options. Verbs whose exit status is the answer
    (`node_health_check`, `ping`, `authenticate_user`) return a bool; all
    others take `check` (default True) to raise `CommandFailed` on a
    non-zero exit.

    Example:
        >>> ctl = RabbitCtl(options=CommonOptions(node="rabbit@mq1"))
        >>> await ctl.add_vhost("staging")
        >>> await ctl.list_vhosts("name", "tracing")
        [{'name': '/', 'tracing': 'false'}, {'name': 'staging', 'tracing': 'false'}]
    """

    @property
    @override
    def tool(self) -> str:
        return self.settings.ctl_tool

    # node and application lifecycle

    async def stop(
        self,
        pid_file: str | None = None,
        *,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        positionals = (pid_file,) if pid_file else ()
        return await self.run("stop", *positionals, options=options, check=check)

    async def shutdown(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("shutdown", options=options, check=check)

    async def stop_app(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("stop_app", options=options, check=check)

    async def start_app(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("start_app", options=options, check=check)

    async def wait(
        self, pid_file: str, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        """Block until the node with `pid_file` has started the application."""
        return await self.run("wait", pid_file, options=options, check=check)

    async def reset(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("reset", options=options, check=check)

    async def force_reset(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("force_reset", options=options, check=check)

    async def status(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> str:
        result = await self.run("status", options=options, check=check)
        return result.stdout

    async def environment(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> str:
        result = await self.run("environment", options=options, check=check)
        return result.stdout

    async def node_health_check(self, *, options: CommonOptions | None = None) -> bool:
        result = await self.run("node_health_check", options=options, check=False)
        return result.success

    async def ping(self, *, options: CommonOptions | None = None) -> bool:
        result = await self.run("ping", options=options, check=False)
        return result.success

    # cluster management

    async def join_cluster(
        self,
        cluster_node: str,
        *,
        ram: bool = False,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        flags = {"--ram": None} if ram else None
        return await self.run(
            "join_cluster", cluster_node, flags=flags, options=options, check=check
        )

    async def cluster_status(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> str:
        result = await self.run("cluster_status", options=options, check=check)
        return result.stdout

    async def change_cluster_node_type(
        self,
        node_type: Literal["disc", "ram"],
        *,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        if node_type not in NODE_TYPES:
            raise InvalidOption(f"node type must be 'disc' or 'ram', got {node_type!r}")
        return await self.run(
            "change_cluster_node_type", node_type, options=options, check=check
        )

    async def forget_cluster_node(
        self,
        cluster_node: str,
        *,
        offline: bool = False,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        flags = {"--offline": None} if offline else None
        return await self.run(
            "forget_cluster_node", cluster_node, flags=flags, options=options, check=check
        )

    async def update_cluster_nodes(
        self,
        cluster_node: str,
        *,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        return await self.run(
            "update_cluster_nodes", cluster_node, options=options, check=check
        )

    async def force_boot(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("force_boot", options=options, check=check)

    async def sync_queue(
        self, queue: str, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("sync_queue", queue, options=options, check=check)

    async def cancel_sync_queue(
        self, queue: str, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("cancel_sync_queue", queue, options=options, check=check)

    async def set_cluster_name(
        self, name: str, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("set_cluster_name", name, options=options, check=check)

    # users

    async def add_user(
        self,
        username: str,
        password: str,
        *,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        return await self.run("add_user", username, password, options=options, check=check)

    async def delete_user(
        self, username: str, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("delete_user", username, options=options, check=check)

    async def change_password(
        self,
        username: str,
        password: str,
        *,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        return await self.run(
            "change_password", username, password, options=options, check=check
        )

    async def clear_password(
        self, username: str, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("clear_password", username, options=options, check=check)

    async def authenticate_user(
        self, username: str, password: str, *, options: CommonOptions | None = None
    ) -> bool:
        result = await self.run(
            "authenticate_user", username, password, options=options, check=False
        )
        return result.success

    async def set_user_tags(
        self,
        username: str,
        *tags: str,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        """Replace the user's tags; no tags clears them."""
        return await self.run("set_user_tags", username, *tags, options=options, check=check)

    async def list_users(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> list[Record]:
        return await self.query(
            "list_users",
            cols.USERS,
            cols.USER_COLUMNS,
            pass_columns=False,
            options=options,
            check=check,
        )

    # virtual hosts and permissions

    async def add_vhost(
        self, vhost: str, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("add_vhost", vhost, options=options, check=check)

    async def delete_vhost(
        self, vhost: str, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("delete_vhost", vhost, options=options, check=check)

    async def list_vhosts(
        self, *columns: str, options: CommonOptions | None = None, check: bool = True
    ) -> list[Record]:
        return await self.query(
            "list_vhosts", cols.VHOSTS, columns, options=options, check=check
        )

    async def set_permissions(
        self,
        username: str,
        configure: str,
        write: str,
        read: str,
        *,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        """Grant regex-based permissions in the options' vhost."""
        return await self.run(
            "set_permissions",
            username,
            configure,
            write,
            read,
            options=options,
            check=check,
        )

    async def clear_permissions(
        self, username: str, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("clear_permissions", username, options=options, check=check)

    async def list_permissions(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> list[Record]:
        return await self.query(
            "list_permissions",
            cols.PERMISSIONS,
            cols.PERMISSION_COLUMNS,
            pass_columns=False,
            options=options,
            check=check,
        )

    async def list_user_permissions(
        self, username: str, *, options: CommonOptions | None = None, check: bool = True
    ) -> list[Record]:
        return await self.query(
            "list_user_permissions",
            cols.USER_PERMISSIONS,
            cols.USER_PERMISSION_COLUMNS,
            positionals=(username,),
            pass_columns=False,
            options=options,
            check=check,
        )

    # runtime parameters and policies

    async def set_parameter(
        self,
        component: str,
        name: str,
        value: str,
        *,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        """Set a runtime parameter; `value` is a JSON document."""
        return await self.run(
            "set_parameter", component, name, value, options=options, check=check
        )

    async def clear_parameter(
        self,
        component: str,
        name: str,
        *,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        return await self.run(
            "clear_parameter", component, name, options=options, check=check
        )

    async def list_parameters(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> list[Record]:
        return await self.query(
            "list_parameters",
            cols.PARAMETERS,
            cols.PARAMETER_COLUMNS,
            pass_columns=False,
            options=options,
            check=check,
        )

    async def set_policy(
        self,
        name: str,
        pattern: str,
        definition: str,
        *,
        priority: int | None = None,
        apply_to: Literal["queues", "exchanges", "all"] | None = None,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        """Set a policy; `definition` is a JSON document."""
        flags: dict[str, str | int | None] = {}
        if priority is not None:
            flags["priority"] = priority
        if apply_to is not None:
            flags["apply_to"] = apply_to
        return await self.run(
            "set_policy",
            name,
            pattern,
            definition,
            flags=flags,
            options=options,
            check=check,
        )

    async def clear_policy(
        self, name: str, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("clear_policy", name, options=options, check=check)

    async def list_policies(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> list[Record]:
        return await self.query(
            "list_policies",
            cols.POLICIES,
            cols.POLICY_COLUMNS,
            pass_columns=False,
            options=options,
            check=check,
        )

    # broker object listings

    async def list_queues(
        self,
        *columns: str,
        local: bool = False,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> list[Record]:
        flags = {"--local": None} if local else None
        return await self.query(
            "list_queues", cols.QUEUES, columns, flags=flags, options=options, check=check
        )

    async def list_exchanges(
        self, *columns: str, options: CommonOptions | None = None, check: bool = True
    ) -> list[Record]:
        return await self.query(
            "list_exchanges", cols.EXCHANGES, columns, options=options, check=check
        )

    async def list_bindings(
        self, *columns: str, options: CommonOptions | None = None, check: bool = True
    ) -> list[Record]:
        return await self.query(
            "list_bindings", cols.BINDINGS, columns, options=options, check=check
        )

    async def list_connections(
        self, *columns: str, options: CommonOptions | None = None, check: bool = True
    ) -> list[Record]:
        return await self.query(
            "list_connections", cols.CONNECTIONS, columns, options=options, check=check
        )

    async def list_channels(
        self, *columns: str, options: CommonOptions | None = None, check: bool = True
    ) -> list[Record]:
        return await self.query(
            "list_channels", cols.CHANNELS, columns, options=options, check=check
        )

    async def list_consumers(
        self, *columns: str, options: CommonOptions | None = None, check: bool = True
    ) -> list[Record]:
        return await self.query(
            "list_consumers", cols.CONSUMERS, columns, options=options, check=check
        )

    # misc

    async def close_connection(
        self,
        connection_pid: str,
        explanation: str,
        *,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        return await self.run(
            "close_connection", connection_pid, explanation, options=options, check=check
        )

    async def trace_on(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("trace_on", options=options, check=check)

    async def trace_off(
        self, *, options: CommonOptions | None = None, check: bool = True
    ) -> ExecutionResult:
        return await self.run("trace_off", options=options, check=check)

    async def set_vm_memory_high_watermark(
        self,
        fraction: float,
        *,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        # 0 blocks all publishing
        if not 0 <= fraction <= 1:
            raise InvalidOption(f"watermark fraction must be in [0, 1], got {fraction}")
        return await self.run(
            "set_vm_memory_high_watermark", str(fraction), options=options, check=check
        )

    async def set_disk_free_limit(
        self,
        limit: str | int,
        *,
        mem_relative: bool = False,
        options: CommonOptions | None = None,
        check: bool = True,
    ) -> ExecutionResult:
        """Set the free disk space limit, absolute (``"50MB"``) or relative to RAM."""
        positionals = ("mem_relative", str(limit)) if mem_relative else (str(limit),)
        return await self.run(
            "set_disk_free_limit", *positionals, options=options, check=check
        )
