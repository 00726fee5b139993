"""Column registries for the listing verbs of rabbitmqctl and rabbitmq-plugins."""

from __future__ import annotations

from typing import Final

from rabbitctl.table import ColumnRegistry, Matcher

QUEUES: Final = ColumnRegistry.of(
    "name",
    name=Matcher.TOKEN,
    durable=Matcher.BOOL,
    auto_delete=Matcher.BOOL,
    arguments=Matcher.LIST,
    policy=Matcher.TOKEN,
    pid=Matcher.TOKEN,
    owner_pid=Matcher.TOKEN,
    exclusive=Matcher.BOOL,
    exclusive_consumer_pid=Matcher.TOKEN,
    exclusive_consumer_tag=Matcher.TOKEN,
    messages_ready=Matcher.NUMBER,
    messages_unacknowledged=Matcher.NUMBER,
    messages=Matcher.NUMBER,
    messages_ready_ram=Matcher.NUMBER,
    messages_unacknowledged_ram=Matcher.NUMBER,
    messages_ram=Matcher.NUMBER,
    messages_persistent=Matcher.NUMBER,
    message_bytes=Matcher.NUMBER,
    message_bytes_ready=Matcher.NUMBER,
    message_bytes_unacknowledged=Matcher.NUMBER,
    message_bytes_ram=Matcher.NUMBER,
    message_bytes_persistent=Matcher.NUMBER,
    head_message_timestamp=Matcher.TOKEN,
    disk_reads=Matcher.NUMBER,
    disk_writes=Matcher.NUMBER,
    consumers=Matcher.NUMBER,
    consumer_utilisation=Matcher.TOKEN,
    memory=Matcher.NUMBER,
    slave_pids=Matcher.LIST,
    synchronised_slave_pids=Matcher.LIST,
    state=Matcher.ALPHA,
)

EXCHANGES: Final = ColumnRegistry.of(
    "name",
    name=Matcher.TOKEN,
    type=Matcher.WORD,
    durable=Matcher.BOOL,
    auto_delete=Matcher.BOOL,
    internal=Matcher.BOOL,
    arguments=Matcher.LIST,
    policy=Matcher.TOKEN,
)

BINDINGS: Final = ColumnRegistry.of(
    "source_name",
    source_name=Matcher.TOKEN,
    source_kind=Matcher.WORD,
    destination_name=Matcher.TOKEN,
    destination_kind=Matcher.WORD,
    routing_key=Matcher.TOKEN,
    arguments=Matcher.LIST,
)

CONNECTIONS: Final = ColumnRegistry.of(
    "name",
    pid=Matcher.TOKEN,
    name=Matcher.PEER,
    port=Matcher.NUMBER,
    host=Matcher.TOKEN,
    peer_port=Matcher.NUMBER,
    peer_host=Matcher.TOKEN,
    ssl=Matcher.BOOL,
    ssl_protocol=Matcher.TOKEN,
    ssl_key_exchange=Matcher.TOKEN,
    ssl_cipher=Matcher.TOKEN,
    ssl_hash=Matcher.TOKEN,
    peer_cert_subject=Matcher.TOKEN,
    peer_cert_issuer=Matcher.TOKEN,
    peer_cert_validity=Matcher.TOKEN,
    state=Matcher.ALPHA,
    channels=Matcher.NUMBER,
    protocol=Matcher.TOKEN,
    auth_mechanism=Matcher.TOKEN,
    user=Matcher.TOKEN,
    vhost=Matcher.TOKEN,
    timeout=Matcher.NUMBER,
    frame_max=Matcher.NUMBER,
    channel_max=Matcher.NUMBER,
    recv_oct=Matcher.NUMBER,
    recv_cnt=Matcher.NUMBER,
    send_oct=Matcher.NUMBER,
    send_cnt=Matcher.NUMBER,
    send_pend=Matcher.NUMBER,
    connected_at=Matcher.NUMBER,
)

CHANNELS: Final = ColumnRegistry.of(
    "name",
    pid=Matcher.TOKEN,
    connection=Matcher.TOKEN,
    name=Matcher.CHANNEL,
    number=Matcher.NUMBER,
    user=Matcher.TOKEN,
    vhost=Matcher.TOKEN,
    transactional=Matcher.BOOL,
    confirm=Matcher.BOOL,
    consumer_count=Matcher.NUMBER,
    messages_unacknowledged=Matcher.NUMBER,
    messages_uncommitted=Matcher.NUMBER,
    acks_uncommitted=Matcher.NUMBER,
    messages_unconfirmed=Matcher.NUMBER,
    prefetch_count=Matcher.NUMBER,
    global_prefetch_count=Matcher.NUMBER,
)

CONSUMERS: Final = ColumnRegistry.of(
    "queue_name",
    queue_name=Matcher.TOKEN,
    channel_pid=Matcher.TOKEN,
    consumer_tag=Matcher.TOKEN,
    ack_required=Matcher.BOOL,
    prefetch_count=Matcher.NUMBER,
    arguments=Matcher.LIST,
)

VHOSTS: Final = ColumnRegistry.of(
    "name",
    name=Matcher.TOKEN,
    tracing=Matcher.BOOL,
)

USERS: Final = ColumnRegistry.of("user", user=Matcher.TOKEN, tags=Matcher.LIST)
USER_COLUMNS: Final = ("user", "tags")

PERMISSIONS: Final = ColumnRegistry.of(
    "user",
    user=Matcher.TOKEN,
    configure=Matcher.TOKEN,
    write=Matcher.TOKEN,
    read=Matcher.TOKEN,
)
PERMISSION_COLUMNS: Final = ("user", "configure", "write", "read")

USER_PERMISSIONS: Final = ColumnRegistry.of(
    "vhost",
    vhost=Matcher.TOKEN,
    configure=Matcher.TOKEN,
    write=Matcher.TOKEN,
    read=Matcher.TOKEN,
)
USER_PERMISSION_COLUMNS: Final = ("vhost", "configure", "write", "read")

PARAMETERS: Final = ColumnRegistry.of(
    "name",
    component=Matcher.TOKEN,
    name=Matcher.TOKEN,
    value=Matcher.TOKEN,
)
PARAMETER_COLUMNS: Final = ("component", "name", "value")

POLICIES: Final = ColumnRegistry.of(
    "name",
    **{
        "vhost": Matcher.TOKEN,
        "name": Matcher.TOKEN,
        "pattern": Matcher.TOKEN,
        "apply-to": Matcher.WORD,
        "definition": Matcher.TOKEN,
        "priority": Matcher.NUMBER,
    },
)
POLICY_COLUMNS: Final = ("vhost", "name", "pattern", "apply-to", "definition", "priority")

PLUGINS: Final = ColumnRegistry.of(
    "name",
    state=Matcher.LIST,
    name=Matcher.TOKEN,
    version=Matcher.TOKEN,
)
PLUGIN_COLUMNS: Final = ("state", "name", "version")
