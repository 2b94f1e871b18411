"""
Command Dispatch.

One parsed command per invocation is mapped to one NamespaceClient call and
its outcome rendered through the OutputSink.

Failure policy:
    Lifecycle commands (create, delete, fork) render RemoteError and
    TransportError as server errors (EXIT_SERVER_ERROR). Stats and config
    commands have no degraded mode: any failure to obtain data is fatal
    (EXIT_FATAL). MalformedResponseError is always fatal.
"""

from dataclasses import dataclass

from nsadmin.cli.client import NamespaceClient
from nsadmin.cli.output import (
    OutputSink,
    print_config,
    print_fatal,
    print_server_error,
    print_stats,
    print_success,
)
from nsadmin.core.exceptions import (
    ClientError,
    MalformedResponseError,
    RemoteError,
    TransportError,
)
from nsadmin.core.logging import get_logger, log_with_source
from nsadmin.schemas.namespace import ServerError

logger = get_logger(__name__)


@dataclass(frozen=True)
class Stats:
    namespace: str
    include_top_queries: bool = False


@dataclass(frozen=True)
class CreateNamespace:
    name: str


@dataclass(frozen=True)
class DeleteNamespace:
    name: str


@dataclass(frozen=True)
class Fork:
    source: str
    target: str


@dataclass(frozen=True)
class GetConfig:
    namespace: str


@dataclass(frozen=True)
class SetConfig:
    """Fields left as None keep the namespace's current value."""

    namespace: str
    block_reads: bool | None = None
    block_writes: bool | None = None
    block_reason: str | None = None
    max_db_size: str | None = None


Command = Stats | CreateNamespace | DeleteNamespace | Fork | GetConfig | SetConfig


def _run_lifecycle(command: CreateNamespace | DeleteNamespace | Fork, client: NamespaceClient) -> None:
    if isinstance(command, CreateNamespace):
        client.create_namespace(command.name)
    elif isinstance(command, DeleteNamespace):
        client.delete_namespace(command.name)
    else:
        client.fork_namespace(command.source, command.target)


def _run_stats(command: Stats, client: NamespaceClient, sink: OutputSink) -> None:
    try:
        stats = client.namespace_stats(command.namespace)
    except ClientError as e:
        print_fatal(sink, f"Failed to retrieve namespace stats: {e.message}")

    if not command.include_top_queries:
        stats.top_queries.clear()

    print_stats(sink, stats)


def _run_get_config(command: GetConfig, client: NamespaceClient, sink: OutputSink) -> None:
    try:
        config = client.get_namespace_config(command.namespace)
    except ClientError as e:
        print_fatal(sink, f"Failed to retrieve namespace config: {e.message}")

    print_config(sink, config)


def _run_set_config(command: SetConfig, client: NamespaceClient, sink: OutputSink) -> None:
    try:
        current = client.get_namespace_config(command.namespace)
    except ClientError as e:
        print_fatal(sink, f"Failed to retrieve namespace config: {e.message}")

    changes = {
        field: value
        for field, value in (
            ("block_reads", command.block_reads),
            ("block_writes", command.block_writes),
            ("block_reason", command.block_reason),
            ("max_db_size", command.max_db_size),
        )
        if value is not None
    }
    updated = current.model_copy(update=changes)
    if not updated.block_reads and not updated.block_writes:
        if command.block_reason is not None:
            log_with_source(
                logger,
                "cli",
                "warning",
                "Block reason ignored, namespace is not blocked",
                namespace=command.namespace,
                block_reason=command.block_reason,
            )
        updated.block_reason = None

    try:
        client.set_namespace_config(command.namespace, updated)
    except ClientError as e:
        print_fatal(sink, f"Failed to update namespace config: {e.message}")

    print_success(sink)


def dispatch(command: Command, client: NamespaceClient, sink: OutputSink) -> None:
    """Execute exactly one command and render its outcome."""
    log_with_source(
        logger,
        "cli",
        "debug",
        "Dispatching command",
        command=type(command).__name__,
        base_url=client.base_url,
    )

    if isinstance(command, Stats):
        _run_stats(command, client, sink)
    elif isinstance(command, GetConfig):
        _run_get_config(command, client, sink)
    elif isinstance(command, SetConfig):
        _run_set_config(command, client, sink)
    elif isinstance(command, (CreateNamespace, DeleteNamespace, Fork)):
        try:
            _run_lifecycle(command, client)
        except MalformedResponseError as e:
            print_fatal(sink, e.message)
        except RemoteError as e:
            print_server_error(sink, e.to_server_error())
        except TransportError as e:
            print_server_error(sink, ServerError(error=e.message))
        print_success(sink)
    else:
        raise TypeError(f"Unknown command: {command!r}")
