"""
Config Commands.

Commands for reading and updating a namespace's configuration.
"""

from typing import Optional

import typer

from nsadmin.cli.dispatch import GetConfig, SetConfig
from nsadmin.cli.state import CliState


def get_config(
    ctx: typer.Context,
    namespace: str = typer.Argument(..., help="Namespace to inspect"),
) -> None:
    """
    Show the configuration of a namespace.

    Examples:
        nsadmin http://127.0.0.1:8081 get-config db1
    """
    state: CliState = ctx.obj
    state.run(GetConfig(namespace=namespace))


def set_config(
    ctx: typer.Context,
    namespace: str = typer.Argument(..., help="Namespace to update"),
    block_reads: Optional[bool] = typer.Option(
        None, "--block-reads/--no-block-reads", help="Reject read requests"
    ),
    block_writes: Optional[bool] = typer.Option(
        None, "--block-writes/--no-block-writes", help="Reject write requests"
    ),
    block_reason: Optional[str] = typer.Option(
        None, "--block-reason", help="Reason reported to blocked clients"
    ),
    max_db_size: Optional[str] = typer.Option(
        None, "--max-db-size", help="Size limit with unit, e.g. '500.0 MB'"
    ),
) -> None:
    """
    Update the configuration of a namespace.

    Only the given options change; everything else keeps its current value.
    The block reason is cleared once neither reads nor writes are blocked.

    Examples:
        nsadmin http://127.0.0.1:8081 set-config db1 --max-db-size "500.0 MB"
        nsadmin http://127.0.0.1:8081 set-config db1 --block-writes --block-reason "migration"
        nsadmin http://127.0.0.1:8081 set-config db1 --no-block-writes
    """
    state: CliState = ctx.obj
    state.run(
        SetConfig(
            namespace=namespace,
            block_reads=block_reads,
            block_writes=block_writes,
            block_reason=block_reason,
            max_db_size=max_db_size,
        )
    )
