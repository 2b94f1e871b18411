"""
Namespace Commands.

Commands for namespace statistics and lifecycle (create, delete, fork).
"""

import typer

from nsadmin.cli.dispatch import CreateNamespace, DeleteNamespace, Fork, Stats
from nsadmin.cli.state import CliState


def stats(
    ctx: typer.Context,
    namespace: str = typer.Argument(..., help="Namespace to inspect"),
    include_top_queries: bool = typer.Option(
        False, "--include-top-queries", "-i", help="Include the server's top queries"
    ),
) -> None:
    """
    Show usage statistics for a namespace.

    Examples:
        nsadmin http://127.0.0.1:8081 stats db1
        nsadmin http://127.0.0.1:8081 -f json stats db1 -i
    """
    state: CliState = ctx.obj
    state.run(Stats(namespace=namespace, include_top_queries=include_top_queries))


def create_namespace(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Namespace to create"),
) -> None:
    """
    Create a new namespace.

    Examples:
        nsadmin http://127.0.0.1:8081 create-namespace db1
    """
    state: CliState = ctx.obj
    state.run(CreateNamespace(name=name))


def delete_namespace(
    ctx: typer.Context,
    name: str = typer.Argument(..., help="Namespace to delete"),
) -> None:
    """
    Delete a namespace.

    Examples:
        nsadmin http://127.0.0.1:8081 delete-namespace db1
    """
    state: CliState = ctx.obj
    state.run(DeleteNamespace(name=name))


def fork(
    ctx: typer.Context,
    source: str = typer.Argument(..., metavar="FROM", help="Namespace to fork"),
    target: str = typer.Argument(..., metavar="TO", help="Name of the new namespace"),
) -> None:
    """
    Fork a namespace into a new one.

    Examples:
        nsadmin http://127.0.0.1:8081 fork db1 db1-snapshot
    """
    state: CliState = ctx.obj
    state.run(Fork(source=source, target=target))
