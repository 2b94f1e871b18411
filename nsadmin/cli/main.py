"""
CLI Entry Point.

Command-line administration client for namespace-scoped database services.
Built with Typer for type-safe commands and Rich for terminal output.

Usage:
    nsadmin --help                                         # Show help

    # Statistics
    nsadmin http://127.0.0.1:8081 stats db1                # Counters only
    nsadmin http://127.0.0.1:8081 stats db1 -i             # With top queries
    nsadmin http://127.0.0.1:8081 -f json stats db1        # JSON output

    # Lifecycle
    nsadmin http://127.0.0.1:8081 create-namespace db1
    nsadmin http://127.0.0.1:8081 delete-namespace db1
    nsadmin http://127.0.0.1:8081 fork db1 db2

    # Configuration
    nsadmin http://127.0.0.1:8081 get-config db1
    nsadmin http://127.0.0.1:8081 set-config db1 --max-db-size "500.0 MB"

Options:
    --format, -f      normal | json
    --verbose, -v     Enable verbose output (INFO level logging)
    --debug, -d       Enable debug mode (DEBUG level logging)
    --version         Show version and exit
"""

from typing import Optional

import click
import typer
from rich.console import Console
from rich.text import Text
from typer.core import TyperGroup

from nsadmin import __version__
from nsadmin.cli.client import NamespaceClient
from nsadmin.cli.commands import (
    create_namespace,
    delete_namespace,
    fork,
    get_config,
    set_config,
    stats,
)
from nsadmin.cli.output import EXIT_FATAL, OutputSink, PrintFormat
from nsadmin.cli.state import CliState
from nsadmin.core.logging import get_logger, log_with_source, setup_logging

logger = get_logger(__name__)
err_console = Console(stderr=True)

_VALUE_OPTIONS = frozenset({"-f", "--format"})


def hoist_root_options(args: list[str]) -> list[str]:
    """
    Move root options given between BASE_URL and the subcommand name to the front.

    Click stops parsing group options at the first positional argument, so
    `nsadmin URL -f json stats db1` would otherwise read `-f` as the
    subcommand. Everything from the subcommand name on is left untouched,
    so `nsadmin URL stats --help` still shows the stats help.
    """
    hoisted: list[str] = []
    rest: list[str] = []
    seen_base_url = False
    i = 0

    while i < len(args):
        arg = args[i]
        if arg == "--" or not arg.startswith("-") or arg == "-":
            if seen_base_url or arg == "--":
                rest.extend(args[i:])
                break
            seen_base_url = True
            rest.append(arg)
            i += 1
            continue

        width = 2 if arg in _VALUE_OPTIONS else 1
        (hoisted if seen_base_url else rest).extend(args[i:i + width])
        i += width

    return hoisted + rest


class RootGroup(TyperGroup):
    """Root command group accepting `BASE_URL [OPTIONS] COMMAND`."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        return super().parse_args(ctx, hoist_root_options(args))


app = typer.Typer(
    name="nsadmin",
    cls=RootGroup,
    help="Administer namespaces of a database service over its admin HTTP API.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

app.command("stats")(stats)
app.command("create-namespace")(create_namespace)
app.command("delete-namespace")(delete_namespace)
app.command("fork")(fork)
app.command("get-config")(get_config)
app.command("set-config")(set_config)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"nsadmin {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    base_url: str = typer.Argument(
        ...,
        help="Admin API base URL, e.g. http://127.0.0.1:8081",
    ),
    output_format: PrintFormat = typer.Option(
        PrintFormat.NORMAL,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format for every message of this invocation",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    Namespace administration client.

    Sends one request to the admin API at BASE_URL and prints the result.
    """
    level = "DEBUG" if debug else "INFO" if verbose else None

    try:
        setup_logging(level=level)
        client = NamespaceClient(base_url)
    except (RuntimeError, FileNotFoundError, ValueError) as e:
        err_console.print("[red]Error: could not load configuration.[/red]")
        err_console.print(Text(str(e), style="dim"))
        raise typer.Exit(EXIT_FATAL)

    ctx.call_on_close(client.close)
    ctx.obj = CliState(client=client, sink=OutputSink(output_format))

    log_with_source(
        logger,
        "cli",
        "debug",
        "CLI initialized",
        base_url=client.base_url,
        format=output_format.value,
    )


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
