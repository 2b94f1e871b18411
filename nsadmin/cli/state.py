"""Per-invocation state shared between the root callback and subcommands."""

from dataclasses import dataclass

from nsadmin.cli.client import NamespaceClient
from nsadmin.cli.dispatch import Command, dispatch
from nsadmin.cli.output import OutputSink


@dataclass
class CliState:
    client: NamespaceClient
    sink: OutputSink

    def run(self, command: Command) -> None:
        dispatch(command, self.client, self.sink)
