"""
Output Rendering.

All terminal output goes through OutputSink. The selected PrintFormat
applies to every message of an invocation: success, data and errors.

A failed write (typically a closed pipe, as in `nsadmin ... | head -1`)
ends the process with exit status 0 instead of a traceback.
"""

import io
import os
from enum import Enum
from typing import IO, NoReturn

from pydantic import BaseModel
from rich.console import Console
from rich.text import Text

from nsadmin.schemas.base import ConfigResponse, StatsResponse, SuccessResponse
from nsadmin.schemas.namespace import NamespaceConfig, NamespaceStats, ServerError

EXIT_SERVER_ERROR = 255
EXIT_FATAL = 1


class PrintFormat(str, Enum):
    """Rendering mode selected once per invocation."""

    NORMAL = "normal"
    JSON = "json"


def _silence_stream(stream: IO[str]) -> None:
    """Point a stream's fd at /dev/null so interpreter shutdown cannot flush into a closed pipe."""
    try:
        fd = stream.fileno()
    except (AttributeError, ValueError, io.UnsupportedOperation):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)


class _PipeConsole(Console):
    """Console that hands a closed pipe back to the caller instead of exiting 1."""

    def on_broken_pipe(self) -> None:
        self.quiet = True
        raise BrokenPipeError


class OutputSink:
    """
    Single writer for stdout and stderr.

    Rich consoles resolve sys.stdout/sys.stderr at write time, so the sink
    follows stream redirection (including test runners).
    """

    def __init__(self, format: PrintFormat = PrintFormat.NORMAL) -> None:
        self.format = format
        self._out = _PipeConsole(highlight=False, emoji=False, soft_wrap=True)
        self._err = _PipeConsole(stderr=True, highlight=False, emoji=False, soft_wrap=True)

    def _emit(self, console: Console, text: str | Text) -> None:
        try:
            console.print(text, markup=False)
        except OSError:
            _silence_stream(console.file)
            raise SystemExit(0)

    def write(self, text: str) -> None:
        """Write one line to stdout."""
        self._emit(self._out, text)

    def write_error(self, text: str | Text) -> None:
        """Write one line to stderr."""
        self._emit(self._err, text)

    def write_json(self, payload: BaseModel) -> None:
        """Write a pretty-printed JSON document to stdout."""
        self.write(payload.model_dump_json(indent=2))


def _error_line(message: str) -> Text:
    return Text.assemble(("Error:", "bold red"), f" {message}")


def print_success(sink: OutputSink) -> None:
    if sink.format is PrintFormat.JSON:
        sink.write_json(SuccessResponse())
    else:
        sink.write("Success")


def print_server_error(sink: OutputSink, error: ServerError) -> NoReturn:
    """Render a remote error and terminate with EXIT_SERVER_ERROR."""
    if sink.format is PrintFormat.JSON:
        sink.write_json(error)
    else:
        sink.write_error(_error_line(error.error))
    raise SystemExit(EXIT_SERVER_ERROR)


def print_fatal(sink: OutputSink, message: str) -> NoReturn:
    """Render an unrecoverable client-side failure and terminate with EXIT_FATAL."""
    if sink.format is PrintFormat.JSON:
        sink.write_json(ServerError(error=message))
    else:
        sink.write_error(_error_line(message))
    raise SystemExit(EXIT_FATAL)


def print_stats(sink: OutputSink, stats: NamespaceStats) -> None:
    if sink.format is PrintFormat.JSON:
        sink.write_json(StatsResponse(stats=stats))
        return

    sink.write(f"Rows Read: {stats.rows_read_count}")
    sink.write(f"Rows Written: {stats.rows_written_count}")
    sink.write(f"Storage Used (B): {stats.storage_bytes_used}")
    sink.write(f"Write Requests Delegated: {stats.write_requests_delegated}")
    sink.write(f"Replication Index: {stats.replication_index}")
    if stats.top_queries:
        sink.write("Top Queries (RR = Rows Read : RW = Rows Written):")
        for i, query in enumerate(stats.top_queries):
            sink.write(
                f"{i}: RR: {query.rows_read} RW: {query.rows_written} Query: {query.query}"
            )


def print_config(sink: OutputSink, config: NamespaceConfig) -> None:
    if sink.format is PrintFormat.JSON:
        sink.write_json(ConfigResponse(config=config))
        return

    sink.write(f"Block Reads: {str(config.block_reads).lower()}")
    sink.write(f"Block Writes: {str(config.block_writes).lower()}")
    if config.block_reason is not None:
        sink.write(f"Block Reason: {config.block_reason}")
    if config.max_db_size is not None:
        sink.write(f"Max DB Size: {config.max_db_size}")
