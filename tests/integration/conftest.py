"""
Integration Test Fixtures.

Fixtures for integration tests - a real HTTP server on localhost.
The server delegates every request to the FakeAdminServer from the root
conftest.py, so the CLI runs end to end over TCP in a subprocess.
"""

import subprocess
import sys
import threading
from collections.abc import Callable, Generator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

import httpx
import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _make_handler(fake) -> type[BaseHTTPRequestHandler]:
    class _AdminHandler(BaseHTTPRequestHandler):
        def _dispatch(self) -> None:
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length else b""
            request = httpx.Request(
                self.command,
                f"http://{self.headers['Host']}{self.path}",
                content=body,
            )
            response = fake.handle(request)
            content = response.read()

            self.send_response(response.status_code)
            self.send_header("Content-Type", response.headers.get("Content-Type", "application/json"))
            self.send_header("Content-Length", str(len(content)))
            self.end_headers()
            self.wfile.write(content)

        do_GET = _dispatch
        do_POST = _dispatch
        do_DELETE = _dispatch

        def log_message(self, format: str, *args) -> None:
            pass

    return _AdminHandler


@pytest.fixture
def live_admin_server(admin_server) -> Generator[str, None, None]:
    """
    Serve the fake admin API on an ephemeral localhost port.

    Yields the base URL. Namespace state is available through the
    `admin_server` fixture.
    """
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _make_handler(admin_server))
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()

    host, port = httpd.server_address[:2]
    yield f"http://{host}:{port}"

    httpd.shutdown()
    httpd.server_close()
    thread.join(timeout=5)


@pytest.fixture
def run_cli() -> Callable[..., subprocess.CompletedProcess]:
    """
    Run `python -m nsadmin` from the project root.

    Usage:
        def test_help(run_cli):
            result = run_cli("--help")
            assert result.returncode == 0
    """

    def _run(*args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [sys.executable, "-m", "nsadmin", *args],
            cwd=PROJECT_ROOT,
            capture_output=True,
            text=True,
            timeout=60,
        )

    return _run
