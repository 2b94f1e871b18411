"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Fake Admin Server:
    Tests never talk to a real service. FakeAdminServer implements the admin
    endpoints in memory and is plugged into NamespaceClient through
    httpx.MockTransport, so the real httpx request/response path is exercised.
"""

import json
import re
from collections.abc import Generator
from typing import Any

import httpx
import pytest

from nsadmin.cli.client import NamespaceClient
from nsadmin.core import logging as logging_module
from nsadmin.core.config import get_app_config, get_settings
from nsadmin.core.logging import setup_logging

BASE_URL = "http://admin.test"


# =============================================================================
# Fake Admin Server
# =============================================================================


def _default_stats() -> dict[str, Any]:
    return {
        "rows_read_count": 0,
        "rows_written_count": 0,
        "storage_bytes_used": 0,
        "write_requests_delegated": 0,
        "replication_index": 0,
        "top_queries": [],
    }


def _default_config() -> dict[str, Any]:
    return {
        "block_reads": False,
        "block_writes": False,
        "block_reason": None,
        "max_db_size": None,
    }


class FakeAdminServer:
    """
    In-memory admin API.

    Namespaces map to {"stats": ..., "config": ...}. Every handled request
    is appended to `requests` for assertions.
    """

    def __init__(self) -> None:
        self.namespaces: dict[str, dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self.handle)

    def add_namespace(
        self,
        name: str,
        stats: dict[str, Any] | None = None,
        config: dict[str, Any] | None = None,
    ) -> None:
        self.namespaces[name] = {
            "stats": stats if stats is not None else _default_stats(),
            "config": config if config is not None else _default_config(),
        }

    def _missing(self, name: str) -> httpx.Response:
        return httpx.Response(404, json={"error": f"namespace {name} does not exist"})

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        method = request.method

        match = re.fullmatch(r"/v1/namespaces/([^/]+)/create", path)
        if match and method == "POST":
            name = match.group(1)
            if name in self.namespaces:
                return httpx.Response(400, json={"error": "namespace already exists"})
            self.add_namespace(name)
            return httpx.Response(200, json={})

        match = re.fullmatch(r"/v1/namespaces/([^/]+)/fork/([^/]+)", path)
        if match and method == "POST":
            source, target = match.groups()
            if source not in self.namespaces:
                return self._missing(source)
            if target in self.namespaces:
                return httpx.Response(400, json={"error": "namespace already exists"})
            self.namespaces[target] = json.loads(json.dumps(self.namespaces[source]))
            return httpx.Response(200, json={})

        match = re.fullmatch(r"/v1/namespaces/([^/]+)/stats", path)
        if match and method == "GET":
            name = match.group(1)
            if name not in self.namespaces:
                return self._missing(name)
            return httpx.Response(200, json=self.namespaces[name]["stats"])

        match = re.fullmatch(r"/v1/namespaces/([^/]+)/config", path)
        if match:
            name = match.group(1)
            if name not in self.namespaces:
                return self._missing(name)
            if method == "GET":
                return httpx.Response(200, json=self.namespaces[name]["config"])
            if method == "POST":
                self.namespaces[name]["config"] = json.loads(request.content)
                return httpx.Response(200, json={})

        match = re.fullmatch(r"/v1/namespaces/([^/]+)", path)
        if match and method == "DELETE":
            name = match.group(1)
            if name not in self.namespaces:
                return self._missing(name)
            del self.namespaces[name]
            return httpx.Response(200, json={})

        return httpx.Response(404, text="not found")


@pytest.fixture
def admin_server() -> FakeAdminServer:
    """Provide an empty fake admin server."""
    return FakeAdminServer()


@pytest.fixture
def namespace_client(admin_server: FakeAdminServer) -> Generator[NamespaceClient, None, None]:
    """NamespaceClient wired to the fake admin server."""
    client = NamespaceClient(BASE_URL, transport=admin_server.transport)
    yield client
    client.close()


@pytest.fixture
def cli_server(admin_server: FakeAdminServer, monkeypatch: pytest.MonkeyPatch) -> FakeAdminServer:
    """
    Route every NamespaceClient built by the CLI to the fake admin server.

    Usage:
        def test_stats(cli_server):
            cli_server.add_namespace("db1")
            result = runner.invoke(app, [BASE_URL, "stats", "db1"])
    """

    def _build(base_url: str) -> NamespaceClient:
        return NamespaceClient(base_url, transport=admin_server.transport)

    monkeypatch.setattr("nsadmin.cli.main.NamespaceClient", _build)
    return admin_server


# =============================================================================
# Environment Isolation
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def _configure_logging() -> None:
    """Route structlog through stdlib logging (stderr) before any logger is first used."""
    setup_logging()


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Each test starts from the bundled settings, no NSADMIN_* overrides and plain output."""
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("NSADMIN_CONFIG_DIR", raising=False)
    monkeypatch.delenv("NSADMIN_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    get_app_config.cache_clear()
    logging_module._logging_config = None
    yield
    get_settings.cache_clear()
    get_app_config.cache_clear()
    logging_module._logging_config = None
