"""
Shared fixtures for GDS MCP server tests.

Provides the registry, a dispatcher with default settings, and a live
threaded HTTP server on an ephemeral port with an httpx client.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator

import httpx
import pytest

from gds_mcp.config import Settings
from gds_mcp.dispatcher import Dispatcher
from gds_mcp.registry import Registry, build_registry
from gds_mcp.transport import create_server

MCP_ACCEPT = {"Accept": "application/json, text/event-stream"}


@pytest.fixture(scope="session")
def registry() -> Registry:
    """Build the registry once; it is immutable."""
    return build_registry()


@pytest.fixture()
def settings() -> Settings:
    return Settings(host="127.0.0.1", port=0)


@pytest.fixture()
def dispatcher(registry: Registry, settings: Settings) -> Dispatcher:
    return Dispatcher(registry, settings)


@pytest.fixture()
def base_url(dispatcher: Dispatcher, settings: Settings) -> Iterator[str]:
    """Run the HTTP server in a background thread for the duration of a test."""
    httpd = create_server(settings, dispatcher)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    host, port = httpd.server_address[:2]
    try:
        yield f"http://{host}:{port}"
    finally:
        httpd.shutdown()
        httpd.server_close()
        thread.join(timeout=5)


@pytest.fixture()
def client(base_url: str) -> Iterator[httpx.Client]:
    """httpx client that sends the Accept header MCP clients send."""
    with httpx.Client(base_url=base_url, headers=MCP_ACCEPT, timeout=5.0) as c:
        yield c
