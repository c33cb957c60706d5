"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import threading
import time
from collections import Counter
from collections.abc import Callable, Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import httpx
import pytest

from pylark import Request

BASE_URL = "https://test.com/api/"
DRIVER_ID = "driv_123"
TEAM_ID = "team_123"


SAMPLE_TEAM = {
    "name": "Red Bull Racing",
    "colour": "3671C6",
}

SAMPLE_DRIVER = {
    "first_name": "Max",
    "last_name": "Verstappen",
    "driver_tla": "VER",
    "team_url": SAMPLE_TEAM,
}


def _query_values(url: httpx.URL) -> dict[str, Counter[str]]:
    """Query parameters as order-independent multisets of CSV elements."""
    return {key: Counter(value.split(",")) for key, value in url.params.multi_items()}


def _assert_url(request: Request, expected: str) -> None:
    expected_url = httpx.URL(expected)
    actual = request.to_url()
    assert actual.host == expected_url.host
    assert actual.path == expected_url.path
    assert actual.fragment == expected_url.fragment
    assert _query_values(actual) == _query_values(expected_url)


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def assert_url() -> Callable[[Request, str], None]:
    """Compare a request's URL with an expected one, ignoring parameter order."""
    return _assert_url


SERVER_LATENCY = 1.0


class _SlowHandler(BaseHTTPRequestHandler):
    """Answers every GET with ``{}`` after ``SERVER_LATENCY`` seconds."""

    def do_GET(self) -> None:
        time.sleep(SERVER_LATENCY)
        body = b"{}"
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        pass


@pytest.fixture
def slow_server() -> Iterator[str]:
    """Base URL of a local HTTP server that is slower than a short deadline."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _SlowHandler)
    server.daemon_threads = True
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    host, port = server.server_address[:2]
    yield f"http://{host}:{port}"
    server.shutdown()
    server.server_close()
