"""Shared fixtures for netint tests."""

import json

import httpx
import pytest

from netint.regions import REGISTRY


def make_body(measurement=None, overrides=None) -> bytes:
    """Build a response body with every region set to `measurement`.

    `overrides` maps region name -> raw entry for that region's key.
    """
    if measurement is None:
        measurement = [1670000000, "12", "0", "3"]
    data = {region.label: [list(measurement)] for region in REGISTRY}
    for name, entry in (overrides or {}).items():
        data[f"linode-{name}"] = entry
    return json.dumps(data).encode()


class RecordingFetcher:
    """Fetcher stub returning canned bodies per URL and recording calls."""

    def __init__(self, body: bytes = None, bodies: dict = None, errors: dict = None):
        self.body = body if body is not None else make_body()
        self.bodies = bodies or {}
        self.errors = errors or {}
        self.calls = []

    def __call__(self, url: str) -> bytes:
        self.calls.append(url)
        if url in self.errors:
            raise self.errors[url]
        return self.bodies.get(url, self.body)


@pytest.fixture
def fixture_body() -> bytes:
    return make_body()


@pytest.fixture
def fetcher() -> RecordingFetcher:
    return RecordingFetcher()


@pytest.fixture
def mock_transport():
    """httpx MockTransport serving the standard fixture; requests are recorded."""
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, content=make_body())

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport
