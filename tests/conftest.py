"""
Pytest configuration and shared fixtures for the SendOwl transport tests.
"""

import tempfile
from pathlib import Path
from typing import Callable, Generator, List

import httpx
import pytest

from sendowl.sdk.transport import Credentials, TransportClient


TEST_BASE_URL = "https://api.test/api/v1"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.
    
    Yields:
        Path to temporary directory that is cleaned up after the test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(api_key="key123", api_secret="secret456")


@pytest.fixture
def sent_requests() -> List[httpx.Request]:
    """Requests captured by clients created with ``make_client``."""
    return []


@pytest.fixture
def make_client(
    credentials: Credentials, sent_requests: List[httpx.Request]
) -> Callable[..., TransportClient]:
    """
    Factory fixture building a TransportClient over ``httpx.MockTransport``.
    
    The handler receives each ``httpx.Request`` and returns the
    ``httpx.Response`` to answer with. Every request is also appended to
    ``sent_requests`` after its body has been read.
    
    Usage:
        def test_something(make_client):
            client = make_client(lambda request: httpx.Response(200, json={}))
    """
    def _make_client(handler: Callable[[httpx.Request], httpx.Response]) -> TransportClient:
        def _recording_handler(request: httpx.Request) -> httpx.Response:
            request.read()
            sent_requests.append(request)
            return handler(request)

        return TransportClient(
            base_url=TEST_BASE_URL,
            credentials=credentials,
            transport=httpx.MockTransport(_recording_handler),
        )

    return _make_client
