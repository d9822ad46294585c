"""
Shared pytest fixtures for the gist snippet tests.

No test touches the network: the orchestrator gets a FakeTransport and the
real transport is driven through httpx.MockTransport.
"""
import pytest

from gist_snippet.cache import MemoStore
from gist_snippet.errors import TransportError
from gist_snippet.snippet import GistSnippet


def gist_response(*files):
    """Build a GET /gists/{id} body from (file_name, content) pairs."""
    return {"files": {name: {"content": content} for name, content in files}}


class FakeTransport:
    """Records requests and answers with a canned response or error."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.requests = []
        self.closed = False

    @property
    def call_count(self):
        return len(self.requests)

    async def send(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    async def aclose(self):
        self.closed = True


@pytest.fixture
def store():
    """Fresh memo store for each test."""
    return MemoStore()


@pytest.fixture
def options():
    return {"authToken": "12345", "userAgent": "dave grohl"}


@pytest.fixture
def transport():
    return FakeTransport(response=gist_response(("01.sh", " echo hello > myfile.txt ")))


@pytest.fixture
def snippet(transport, store):
    return GistSnippet(transport=transport, store=store)


@pytest.fixture
def failing_transport():
    return FakeTransport(error=TransportError("API error: statusCode = 401", status_code=401))
