"""
GitHub REST transport for gists.

Owns the httpx client and all network concerns, including the timeout.
Every failure leaves here as a TransportError.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from .errors import TransportError

logger = logging.getLogger(__name__)

DEFAULT_HOST = 'api.github.com'
API_VERSION = '2022-11-28'


@dataclass
class GistRequest:
    host: str
    path: str
    method: str = 'GET'
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def url(self) -> str:
        return f"https://{self.host}{self.path}"


def build_request(gist_id: str, auth_token: str, user_agent: str,
                  host: str = DEFAULT_HOST) -> GistRequest:
    """Describe the GET /gists/{id} call for the given credentials."""
    return GistRequest(
        host=host,
        path=f"/gists/{gist_id}",
        method='GET',
        headers={
            'Accept': 'application/vnd.github+json',
            'X-GitHub-Api-Version': API_VERSION,
            'Authorization': f"Bearer {auth_token}",
            'User-Agent': user_agent,
        },
    )


class GistTransport:
    def __init__(self, timeout: float = 30.0,
                 client: Optional[httpx.AsyncClient] = None):
        """Initialize the transport.

        Args:
            timeout: Seconds before httpx gives up on a request
            client: Pre-built client, mainly for tests with httpx.MockTransport
        """
        self.timeout = timeout
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
        )

    async def send(self, request: GistRequest) -> Dict[str, Any]:
        """Perform the request and return the parsed JSON body."""
        try:
            response = await self._client.request(
                request.method, request.url, headers=request.headers
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout after {self.timeout}s for {request.url}")
            raise TransportError(f"Timeout after {self.timeout}s: {e}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Connection error for {request.url}: {e}")
            raise TransportError(f"Connection error: {e}") from e

        if response.status_code < 200 or response.status_code >= 300:
            logger.info(f"{request.url} answered {response.status_code}")
            raise TransportError(
                f"API error: statusCode = {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Malformed JSON from {request.url}: {e}")
            raise TransportError(f"Malformed response body: {e}",
                                 status_code=response.status_code) from e

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self) -> "GistTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()


def create_transport(timeout: float = 30.0) -> GistTransport:
    """Create a GistTransport with its own httpx client."""
    return GistTransport(timeout=timeout)
