"""
Client for the Linode network internals ping endpoints
"""

import logging
import platform
from typing import Callable, Optional

import httpx

from . import __version__
from .errors import TransportFailure
from .models import Overview
from .normalize import parse_overview
from .regions import REGISTRY, TEST_REGION, TEST_URL

logger = logging.getLogger(__name__)


Fetcher = Callable[[str], bytes]


def build_user_agent() -> str:
    """
    User-Agent sent with every request, so Linode can tell where
    requests come from:

        LinodeNetInt/<version> (<python impl>/<python version> httpx/<version>)
    """
    runtime = f"{platform.python_implementation()}/{platform.python_version()}"
    return f"LinodeNetInt/{__version__} ({runtime} httpx/{httpx.__version__})"


class Client:
    """
    Fetches and normalizes ping sample overviews.

    One blocking GET per region, no caching and no retries. The HTTP
    layer can be replaced entirely by passing `fetcher`, any callable
    taking a URL and returning the body bytes; exceptions it raises
    propagate unchanged.
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        fetcher: Optional[Fetcher] = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
        test_url: str = TEST_URL,
        user_agent: Optional[str] = None
    ):
        self.timeout = timeout
        self.test_url = test_url
        self.user_agent = user_agent or build_user_agent()
        self._fetcher = fetcher or self._http_get
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client"""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.timeout,
                transport=self._transport,
                headers={'User-Agent': self.user_agent},
            )
        return self._client

    def _http_get(self, url: str) -> bytes:
        """Default fetcher: plain GET, body bytes on 2xx"""
        client = self._get_client()

        try:
            response = client.get(url)
        except httpx.TimeoutException as e:
            raise TransportFailure(url, f"timed out: {e}") from e
        except httpx.HTTPError as e:
            raise TransportFailure(url, str(e) or type(e).__name__) from e
        except (httpx.InvalidURL, ValueError) as e:
            raise TransportFailure(url, f"invalid URL: {e}") from e

        if not response.is_success:
            raise TransportFailure(
                url,
                f"HTTP {response.status_code} {response.reason_phrase}",
                status_code=response.status_code
            )

        return response.content

    def url_for(self, name: str) -> str:
        """
        Endpoint URL for a region.

        Raises:
            UnknownRegion: name is neither a known region nor the test sentinel
        """
        if name == TEST_REGION:
            return self.test_url
        return REGISTRY.resolve(name).url

    def fetch_overview(self, name: str) -> Overview:
        """
        Fetch the overview for one origin region.

        Args:
            name: Region name, e.g. "dallas"

        Returns:
            Overview tagged with `name`

        Raises:
            UnknownRegion: unknown region name (no request is made)
            TransportFailure: request failed
            MalformedResponse: body is not the expected JSON
            MalformedMeasurement: a sample field failed validation
        """
        url = self.url_for(name)
        logger.debug("GET %s", url)

        body = self._fetcher(url)
        logger.debug("Received %d bytes from %s", len(body), url)

        try:
            return parse_overview(name, body)
        except ValueError as e:
            logger.warning("Malformed response from %s: %s", url, e)
            raise

    def fetch_all(self) -> dict[str, Overview]:
        """
        Fetch overviews for every region, in registry order.

        The first failure propagates; no partial mapping is returned.
        """
        overviews: dict[str, Overview] = {}
        for name in REGISTRY.names():
            overviews[name] = self.fetch_overview(name)
        return overviews

    def dallas(self) -> Overview:
        return self.fetch_overview("dallas")

    def fremont(self) -> Overview:
        return self.fetch_overview("fremont")

    def atlanta(self) -> Overview:
        return self.fetch_overview("atlanta")

    def newark(self) -> Overview:
        return self.fetch_overview("newark")

    def london(self) -> Overview:
        return self.fetch_overview("london")

    def tokyo(self) -> Overview:
        return self.fetch_overview("tokyo")

    def close(self):
        """Close HTTP client"""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


def fetch_overview(name: str, **kwargs) -> Overview:
    """Convenience function: fetch one overview with a short-lived Client"""
    with Client(**kwargs) as client:
        return client.fetch_overview(name)


def fetch_all(**kwargs) -> dict[str, Overview]:
    """Convenience function: fetch every overview with a short-lived Client"""
    with Client(**kwargs) as client:
        return client.fetch_all()


def dallas(**kwargs) -> Overview:
    return fetch_overview("dallas", **kwargs)


def fremont(**kwargs) -> Overview:
    return fetch_overview("fremont", **kwargs)


def atlanta(**kwargs) -> Overview:
    return fetch_overview("atlanta", **kwargs)


def newark(**kwargs) -> Overview:
    return fetch_overview("newark", **kwargs)


def london(**kwargs) -> Overview:
    return fetch_overview("london", **kwargs)


def tokyo(**kwargs) -> Overview:
    return fetch_overview("tokyo", **kwargs)
