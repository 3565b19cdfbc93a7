"""
Outbound fetch of the upstream XML feed.

The relay only needs one capability from the network: ``fetch(url)`` returning
the body bytes, or raising :class:`UpstreamUnavailable` when no response could
be obtained at all. Keeping that behind :class:`UpstreamFetcher` lets the route
be exercised without touching the real upstream.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from dhmz_relay.vars import RELAY_TIMEOUT

logger = logging.getLogger("uvicorn.error")


class UpstreamUnavailable(Exception):
    """The outbound request failed before any upstream response arrived."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"Upstream {url} unavailable: {reason}")
        self.url = url
        self.reason = reason


class UpstreamFetcher(ABC):
    """Fetch the full body of a URL with a plain GET."""

    @abstractmethod
    async def fetch(self, url: str) -> bytes:
        """Return the response body, or raise UpstreamUnavailable."""


async def best_effort_body(response: httpx.Response) -> bytes:
    """
    Read the whole upstream body, substituting ``b""`` when the read fails.

    Once headers have arrived the exchange counts as a success, so a connection
    dropped mid-body degrades to an empty payload instead of an error.
    """
    try:
        return await response.aread()
    except httpx.RequestError as e:
        logger.warning(
            f"[Relay] Reading body from {response.request.url} failed, "
            f"relaying empty body: {type(e).__name__}: {e}"
        )
        return b""


class HttpxFetcher(UpstreamFetcher):
    """
    Default fetcher backed by ``httpx.AsyncClient``.

    A fresh client is opened per call, so concurrent requests share nothing
    but this object's immutable settings. Redirects are followed and the
    upstream status code is deliberately not inspected.
    """

    def __init__(
        self,
        timeout: float = RELAY_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self.transport = transport

    async def fetch(self, url: str) -> bytes:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(self.timeout),
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            try:
                async with client.stream("GET", url) as response:
                    logger.debug(
                        f"[Relay] Upstream {url} answered {response.status_code}"
                    )
                    return await best_effort_body(response)
            except httpx.TimeoutException as e:
                raise UpstreamUnavailable(url, "timeout") from e
            except httpx.RequestError as e:
                raise UpstreamUnavailable(url, type(e).__name__) from e


_default_fetcher = HttpxFetcher()


def get_fetcher() -> UpstreamFetcher:
    """FastAPI dependency providing the process-wide fetcher."""
    return _default_fetcher
