"""
Remote fetcher: retrieve a non-inline attachment over HTTP as text.

One attempt per call, no retry. A non-2xx status becomes TransportError, any
transport-level failure becomes NetworkError.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from charset_normalizer import from_bytes

from .errors import NetworkError, TransportError
from .rules import FETCH_TIMEOUT_SECONDS, REMOTE_DEFAULT_ENCODING

logger = logging.getLogger(__name__)


def guess_encoding(content: bytes) -> str:
    """Best-effort charset guess for bodies served without a declared charset."""
    match = from_bytes(content).best()
    if match is None:
        return REMOTE_DEFAULT_ENCODING
    return match.encoding


class RemoteFetcher:
    def __init__(
        self,
        base_url: str = "",
        timeout: float = FETCH_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        detect_encoding: bool = False,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport
        self.detect_encoding = detect_encoding

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
            default_encoding=guess_encoding if self.detect_encoding else REMOTE_DEFAULT_ENCODING,
        )

    async def fetch(self, url: str) -> str:
        async with self._client() as client:
            try:
                response = await client.get(url)
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                logger.debug("fetch failed for %s: %r", url, e)
                raise NetworkError(f"Network error while fetching {url}: {e}") from e

        if not response.is_success:
            raise TransportError(response.status_code, response.reason_phrase)

        return response.text
