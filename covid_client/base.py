"""Base HTTP client with retry logic."""

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from settings import DOWNLOAD_TIMEOUT


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Base async HTTP client with exponential backoff."""

    def __init__(self, timeout: int = DOWNLOAD_TIMEOUT, transport: httpx.AsyncBaseTransport | None = None):
        self._client: httpx.AsyncClient | None = None
        self._timeout = timeout
        self._transport = transport
        self._request_count = 0
        logger.debug("{}: timeout={}s", self.__class__.__name__, timeout)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport, follow_redirects=True)
        return self

    async def __aexit__(self, *_):
        logger.debug("Total HTTP requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _stream_to(self, url: str, dest) -> int:
        """GET url and write the body to dest. Returns bytes written."""
        self._request_count += 1
        written = 0
        async with self._client.stream("GET", url) as resp:
            resp.raise_for_status()
            with open(dest, "wb") as fh:
                async for chunk in resp.aiter_bytes():
                    fh.write(chunk)
                    written += len(chunk)
        return written
