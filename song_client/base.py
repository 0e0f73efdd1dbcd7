"""Base HTTP client with retry logic."""

import httpx
from loguru import logger
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from app.errors import UpstreamFetchError
from settings import SONG_TIMEOUT, SONG_URL

# Default settings
API_BASE_URL = SONG_URL.rstrip("/")
API_TIMEOUT = SONG_TIMEOUT


def set_api_config(base_url: str, timeout: int) -> None:
    """Set API configuration."""
    global API_BASE_URL, API_TIMEOUT
    API_BASE_URL = base_url.rstrip("/")
    API_TIMEOUT = timeout


def _is_retryable_error(exc: BaseException) -> bool:
    """Check if exception is retryable (network errors + 5xx server errors)."""
    if isinstance(exc, (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code >= 500


class BaseClient:
    """Base async HTTP client with exponential backoff."""

    def __init__(self, base_url: str | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self._client: httpx.AsyncClient | None = None
        self._base_url = (base_url or API_BASE_URL).rstrip("/")
        self._transport = transport
        self._request_count = 0
        logger.info("{}: base_url={}", self.__class__.__name__, self._base_url)

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            timeout=API_TIMEOUT,
            limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
            transport=self._transport,
        )
        return self

    async def __aexit__(self, *_):
        logger.info("Total API requests: {}", self._request_count)
        if self._client:
            await self._client.aclose()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=30),
        retry=retry_if_exception(_is_retryable_error),
        reraise=True,
    )
    async def _request(self, path: str, params: dict | None = None) -> dict | list:
        """GET request with retry logic."""
        self._request_count += 1
        resp = await self._client.get(f"{self._base_url}/{path}", params=params)
        resp.raise_for_status()
        return resp.json()

    async def _get(self, path: str, params: dict | None = None) -> dict | list:
        """GET request; any failure surfaces as UpstreamFetchError."""
        try:
            return await self._request(path, params)
        except httpx.HTTPError as e:
            raise UpstreamFetchError(f"GET {path} failed: {e}") from e
        except ValueError as e:
            raise UpstreamFetchError(f"GET {path} returned invalid JSON: {e}") from e
