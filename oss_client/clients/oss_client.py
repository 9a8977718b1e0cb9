"""Async HTTP client for the OpenSearchServer select API."""

import asyncio
import logging
import uuid
from typing import Any

import httpx

from oss_client.config import Settings
from oss_client.exceptions import OssApiError, OssConnectionError
from oss_client.logging_config import (
    clear_request_id,
    mask_api_key,
    request_id_var,
    set_request_id,
)
from oss_client.search.endpoint import OssEndpoint
from oss_client.search.request import SearchRequest

logger = logging.getLogger(__name__)


class OssClient:
    """Client sending search requests to an OpenSearchServer engine.

    Responses are returned raw; parsing them is left to the caller.
    Transport failures are retried with exponential backoff, HTTP error
    statuses are raised immediately as OssApiError.
    """

    def __init__(
        self,
        endpoint: OssEndpoint,
        timeout: float = 30.0,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            endpoint: Default endpoint for requests that carry none
            timeout: Request timeout in seconds (default: 30.0)
            max_retries: Maximum number of attempts (default: 3)
            transport: Optional httpx transport, e.g. a MockTransport in tests
        """
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)
        self.endpoint = endpoint
        self.timeout = timeout
        self.max_retries = max_retries

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "OssClient":
        """Create a client configured from ``settings``."""
        return cls(
            endpoint=OssEndpoint.from_settings(settings),
            timeout=settings.timeout,
            max_retries=settings.max_retries,
            **kwargs,
        )

    def new_search(self, rows: int | None = None, start: int | None = None) -> SearchRequest:
        """Start a search request bound to the client's endpoint."""
        return SearchRequest(self.endpoint, rows=rows, start=start)

    async def _retry_with_backoff(self, func, *args, **kwargs) -> Any:
        """Execute ``func`` retrying transport errors with 1s, 2s, 4s... delays.

        Raises:
            OssConnectionError: If every attempt failed
        """
        last_exception: httpx.TransportError | None = None

        for attempt in range(self.max_retries):
            try:
                return await func(*args, **kwargs)
            except httpx.TransportError as e:
                last_exception = e

                if attempt < self.max_retries - 1:
                    delay = 2 ** attempt
                    logger.warning(
                        f"OpenSearchServer request failed (attempt {attempt + 1}/{self.max_retries}): "
                        f"{type(e).__name__}: {str(e)}. Retrying in {delay}s..."
                    )
                    await asyncio.sleep(delay)
                else:
                    logger.error(
                        f"OpenSearchServer request failed after {self.max_retries} attempts: "
                        f"{type(e).__name__}: {str(e)}"
                    )

        raise OssConnectionError(
            f"Could not reach OpenSearchServer after {self.max_retries} attempts"
        ) from last_exception

    async def search(self, request: SearchRequest) -> httpx.Response:
        """Execute a search request.

        Log records emitted while the search runs carry a request ID. An ID
        already set by the caller is kept; otherwise a new one is set for
        the duration of the call.

        Args:
            request: Configured search request

        Returns:
            The raw engine response

        Raises:
            OssConnectionError: If the engine is unreachable after retries
            OssApiError: If the engine answers with an HTTP error status
        """
        owns_request_id = request_id_var.get() is None
        if owns_request_id:
            set_request_id(uuid.uuid4().hex)
        try:
            return await self._search(request)
        finally:
            if owns_request_id:
                clear_request_id()

    async def _search(self, request: SearchRequest) -> httpx.Response:
        endpoint = request.endpoint or self.endpoint
        url = request.url(endpoint)
        safe_url = mask_api_key(url)
        logger.debug(f"GET {safe_url}")

        response = await self._retry_with_backoff(self.client.get, url)

        if response.is_error:
            logger.error(f"Search failed with HTTP {response.status_code}: {safe_url}")
            raise OssApiError(response.status_code, response.text, safe_url)

        logger.info(f"Search on index '{endpoint.index}' returned HTTP {response.status_code}")
        return response

    async def close(self):
        """Close the underlying HTTP connection pool."""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
