"""Exceptions raised by the OpenSearchServer client."""


class OssClientError(Exception):
    """Base class for all client errors."""
    pass


class OssConnectionError(OssClientError):
    """Raised when the engine cannot be reached after all retries."""
    pass


class OssApiError(OssClientError):
    """Raised when the engine answers with an HTTP error status.

    Attributes:
        status_code: HTTP status returned by the engine
        body: Raw response body, usually the engine's error message
        url: Requested URL with the API key masked
    """

    def __init__(self, status_code: int, body: str, url: str):
        self.status_code = status_code
        self.body = body
        self.url = url
        super().__init__(f"OpenSearchServer returned HTTP {status_code} for {url}: {body[:200]}")
