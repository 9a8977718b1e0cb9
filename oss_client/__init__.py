"""Python client for the OpenSearchServer search API."""

from oss_client.clients import OssClient
from oss_client.exceptions import OssApiError, OssClientError, OssConnectionError
from oss_client.search import (
    CollapseOptions,
    FacetOptions,
    OssEndpoint,
    SearchRequest,
)

__all__ = [
    # Requests
    "SearchRequest",
    "OssEndpoint",
    "FacetOptions",
    "CollapseOptions",
    # Transport
    "OssClient",
    # Errors
    "OssClientError",
    "OssConnectionError",
    "OssApiError",
]
