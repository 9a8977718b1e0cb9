"""Search request building for the OpenSearchServer select API."""

from oss_client.search.endpoint import OssEndpoint
from oss_client.search.options import CollapseOptions, FacetOptions
from oss_client.search.request import MATCH_ALL_QUERY, SearchRequest

__all__ = [
    "CollapseOptions",
    "FacetOptions",
    "MATCH_ALL_QUERY",
    "OssEndpoint",
    "SearchRequest",
]
