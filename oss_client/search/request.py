"""Fluent builder for OpenSearchServer search queries."""

import logging
from collections.abc import Iterable
from typing import Any

from oss_client.search.encoding import encode, is_blank, to_int
from oss_client.search.endpoint import OssEndpoint
from oss_client.search.options import CollapseOptions, FacetOptions

logger = logging.getLogger(__name__)

MATCH_ALL_QUERY = "*:*"


def _as_list(values: Any) -> list[Any]:
    """``None`` -> ``[]``, a string or other scalar -> ``[value]``."""
    if values is None:
        return []
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        return [values]
    return list(values)


class SearchRequest:
    """Search request against the ``/select`` API.

    Configuration methods return the request itself so calls can be
    chained::

        request = (
            SearchRequest(endpoint, rows=20)
            .set_query("open source")
            .add_filter("lang:en")
            .set_facet("category", min=5)
        )
        fragments = request.build_query_fragments()

    Scalar setters overwrite, list and map setters accumulate. ``None``
    means unset; unset values are left out of the query string.
    """

    def __init__(
        self,
        endpoint: OssEndpoint | None = None,
        rows: int | None = None,
        start: int | None = None,
    ):
        """Initialize an empty search request.

        Args:
            endpoint: Engine, index and credentials; supplies the base fragments
            rows: Initial page size
            start: Initial result offset
        """
        self.endpoint = endpoint

        self.query: str | None = None
        self.start: int | None = None
        self.rows: int | None = None
        self.lang: str | None = None
        self.operator: str | None = None

        self.fields: list[str] = []
        self.filters: list[str | None] = []
        self.negative_filters: list[str | None] = []
        self.sorts: list[str] = []
        self.facets: dict[str, FacetOptions] = {}
        self.collapse = CollapseOptions()

        self.join_parameters: dict[str, str] = {}
        self.join_filters: dict[int, list[str | None]] = {}
        self.join_negative_filters: dict[int, list[str | None]] = {}

        self.set_rows(rows)
        self.set_start(start)

    # Scalars

    def set_query(self, text: str | None = None) -> "SearchRequest":
        self.query = text
        return self

    def set_start(self, start: int | None = None) -> "SearchRequest":
        self.start = start
        return self

    def set_rows(self, rows: int | None = None) -> "SearchRequest":
        self.rows = rows
        return self

    def set_operator(self, operator: str | None = None) -> "SearchRequest":
        """Set the default boolean operator, usually ``OR`` or ``AND``."""
        self.operator = operator
        return self

    def set_lang(self, lang: str | None = None) -> "SearchRequest":
        self.lang = lang
        return self

    # Filters, fields and sorting

    def add_filter(self, expression: str | None = None) -> "SearchRequest":
        self.filters.append(expression)
        return self

    def add_negative_filter(self, expression: str | None = None) -> "SearchRequest":
        self.negative_filters.append(expression)
        return self

    def add_fields(self, fields: str | Iterable[str] | None) -> "SearchRequest":
        """Add returned fields; names already present are ignored.

        Args:
            fields: A field name or an iterable of field names
        """
        for field in _as_list(fields):
            if field not in self.fields:
                self.fields.append(field)
        return self

    def add_sort(self, fields: str | Iterable[str] | None) -> "SearchRequest":
        """Append sort clauses verbatim, e.g. ``"-date"`` for descending.

        Args:
            fields: A sort clause or an iterable of sort clauses
        """
        self.sorts.extend(_as_list(fields))
        return self

    # Collapsing

    def set_collapse_field(self, field: str | None) -> "SearchRequest":
        self.collapse.field = field
        return self

    def set_collapse_mode(self, mode: str | None) -> "SearchRequest":
        self.collapse.mode = mode
        return self

    def set_collapse_type(self, collapse_type: str | None) -> "SearchRequest":
        self.collapse.type = collapse_type
        return self

    def set_collapse_max(self, max_per_group: int | None) -> "SearchRequest":
        self.collapse.max = max_per_group
        return self

    # Facets

    def set_facet(
        self,
        field: str,
        min: int | None = None,
        multi: bool = False,
        multi_collapse: bool = False,
    ) -> "SearchRequest":
        """Request a facet on ``field``, replacing any previous options for it.

        Args:
            field: Field to compute value counts on
            min: Minimum count for a value to be returned
            multi: Multi-valued facet; takes precedence over ``multi_collapse``
            multi_collapse: Multi-valued facet on collapsed results
        """
        self.facets[field] = FacetOptions(min=min, multi=multi, multi_collapse=multi_collapse)
        return self

    # Joins

    def add_join_parameter(self, key: str, value: str) -> "SearchRequest":
        """Set a join parameter under an explicit key such as ``jq0``."""
        self.join_parameters[key] = value
        return self

    def set_join(self, position: Any, value: str) -> "SearchRequest":
        """Set the join query at ``position`` (rendered as ``jq<position>``)."""
        return self.add_join_parameter(f"jq{to_int(position)}", value)

    def add_join_filter(self, position: Any, expression: str | None = None) -> "SearchRequest":
        self.join_filters.setdefault(to_int(position), []).append(expression)
        return self

    def add_join_negative_filter(
        self, position: Any, expression: str | None = None
    ) -> "SearchRequest":
        self.join_negative_filters.setdefault(to_int(position), []).append(expression)
        return self

    # Assembly

    def base_fragments(self) -> list[str]:
        if self.endpoint is None:
            return []
        return self.endpoint.base_fragments()

    def build_query_fragments(self) -> list[str]:
        """Render the request as ordered ``key=value`` query-string fragments.

        The request is not modified, so repeated calls return the same list.

        Returns:
            Base fragments followed by the search parameters
        """
        fragments = self.base_fragments() + self._parameter_fragments()
        logger.debug(f"Built {len(fragments)} query fragments")
        return fragments

    def _parameter_fragments(self) -> list[str]:
        query = MATCH_ALL_QUERY if is_blank(self.query) else self.query
        fragments = [f"q={encode(query)}"]

        if not is_blank(self.lang):
            fragments.append(f"lang={self.lang}")
        if self.rows is not None:
            fragments.append(f"rows={to_int(self.rows)}")
        if self.start is not None:
            fragments.append(f"start={to_int(self.start)}")
        if self.operator is not None:
            fragments.append(f"operator={self.operator}")

        fragments.extend(f"sort={encode(sort)}" for sort in self.sorts if not is_blank(sort))
        fragments.extend(f"fq={encode(f)}" for f in self.filters if not is_blank(f))
        fragments.extend(f"fqn={encode(f)}" for f in self.negative_filters if not is_blank(f))
        fragments.extend(f"rf={field}" for field in self.fields if not is_blank(field))

        for field, options in self.facets.items():
            fragments.append(options.fragment(field))

        for key, value in self.join_parameters.items():
            fragments.append(f"{key}={encode(value)}")

        for position, filters in self.join_filters.items():
            fragments.extend(f"jq{position}.fq={encode(f)}" for f in filters if not is_blank(f))
        for position, filters in self.join_negative_filters.items():
            fragments.extend(f"jq{position}.fqn={encode(f)}" for f in filters if not is_blank(f))

        fragments.extend(self.collapse.fragments())
        return fragments

    def to_query_string(self) -> str:
        """Fragments joined with ``&``."""
        return "&".join(self.build_query_fragments())

    def url(self, endpoint: OssEndpoint | None = None) -> str:
        """Full select URL for this request.

        Args:
            endpoint: Endpoint to send to; defaults to the request's own

        Raises:
            ValueError: If no endpoint is available
        """
        target = endpoint or self.endpoint
        if target is None:
            raise ValueError("SearchRequest has no endpoint; pass one to url()")
        return target.select_url(target.base_fragments() + self._parameter_fragments())
