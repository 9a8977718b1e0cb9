"""Property-based tests for search request assembly.

Properties tested:
- Assembly is idempotent and order-stable
- Returned fields are unique and keep first-seen order
- Encoded values decode back to what was fed in
- Sort clauses are emitted verbatim and in order
"""

from urllib.parse import unquote_plus

from hypothesis import given, settings
from hypothesis import strategies as st

from oss_client.search import SearchRequest

field_names = st.text(
    min_size=1,
    max_size=15,
    alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd")),
).filter(lambda s: s != "0")
expressions = st.text(min_size=1, max_size=50).filter(lambda s: s != "0")


def _split(fragment: str) -> tuple[str, str]:
    key, _, value = fragment.partition("=")
    return key, value


@given(
    query=st.one_of(st.none(), st.text(max_size=30)),
    rows=st.one_of(st.none(), st.integers(min_value=0, max_value=1000)),
    filters=st.lists(expressions, max_size=5),
    fields=st.lists(field_names, max_size=5),
    joins=st.dictionaries(st.integers(min_value=0, max_value=5), expressions, max_size=3),
)
@settings(max_examples=100, deadline=None)
def test_assembly_is_idempotent(query, rows, filters, fields, joins):
    request = SearchRequest(rows=rows).set_query(query).add_fields(fields)
    for expression in filters:
        request.add_filter(expression)
    for position, value in joins.items():
        request.set_join(position, value).add_join_filter(position, value)

    assert request.build_query_fragments() == request.build_query_fragments()
    assert request.fields == list(dict.fromkeys(fields))


@given(fields=st.lists(field_names, max_size=20))
@settings(max_examples=100, deadline=None)
def test_fields_unique_in_first_seen_order(fields):
    fragments = SearchRequest().add_fields(fields).build_query_fragments()

    returned = [value for key, value in map(_split, fragments) if key == "rf"]
    assert returned == list(dict.fromkeys(fields))


@given(
    filters=st.lists(expressions, max_size=5),
    negative_filters=st.lists(expressions, max_size=5),
    join_filters=st.lists(expressions, max_size=5),
)
@settings(max_examples=100, deadline=None)
def test_encoded_values_round_trip(filters, negative_filters, join_filters):
    request = SearchRequest()
    for expression in filters:
        request.add_filter(expression)
    for expression in negative_filters:
        request.add_negative_filter(expression)
    for expression in join_filters:
        request.add_join_filter(3, expression)

    pairs = [_split(fragment) for fragment in request.to_query_string().split("&")]
    decoded = [(key, unquote_plus(value)) for key, value in pairs]

    assert decoded[0] == ("q", "*:*")
    assert [v for k, v in decoded if k == "fq"] == filters
    assert [v for k, v in decoded if k == "fqn"] == negative_filters
    assert [v for k, v in decoded if k == "jq3.fq"] == join_filters


@given(query=expressions)
@settings(max_examples=100, deadline=None)
def test_query_round_trip(query):
    fragments = SearchRequest().set_query(query).build_query_fragments()

    key, value = _split(fragments[0])
    assert key == "q"
    assert "&" not in value
    assert unquote_plus(value) == query


@given(sorts=st.lists(st.sampled_from(["title", "-date", "score", "-score"]), max_size=10))
@settings(max_examples=50, deadline=None)
def test_sorts_emitted_in_order_without_dedup(sorts):
    request = SearchRequest()
    request.add_sort(sorts).add_sort(sorts)

    emitted = [value for key, value in map(_split, request.build_query_fragments()) if key == "sort"]
    assert emitted == sorts + sorts
