"""Tests for facet and collapse options and value encoding."""

import pytest

from oss_client.search.encoding import encode, to_int
from oss_client.search.options import CollapseOptions, FacetOptions


class TestFacetOptions:
    """Test facet fragment rendering."""

    def test_plain_facet(self):
        assert FacetOptions().fragment("lang") == "facet=lang"

    def test_multi_collapse_with_minimum(self):
        options = FacetOptions(min=2, multi_collapse=True)

        assert options.fragment("tags") == "facet.multi.collapse=tags(2)"

    def test_field_is_not_encoded(self):
        assert FacetOptions().fragment("a b") == "facet=a b"


class TestCollapseOptions:
    """Test collapse fragment rendering."""

    def test_unset_collapse_renders_nothing(self):
        assert CollapseOptions().fragments() == []

    def test_max_is_coerced(self):
        assert CollapseOptions(max="7").fragments() == ["collapse.max=7"]

    def test_zero_string_field_and_type_are_skipped(self):
        assert CollapseOptions(field="0", type="0", mode="0").fragments() == ["collapse.mode=0"]

    def test_values_are_not_encoded(self):
        options = CollapseOptions(field="site:host", type="full", mode="cluster")

        assert options.fragments() == [
            "collapse.field=site:host",
            "collapse.type=full",
            "collapse.mode=cluster",
        ]


class TestEncoding:
    """Test URL encoding and loose integer coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("*:*", "*%3A*"),
            ("café", "caf%C3%A9"),
            ("a b", "a+b"),
            ("a+b&c=d", "a%2Bb%26c%3Dd"),
            ("-date", "-date"),
            (42, "42"),
        ],
    )
    def test_encode(self, value, expected):
        assert encode(value) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (5, 5),
            (-3, -3),
            (3.7, 3),
            (-3.7, -3),
            (True, 1),
            (False, 0),
            ("12", 12),
            ("  -8 items", -8),
            ("+4", 4),
            ("12abc", 12),
            ("1e3", 1000),
            ("2.5e1x", 25),
            ("-1E2", -100),
            ("2.9", 2),
            (".5", 0),
            ("7.", 7),
            ("abc", 0),
            ("", 0),
            (b"9", 9),
            (float("nan"), 0),
            ([1, 2], 0),
        ],
    )
    def test_to_int(self, value, expected):
        assert to_int(value) == expected
