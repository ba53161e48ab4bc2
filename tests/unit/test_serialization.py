"""tests/unit/test_serialization.py"""

import pytest

from urikit.utils.serialization import build_query, parse_query


class TestBuildQuery:
    """Tests for build_query."""

    def test_simple(self):
        """Test plain key/value pairs."""
        assert build_query({"a": "1", "b": "2"}) == "a=1&b=2"

    def test_keys_are_sorted(self):
        """Test output order does not depend on insertion order."""
        assert build_query({"c": "3", "a": "1"}) == "a=1&c=3"

    def test_strict_encoding(self):
        """Test reserved characters are escaped in keys and values."""
        assert build_query({"a": "1[]", "q": "x y!"}) == "a=1%5B%5D&q=x%20y%21"
        assert build_query({"a&b": "c=d"}) == "a%26b=c%3Dd"

    def test_list_values(self):
        """Test sequences use the key[] convention."""
        assert build_query({"ids": ["1", "2"]}) == "ids%5B%5D=1&ids%5B%5D=2"
        assert build_query({"ids": ("x",)}) == "ids%5B%5D=x"

    def test_empty_list_is_dropped(self):
        """Test empty sequences produce nothing."""
        assert build_query({"a": [], "b": "1"}) == "b=1"

    def test_none_value(self):
        """Test None produces a bare key."""
        assert build_query({"flag": None, "a": "1"}) == "a=1&flag"

    def test_non_string_values(self):
        """Test scalars are converted with str()."""
        assert build_query({"n": 3, "f": 1.5}) == "f=1.5&n=3"

    def test_empty(self):
        """Test an empty mapping gives an empty string."""
        assert build_query({}) == ""


class TestParseQuery:
    """Tests for parse_query."""

    def test_simple(self):
        """Test plain pairs."""
        assert parse_query("a=1&b=2") == {"a": "1", "b": "2"}

    def test_leading_question_mark(self):
        """Test the ? prefix is ignored."""
        assert parse_query("?a=1") == {"a": "1"}

    def test_decoding(self):
        """Test percent escapes and + are decoded."""
        assert parse_query("a=1%5B%5D&q=x+y%20z") == {"a": "1[]", "q": "x y z"}

    def test_array_keys(self):
        """Test key[] entries collect into a list."""
        assert parse_query("ids%5B%5D=1&ids%5B%5D=2") == {"ids": ["1", "2"]}
        assert parse_query("ids[]=1") == {"ids": ["1"]}

    def test_repeated_keys(self):
        """Test a repeated plain key becomes a list."""
        assert parse_query("a=1&a=2&a=3") == {"a": ["1", "2", "3"]}

    def test_key_without_value(self):
        """Test bare keys map to None and empty values to ''."""
        assert parse_query("flag&empty=") == {"flag": None, "empty": ""}

    def test_value_with_equals(self):
        """Test only the first = separates key and value."""
        assert parse_query("a=b=c") == {"a": "b=c"}

    @pytest.mark.parametrize("query", ["", "?", "&&", "&"])
    def test_empty(self, query):
        """Test empty input gives an empty dict."""
        assert parse_query(query) == {}


@pytest.mark.parametrize(
    "params",
    [
        {"a": "1[]", "c": "3"},
        {"ids": ["1", "2", "3"], "q": "hello world"},
        {"flag": None, "name": "ümlaut & co"},
    ],
)
def test_round_trip(params):
    """Test parse_query inverts build_query."""
    assert parse_query(build_query(params)) == params
