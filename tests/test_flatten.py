"""Unit tests for dotted-key flattening."""

from __future__ import annotations

from nestconf.core.flatten import flatten, iter_flat


class TestIterFlat:
    """Test suite for iter_flat function."""

    def test_empty_dict(self):
        """Test an empty root yields no keys."""
        assert list(iter_flat({})) == []

    def test_nested_dict(self):
        """Test nested mappings are joined into dotted keys."""
        data = {"database": {"host": "localhost", "port": 5432}, "debug": True}
        assert sorted(iter_flat(data)) == [
            ("database.host", "localhost"),
            ("database.port", 5432),
            ("debug", True),
        ]

    def test_with_list_values(self):
        """Test lists are leaves and are not indexed into."""
        data = {"items": ["a", "b"], "nested": {"list": [1, 2]}}
        assert sorted(iter_flat(data)) == [
            ("items", ["a", "b"]),
            ("nested.list", [1, 2]),
        ]

    def test_empty_mapping_is_leaf(self):
        """Test an empty nested mapping is kept as a leaf, not dropped."""
        assert list(iter_flat({"a": {}})) == [("a", {})]

    def test_with_parent_prefix(self):
        """Test the parent prefix is prepended to every key."""
        assert list(iter_flat({"key": "value"}, parent="prefix")) == [("prefix.key", "value")]

    def test_depth_limit_zero(self):
        """Test depth 0 keeps nested mappings whole under their top-level key."""
        data = {"key": "value", "nested": {"inner": "value"}}
        assert sorted(iter_flat(data, depth=0)) == [
            ("key", "value"),
            ("nested", {"inner": "value"}),
        ]

    def test_depth_limit_one(self):
        """Test depth 1 descends one mapping level before stopping."""
        data = {"a": {"b": {"c": "value"}}}
        assert list(iter_flat(data, depth=1)) == [("a.b", {"c": "value"})]

    def test_depth_limit_negative(self):
        """Test a negative depth yields nothing."""
        assert list(iter_flat({"a": 1}, depth=-1)) == []

    def test_flatten_returns_dict(self):
        """Test flatten collects the pairs into a dict."""
        assert flatten({"a": {"b": 1}}) == {"a.b": 1}

    def test_dotted_key_joined_verbatim(self):
        """Test a key containing a dot is kept as written."""
        assert flatten({"a.b": 1, "c": {"d.e": 2}}) == {"a.b": 1, "c.d.e": 2}

    def test_non_string_key_is_stringified(self):
        """Test non-string keys are converted with str()."""
        assert flatten({1: {"x": True}}) == {"1.x": True}
