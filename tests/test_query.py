"""Tests for searching and sorting row sequences."""

import pytest

from record_store import (
    ColumnNotFoundError,
    ValueTypeMismatchError,
    search_records,
    sort_rows,
)


def _ids(rows):
    return [row["id"] for row in rows]


class TestSearchRecords:
    """Tests for search_records."""

    def test_matches_in_scan_order(self):
        """Test that matching rows come back in their original order."""
        rows = [{"id": 1, "x": 5}, {"id": 2, "x": 7}, {"id": 3, "x": 5}]

        result = search_records(rows, "x", 5)

        assert _ids(result) == [1, 3]

    def test_result_is_independent_list(self):
        """Test that the result does not share the input list."""
        rows = [{"id": 1, "x": 5}, {"id": 2, "x": 7}]

        result = search_records(rows, "x", 5)
        result.append({"id": 99, "x": 5})
        result.clear()

        assert _ids(rows) == [1, 2]

    def test_missing_column_aborts(self):
        """Test that one row without the column fails the whole search."""
        rows = [{"id": 1, "x": 5}, {"id": 2}, {"id": 3, "x": 5}]

        with pytest.raises(ColumnNotFoundError) as exc_info:
            search_records(rows, "x", 5)
        assert exc_info.value.column == "x"

    def test_type_sensitive(self):
        """Test that booleans and numbers never match each other."""
        rows = [{"id": 1, "x": 1}, {"id": 2, "x": True}, {"id": 3, "x": 1.0}]

        assert _ids(search_records(rows, "x", 1)) == [1, 3]
        assert _ids(search_records(rows, "x", True)) == [2]

    def test_nested_value(self):
        """Test searching on a structured value."""
        rows = [{"id": 1, "tags": ["a", "b"]}, {"id": 2, "tags": ["a"]}]

        assert _ids(search_records(rows, "tags", ["a"])) == [2]

    def test_null_value(self):
        """Test searching for null."""
        rows = [{"id": 1, "x": None}, {"id": 2, "x": 0}]

        assert _ids(search_records(rows, "x", None)) == [1]

    def test_no_match(self):
        """Test that no match yields an empty list."""
        assert search_records([{"id": 1, "x": 1}], "x", 2) == []

    def test_empty_input(self):
        """Test that an empty input yields an empty list."""
        assert search_records([], "x", 2) == []


class TestSortRows:
    """Tests for sort_rows."""

    def test_ascending(self):
        """Test sorting numbers ascending."""
        rows = [{"id": 1, "x": 3}, {"id": 2, "x": 1}, {"id": 3, "x": 2}]

        sort_rows(rows, "x")

        assert _ids(rows) == [2, 3, 1]

    def test_descending(self):
        """Test sorting numbers descending."""
        rows = [{"id": 1, "x": 3}, {"id": 2, "x": 1}, {"id": 3, "x": 2}]

        sort_rows(rows, "x", descending=True)

        assert _ids(rows) == [1, 3, 2]

    def test_strings(self):
        """Test sorting strings."""
        rows = [{"id": 1, "name": "cy"}, {"id": 2, "name": "ann"}, {"id": 3, "name": "bob"}]

        sort_rows(rows, "name")

        assert _ids(rows) == [2, 3, 1]

    def test_mixed_int_and_float(self):
        """Test that ints and floats sort together as numbers."""
        rows = [{"id": 1, "x": 2.5}, {"id": 2, "x": 1}, {"id": 3, "x": 3}]

        sort_rows(rows, "x")

        assert _ids(rows) == [2, 1, 3]

    def test_returns_none(self):
        """Test that sorting happens in place."""
        rows = [{"id": 1, "x": 2}, {"id": 2, "x": 1}]

        assert sort_rows(rows, "x") is None

    def test_missing_column_leaves_order(self):
        """Test that a missing column fails without reordering."""
        rows = [{"id": 1, "x": 3}, {"id": 2}, {"id": 3, "x": 1}]

        with pytest.raises(ColumnNotFoundError):
            sort_rows(rows, "x")
        assert _ids(rows) == [1, 2, 3]

    def test_mixed_kinds_leave_order(self):
        """Test that numbers and strings in one column fail without reordering."""
        rows = [{"id": 1, "x": 3}, {"id": 2, "x": "a"}, {"id": 3, "x": 1}]

        with pytest.raises(ValueTypeMismatchError) as exc_info:
            sort_rows(rows, "x")
        assert exc_info.value.column == "x"
        assert _ids(rows) == [1, 2, 3]

    @pytest.mark.parametrize("value", [True, None, [1], {"a": 1}])
    def test_unorderable_kind(self, value):
        """Test that booleans, nulls and structures cannot be sorted."""
        rows = [{"id": 1, "x": value}, {"id": 2, "x": value}]

        with pytest.raises(ValueTypeMismatchError):
            sort_rows(rows, "x")

    def test_empty(self):
        """Test that sorting an empty list is a no-op."""
        rows = []

        sort_rows(rows, "x")

        assert rows == []
