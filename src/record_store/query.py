"""Search and sort over row sequences.

These helpers work on rows the caller already holds (usually a snapshot
returned by the store) and take no lock of their own.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from record_store.errors import ColumnNotFoundError, ValueTypeMismatchError
from record_store.values import Row, ValueKind, kind_of, values_equal


def search_records(rows: Iterable[Row], column: str, value: Any) -> list[Row]:
    """Return the rows whose column equals value.

    Args:
        rows: Rows to scan, in order.
        column: Column to compare.
        value: Target value; compared with type-sensitive equality.

    Returns:
        A new list of matching rows in scan order.

    Raises:
        ColumnNotFoundError: If any scanned row lacks the column. The scan
            stops at that row rather than skipping it.
    """
    result: list[Row] = []
    for row in rows:
        if column not in row:
            raise ColumnNotFoundError(column)
        if values_equal(row[column], value):
            result.append(row)
    return result


def _check_sortable(rows: list[Row], column: str) -> None:
    """Check that every row holds one orderable kind in column."""
    expected: ValueKind | None = None
    for row in rows:
        if column not in row:
            raise ColumnNotFoundError(column)
        kind = kind_of(row[column], column)
        if not kind.is_orderable:
            raise ValueTypeMismatchError(
                f"Cannot sort by column {column!r}: {kind.value} values are not orderable",
                column=column,
            )
        if expected is None:
            expected = kind
        elif kind is not expected:
            raise ValueTypeMismatchError(
                f"Cannot sort by column {column!r}: mixed {expected.value} and {kind.value} values",
                column=column,
            )


def sort_rows(rows: list[Row], column: str, descending: bool = False) -> None:
    """Sort rows in place by the value of column.

    All rows are validated before the list is touched, so a failed call
    leaves the order unchanged. Equal keys keep no guaranteed order.

    Raises:
        ColumnNotFoundError: If a row lacks the column.
        ValueTypeMismatchError: If the column's values are not all numbers
            or all strings.
    """
    _check_sortable(rows, column)
    rows.sort(key=lambda row: row[column], reverse=descending)
