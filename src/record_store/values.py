"""Value kinds for loosely-typed row cells."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from record_store.errors import ValueTypeMismatchError

# A row maps column names to JSON-compatible values
Row = dict[str, Any]


class ValueKind(Enum):
    """JSON-compatible kinds a row value can take."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_orderable(self) -> bool:
        """Return whether values of this kind can be sorted against each other."""
        return self in (ValueKind.NUMBER, ValueKind.STRING)


def kind_of(value: Any, column: str | None = None) -> ValueKind:
    """Classify a Python value into its ValueKind.

    Args:
        value: The cell value.
        column: Column the value came from, used in error messages.

    Returns:
        The value's kind.

    Raises:
        ValueTypeMismatchError: If the value is not JSON-compatible.
    """
    if value is None:
        return ValueKind.NULL

    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return ValueKind.BOOLEAN

    if isinstance(value, (int, float)):
        return ValueKind.NUMBER

    if isinstance(value, str):
        return ValueKind.STRING

    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY

    if isinstance(value, Mapping):
        return ValueKind.OBJECT

    raise ValueTypeMismatchError(
        f"Unsupported value type: {type(value).__name__}", column=column
    )


def is_number(value: Any) -> bool:
    """Return whether value is numeric (booleans excluded)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def values_equal(left: Any, right: Any) -> bool:
    """Compare two values for type-sensitive equality.

    Values are equal only when they share a ValueKind and compare equal;
    arrays and objects are compared element-wise by the same rule, so
    ``True`` never equals ``1`` even when nested.
    """
    kind = kind_of(left)
    if kind is not kind_of(right):
        return False

    if kind is ValueKind.ARRAY:
        if len(left) != len(right):
            return False
        return all(values_equal(a, b) for a, b in zip(left, right))

    if kind is ValueKind.OBJECT:
        if left.keys() != right.keys():
            return False
        return all(values_equal(left[key], right[key]) for key in left)

    return left == right
