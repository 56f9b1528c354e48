"""Build a RecordStore from a JSON file or a decoded mapping."""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from os import PathLike
from typing import TYPE_CHECKING, Any

from record_store.config import StoreConfig
from record_store.errors import (
    DecodeFailureError,
    InvalidFormatError,
    StoreIOError,
    ValueTypeMismatchError,
)
from record_store.values import Row, ValueKind, kind_of

if TYPE_CHECKING:
    from record_store.store import RecordStore

logger = logging.getLogger(__name__)


def has_extension(path: str | PathLike[str], extension: str = "json") -> bool:
    """Return whether the last dot-delimited segment of path is extension."""
    return str(path).split(".")[-1] == extension


def _validate_value(value: Any, column: str) -> None:
    """Check that value and everything nested in it is JSON-compatible."""
    kind = kind_of(value, column)
    if kind is ValueKind.ARRAY:
        for item in value:
            _validate_value(item, column)
    elif kind is ValueKind.OBJECT:
        for key, item in value.items():
            if not isinstance(key, str):
                raise ValueTypeMismatchError(
                    f"object keys in column {column!r} must be strings, got {type(key).__name__}",
                    column=column,
                )
            _validate_value(item, column)


def _validate_tables(data: Any) -> dict[str, list[Row]]:
    """Check that data is a mapping of table name to a list of row objects.

    Raises:
        TypeError: Describing the first offending table or row.
        ValueTypeMismatchError: If a cell holds a value JSON cannot express.
    """
    if not isinstance(data, Mapping):
        raise TypeError(f"expected an object of tables, got {type(data).__name__}")

    tables: dict[str, list[Row]] = {}
    for name, rows in data.items():
        if not isinstance(name, str):
            raise TypeError(f"table name must be a string, got {type(name).__name__}")
        if not isinstance(rows, list):
            raise TypeError(f"table {name!r} must be an array of rows, got {type(rows).__name__}")
        for index, row in enumerate(rows):
            if not isinstance(row, Mapping):
                raise TypeError(
                    f"row {index} of table {name!r} must be an object, got {type(row).__name__}"
                )
            for column, value in row.items():
                if not isinstance(column, str):
                    raise TypeError(
                        f"column names in row {index} of table {name!r} must be strings"
                    )
                _validate_value(value, column)
        tables[name] = [dict(row) for row in rows]
    return tables


def load_mapping(
    data: Any,
    config: StoreConfig | None = None,
    source: str = "<mapping>",
) -> RecordStore:
    """Create a store from an already-decoded table mapping.

    The mapping is deep-copied, so later changes to data do not reach the store.

    Args:
        data: Object of the form ``{table_name: [row, ...]}``.
        config: Store settings; defaults are used when omitted.
        source: Label used in error messages.

    Returns:
        A populated RecordStore.

    Raises:
        DecodeFailureError: If data does not have the expected shape, holds
            values JSON cannot express, or is nested too deeply to copy.
    """
    from record_store.store import RecordStore

    try:
        tables = copy.deepcopy(_validate_tables(data))
    except (TypeError, ValueTypeMismatchError, RecursionError) as exc:
        raise DecodeFailureError(source, exc) from exc

    store = RecordStore(tables, config)
    logger.debug(
        "Loaded %d tables (%d rows) from %s",
        len(tables),
        sum(len(rows) for rows in tables.values()),
        source,
    )
    return store


def load_store(path: str | PathLike[str], config: StoreConfig | None = None) -> RecordStore:
    """Read a JSON file into a new store.

    The extension is checked before the filesystem is touched. The file is
    read once and never written back.

    Args:
        path: Path to a ``.json`` file.
        config: Store settings; defaults are used when omitted.

    Returns:
        A populated RecordStore.

    Raises:
        InvalidFormatError: If the path does not end in the JSON extension.
        StoreIOError: If the file cannot be opened or read.
        DecodeFailureError: If the content is not valid JSON of the expected shape.
    """
    config = config or StoreConfig()
    source = str(path)
    if not has_extension(source, config.extension):
        raise InvalidFormatError(source, config.extension)

    try:
        # ValueError here means an unusable path, e.g. an embedded NUL
        f = open(path, encoding="utf-8")
    except (OSError, ValueError) as exc:
        raise StoreIOError(source, exc) from exc

    with f:
        try:
            data = json.load(f)
        except OSError as exc:
            raise StoreIOError(source, exc) from exc
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError, UnicodeDecodeError, or nesting too deep to parse
            raise DecodeFailureError(source, exc) from exc

    return load_mapping(data, config, source=source)
