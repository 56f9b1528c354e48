"""In-memory record store guarded by a single lock."""

from __future__ import annotations

import copy
import logging
import threading
from collections.abc import Mapping
from os import PathLike
from typing import Any

from record_store.config import IdPolicy, StoreConfig
from record_store.errors import (
    ColumnNotFoundError,
    InvalidRowError,
    RecordNotFoundError,
    RecordStoreError,
    TableNotFoundError,
    ValueTypeMismatchError,
)
from record_store.query import search_records, sort_rows
from record_store.values import Row, is_number, values_equal

logger = logging.getLogger(__name__)


class RecordStore:
    """Tables of loosely-typed rows keyed by a numeric id.

    Table membership is fixed when the store is built; only rows change.
    Every operation that reads or writes rows holds the store lock for its
    whole body and hands back deep copies, so callers never observe a
    half-applied mutation and never alias stored rows.
    """

    def __init__(
        self,
        tables: dict[str, list[Row]] | None = None,
        config: StoreConfig | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            tables: Mapping of table name to rows. The store takes ownership
                of it; use from_mapping to build from data you keep using.
            config: Store settings; defaults are used when omitted.
        """
        self.config = config or StoreConfig()
        self._tables: dict[str, list[Row]] = tables if tables is not None else {}
        # Re-entrant: add_row reads its row back while holding the lock
        self._lock = threading.RLock()

    @classmethod
    def load(cls, path: str | PathLike[str], config: StoreConfig | None = None) -> RecordStore:
        """Load a store from a JSON file. See loader.load_store."""
        from record_store.loader import load_store

        return load_store(path, config)

    @classmethod
    def from_mapping(cls, data: Any, config: StoreConfig | None = None) -> RecordStore:
        """Build a store from a decoded mapping. See loader.load_mapping."""
        from record_store.loader import load_mapping

        return load_mapping(data, config)

    def table_exists(self, name: str) -> bool:
        return name in self._tables

    def table_names(self) -> list[str]:
        """Return table names in load order."""
        return list(self._tables)

    def __contains__(self, name: object) -> bool:
        return name in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def _rows(self, name: str) -> list[Row]:
        """Return the live row list for a table."""
        try:
            return self._tables[name]
        except KeyError:
            raise TableNotFoundError(name) from None

    def _index_of(self, name: str, rows: list[Row], record_id: Any) -> int:
        """Find the position of the first row whose id equals record_id.

        A row without the id column ends the scan with an error even when
        the wanted row comes later.
        """
        id_column = self.config.id_column
        for index, row in enumerate(rows):
            if id_column not in row:
                raise ColumnNotFoundError(id_column, name)
            if values_equal(row[id_column], record_id):
                return index
        raise RecordNotFoundError(name, record_id)

    def _numeric_id(self, name: str, row: Row) -> int | float:
        id_column = self.config.id_column
        if id_column not in row:
            raise ColumnNotFoundError(id_column, name)
        value = row[id_column]
        if not is_number(value):
            raise ValueTypeMismatchError(
                f"id column {id_column!r} of table {name!r} holds "
                f"{type(value).__name__}, expected a number",
                column=id_column,
            )
        return value

    def _next_id(self, name: str, rows: list[Row]) -> int | float:
        """Compute the id for a row about to be appended to rows."""
        if not rows:
            return self.config.first_id
        if self.config.id_policy is IdPolicy.MAX_PLUS_ONE:
            return max(self._numeric_id(name, row) for row in rows) + 1
        return self._numeric_id(name, rows[-1]) + 1

    def get_table(self, name: str) -> list[Row]:
        """Return a snapshot of every row in a table.

        Raises:
            TableNotFoundError: If the table does not exist.
        """
        with self._lock:
            return copy.deepcopy(self._rows(name))

    def row_count(self, name: str) -> int:
        with self._lock:
            return len(self._rows(name))

    def get_row_by_id(self, name: str, record_id: Any) -> Row:
        """Return a copy of the first row whose id equals record_id.

        Raises:
            TableNotFoundError: If the table does not exist.
            ColumnNotFoundError: If a row before the match lacks the id column.
            RecordNotFoundError: If no row matches.
        """
        rows = self._rows(name)
        with self._lock:
            index = self._index_of(name, rows, record_id)
            return copy.deepcopy(rows[index])

    def add_row(self, name: str, body: Mapping[str, Any]) -> Row:
        """Append a row and assign it the next id.

        The id follows config.id_policy: by default the id of the previous
        last row plus one, so ids freed by deleting the last row are reused.
        An empty table starts at config.first_id. Any id in body is
        overwritten.

        Args:
            name: Target table.
            body: Column values for the new row; copied into the store.

        Returns:
            The inserted row, read back through get_row_by_id.

        Raises:
            TableNotFoundError: If the table does not exist.
            InvalidRowError: If body is not a mapping.
            ColumnNotFoundError: If a row needed for id assignment or for the
                read-back lacks the id column.
            ValueTypeMismatchError: If an existing id is not a number.
        """
        rows = self._rows(name)
        if not isinstance(body, Mapping):
            raise InvalidRowError(body)

        with self._lock:
            new_id = self._next_id(name, rows)
            row = copy.deepcopy(dict(body))
            row[self.config.id_column] = new_id
            rows.append(row)
            try:
                inserted = self.get_row_by_id(name, new_id)
            except RecordStoreError:
                rows.pop()
                raise
            logger.debug("Inserted row %s=%r into %s", self.config.id_column, new_id, name)
            return inserted

    def edit_row_by_id(self, name: str, record_id: Any, body: Mapping[str, Any]) -> Row:
        """Replace the whole content of the row whose id equals record_id.

        Columns missing from body are dropped; the id is not forced, so
        body should carry it.

        Raises:
            TableNotFoundError: If the table does not exist.
            InvalidRowError: If body is not a mapping.
            ColumnNotFoundError: If a row before the match lacks the id column.
            RecordNotFoundError: If no row matches.
        """
        rows = self._rows(name)
        if not isinstance(body, Mapping):
            raise InvalidRowError(body)

        with self._lock:
            index = self._index_of(name, rows, record_id)
            rows[index] = copy.deepcopy(dict(body))
            logger.debug("Replaced row %s=%r in %s", self.config.id_column, record_id, name)
            return copy.deepcopy(rows[index])

    def delete_row_by_id(self, name: str, record_id: Any) -> None:
        """Remove the row whose id equals record_id, keeping the others in order.

        Raises:
            TableNotFoundError: If the table does not exist.
            ColumnNotFoundError: If a row before the match lacks the id column.
            RecordNotFoundError: If no row matches.
        """
        rows = self._rows(name)
        with self._lock:
            index = self._index_of(name, rows, record_id)
            del rows[index]
            logger.debug("Deleted row %s=%r from %s", self.config.id_column, record_id, name)

    def find_rows(self, name: str, column: str, value: Any) -> list[Row]:
        """Search a snapshot of a table for rows whose column equals value."""
        return search_records(self.get_table(name), column, value)

    def list_rows(
        self,
        name: str,
        sort_by: str | None = None,
        descending: bool = False,
    ) -> list[Row]:
        """Return a snapshot of a table, optionally sorted by a column."""
        rows = self.get_table(name)
        if sort_by is not None:
            sort_rows(rows, sort_by, descending)
        return rows

    def __repr__(self) -> str:
        return f"RecordStore(tables={self.table_names()!r})"
