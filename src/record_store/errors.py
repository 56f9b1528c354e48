"""Exceptions raised by the record store.

Every error carries a stable ``code`` so that transport layers (HTTP, CLI)
can map outcomes onto their own status codes without string matching.
"""

from __future__ import annotations

from typing import Any


class RecordStoreError(Exception):
    """Base exception for all record store failures."""

    code = "RECORD_STORE_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidFormatError(RecordStoreError):
    """Raised when a source path does not name a JSON file."""

    code = "INVALID_FORMAT"

    def __init__(self, path: str, extension: str = "json") -> None:
        super().__init__(
            f"the provided file is not a {extension} file: {path}",
            details={"path": path, "extension": extension},
        )
        self.path = path


class StoreIOError(RecordStoreError):
    """Raised when the source file cannot be opened or read."""

    code = "IO_FAILURE"

    def __init__(self, path: str, cause: BaseException) -> None:
        super().__init__(
            f"could not read database: '{cause}'",
            details={"path": path},
        )
        self.path = path
        self.cause = cause


class DecodeFailureError(RecordStoreError):
    """Raised when content does not decode into a table-to-rows mapping."""

    code = "DECODE_FAILURE"

    def __init__(self, source: str, cause: BaseException) -> None:
        super().__init__(
            f"could not decode json: '{cause}'",
            details={"source": source},
        )
        self.source = source
        self.cause = cause


class TableNotFoundError(RecordStoreError):
    code = "TABLE_NOT_FOUND"

    def __init__(self, table: str) -> None:
        super().__init__(f"table does not exist: {table!r}", details={"table": table})
        self.table = table


class ColumnNotFoundError(RecordStoreError):
    """Raised when a scanned row lacks the column being compared."""

    code = "COLUMN_NOT_FOUND"

    def __init__(self, column: str, table: str | None = None) -> None:
        where = f" in table {table!r}" if table is not None else ""
        super().__init__(
            f"column does not exist{where}: {column!r}",
            details={"column": column, "table": table},
        )
        self.column = column
        self.table = table


class RecordNotFoundError(RecordStoreError):
    code = "RECORD_NOT_FOUND"

    def __init__(self, table: str, record_id: Any) -> None:
        super().__init__(
            f"record does not exist: {table!r} id={record_id!r}",
            details={"table": table, "id": record_id},
        )
        self.table = table
        self.record_id = record_id


class RecordAlreadyExistsError(RecordStoreError):
    """Reserved for uniqueness enforcement; no current operation raises it."""

    code = "RECORD_ALREADY_EXISTS"

    def __init__(self, table: str, record_id: Any) -> None:
        super().__init__(
            f"record already exists: {table!r} id={record_id!r}",
            details={"table": table, "id": record_id},
        )
        self.table = table
        self.record_id = record_id


class ValueTypeMismatchError(RecordStoreError):
    """Raised when a value has an unsupported or unexpected kind."""

    code = "VALUE_TYPE_MISMATCH"

    def __init__(self, message: str, column: str | None = None) -> None:
        super().__init__(message, details={"column": column})
        self.column = column


class InvalidRowError(RecordStoreError):
    """Raised when a row body is not a mapping of column names to values."""

    code = "INVALID_ROW"

    def __init__(self, row: Any) -> None:
        super().__init__(
            f"row must be a mapping, got {type(row).__name__}",
            details={"type": type(row).__name__},
        )
