"""Record Store - An in-memory, JSON-backed table store with id-based CRUD."""

import logging

from record_store.config import IdPolicy, StoreConfig
from record_store.errors import (
    ColumnNotFoundError,
    DecodeFailureError,
    InvalidFormatError,
    InvalidRowError,
    RecordAlreadyExistsError,
    RecordNotFoundError,
    RecordStoreError,
    StoreIOError,
    TableNotFoundError,
    ValueTypeMismatchError,
)
from record_store.loader import load_mapping, load_store
from record_store.query import search_records, sort_rows
from record_store.store import RecordStore
from record_store.values import Row, ValueKind, kind_of, values_equal

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Main API
    "RecordStore",
    "load_store",
    "load_mapping",
    "search_records",
    "sort_rows",
    # Configuration
    "StoreConfig",
    "IdPolicy",
    # Values
    "Row",
    "ValueKind",
    "kind_of",
    "values_equal",
    # Errors
    "RecordStoreError",
    "InvalidFormatError",
    "StoreIOError",
    "DecodeFailureError",
    "TableNotFoundError",
    "ColumnNotFoundError",
    "RecordNotFoundError",
    "RecordAlreadyExistsError",
    "ValueTypeMismatchError",
    "InvalidRowError",
]

__version__ = "0.1.0"
