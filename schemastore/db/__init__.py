# -*- coding: utf-8 -*-
"""SQLite schema store and its value types."""
from __future__ import annotations

from .errors import BindTypeError, SchemaError, SchemaStoreError, UnknownColumnError, UnknownTableError
from .schema import BindType, ColumnSpec, Condition, encode, parse_descriptor, parse_tables
from .store import SchemaStore

__all__ = [
    "BindType",
    "BindTypeError",
    "ColumnSpec",
    "Condition",
    "SchemaError",
    "SchemaStore",
    "SchemaStoreError",
    "UnknownColumnError",
    "UnknownTableError",
    "encode",
    "parse_descriptor",
    "parse_tables",
]
