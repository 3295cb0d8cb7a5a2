"""SchemaStore exception hierarchy.

Only failures detected before a statement reaches SQLite live here.
Driver errors (``sqlite3.OperationalError``, ``sqlite3.IntegrityError``, ...)
propagate unchanged.
"""

from __future__ import annotations


class SchemaStoreError(Exception):
    """Base exception for all SchemaStore errors."""


class SchemaError(SchemaStoreError, ValueError):
    """Raised when a schema descriptor is malformed."""


class UnknownTableError(SchemaStoreError, KeyError):
    """Raised when an operation names a table the schema does not declare."""


class UnknownColumnError(SchemaStoreError, KeyError):
    """Raised when an operation names a column the table does not declare."""


class BindTypeError(SchemaStoreError, TypeError):
    """Raised when a value cannot be encoded with the column's bind type."""
