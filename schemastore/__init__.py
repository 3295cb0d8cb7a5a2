# -*- coding: utf-8 -*-
"""Schema-driven accessor layer over an embedded SQLite file."""
from __future__ import annotations

from .db import (
    BindType,
    ColumnSpec,
    Condition,
    SchemaStore,
    SchemaStoreError,
)

__all__ = ["BindType", "ColumnSpec", "Condition", "SchemaStore", "SchemaStoreError"]
__version__ = "0.1.0"
