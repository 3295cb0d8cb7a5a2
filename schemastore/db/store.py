# -*- coding: utf-8 -*-
"""
SchemaStore: schema-driven SQLite accessor
- declared tables are created on open, missing columns are added (additive only)
- insert / update / delete / get build parameterized SQL from the schema
- driver auto-commit: every call is its own unit of work

Only values are bound. Table and column names, SQL type fragments, DDL
defaults, condition operators and ``order_by`` are interpolated verbatim, so
they must come from trusted, statically declared configuration.
"""
from __future__ import annotations

import logging
import os
import sqlite3
from typing import Any, Dict, List, Mapping, Optional

from .errors import UnknownColumnError, UnknownTableError
from .schema import ColumnSpec, Condition, Schema, TableSchema, encode, parse_descriptor, parse_tables

log = logging.getLogger("schemastore.db")

Row = Dict[str, Any]


# [ANCHOR:SCHEMA_STORE]
class SchemaStore:
    def __init__(self, path: str, tables: Mapping[str, Any]) -> None:
        self._path = str(path)
        self._schema: Schema = parse_tables(tables)
        if self._path != ":memory:":
            os.makedirs(os.path.dirname(self._path) or ".", exist_ok=True)
        # isolation_level=None: driver auto-commit, no implicit transactions
        self._conn = sqlite3.connect(self._path, isolation_level=None)
        self._conn.row_factory = sqlite3.Row
        log.info("[DB] open path=%s", self._path)
        try:
            self._create_tables()
        except BaseException:
            # the caller never gets a store to close
            self._conn.close()
            raise

    @classmethod
    def from_descriptor(cls, desc: Mapping[str, Any]) -> "SchemaStore":
        path, schema = parse_descriptor(desc)
        return cls(path, schema)

    @property
    def path(self) -> str:
        return self._path

    @property
    def schema(self) -> Schema:
        return self._schema

    def close(self) -> None:
        self._conn.close()
        log.info("[DB] closed path=%s", self._path)

    def __enter__(self) -> "SchemaStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ---------- schema ----------
    def _create_tables(self) -> None:
        for table, columns in self._schema.items():
            cols = ", ".join(f"{name} {spec.sql_type}" for name, spec in columns.items())
            self._exec(f"CREATE TABLE IF NOT EXISTS {table} ( {cols} )")
            # tables that already existed may predate some declared columns
            for name, spec in columns.items():
                self.add_column(table, name, spec.sql_type, spec.default)
        log.info("[DB] schema ready tables=%d", len(self._schema))

    def column_exists(self, table: str, column: str) -> bool:
        rows = self._conn.execute(f"PRAGMA table_info({table})").fetchall()
        return any(row["name"] == column for row in rows)

    def add_column(self, table: str, column: str, type: str = "TEXT", default: Any = '""') -> None:
        if self.column_exists(table, column):
            return
        if default is None or default == "":
            default = '""'
        self._exec(f"ALTER TABLE {table} ADD COLUMN {column} {type} DEFAULT {default}")
        log.info("[DB] add column %s.%s %s", table, column, type)

    def defaults(self, table: str) -> Dict[str, Any]:
        return {name: spec.default for name, spec in self._schema.get(table, {}).items()}

    # ---------- CRUD ----------
    def insert(self, table: str, data: Mapping[str, Any]) -> None:
        """Insert one row; declared defaults fill the columns ``data`` omits.

        An empty default under an INT or FLOAT bind type binds NULL, so new rows
        hold NULL there while rows that predate an ``add_column`` hold the DDL
        default ``''``.
        """
        self._table(table)
        data = {**self.defaults(table), **data}
        cols = ", ".join(data)
        marks = ", ".join(f":{k}" for k in data)
        self._exec(f"INSERT INTO {table} ({cols}) VALUES ({marks})", self._binds(table, data))

    def update(self, table: str, where: Mapping[str, Any], data: Mapping[str, Any]) -> None:
        self._table(table)
        binds: Dict[str, Any] = {}
        sets = []
        for k, v in data.items():
            sets.append(f"{k} = :{k}")
            binds[k] = v
        whr = "1=1"
        if where:
            parts = []
            for k, v in where.items():
                parts.append(f"{k} = :{k}")
                # one named placeholder per column: a WHERE value replaces a SET value
                binds[k] = v
            whr = " AND ".join(parts)
        self._exec(f"UPDATE {table} SET {', '.join(sets)} WHERE {whr}", self._binds(table, binds))

    def delete(self, table: str, column: str, value: Any) -> None:
        self._exec(f"DELETE FROM {table} WHERE {column} = :{column}", self._binds(table, {column: value}))

    def get(
        self,
        table: str,
        conditions: Optional[Mapping[str, Any]] = None,
        limit: int = -1,
        offset: int = 0,
        order_by: str = "",
    ) -> List[Row]:
        self._table(table)
        whr = "1=1"
        binds: Dict[str, Any] = {}
        if conditions:
            parts = []
            for k, v in conditions.items():
                cond = _as_condition(v)
                if cond is None:
                    parts.append(f"{k} = :{k}")
                    binds[k] = v
                else:
                    parts.append(f"{k} {cond.operator} :{k}")
                    binds[k] = cond.value
            whr = " AND ".join(parts)

        tail = f" ORDER BY {order_by}" if order_by else ""
        if limit > -1:
            tail += f" LIMIT {int(limit)}"
        if offset > 0:
            tail += f" OFFSET {int(offset)}"

        cur = self._exec(f"SELECT * FROM {table} WHERE {whr}{tail}", self._binds(table, binds))
        return [dict(r) for r in cur.fetchall()]

    def get_all(self, table: str) -> List[Row]:
        self._table(table)
        cur = self._exec(f"SELECT * FROM {table}")
        return [dict(r) for r in cur.fetchall()]

    # ---------- helpers ----------
    def _table(self, table: str) -> TableSchema:
        try:
            return self._schema[table]
        except KeyError:
            raise UnknownTableError(f"table not declared: {table}") from None

    def _column(self, table: str, column: str) -> ColumnSpec:
        columns = self._table(table)
        try:
            return columns[column]
        except KeyError:
            raise UnknownColumnError(f"column not declared: {table}.{column}") from None

    def _binds(self, table: str, values: Mapping[str, Any]) -> Dict[str, Any]:
        return {k: encode(self._column(table, k).bind_type, v) for k, v in values.items()}

    def _exec(self, sql: str, params: Optional[Mapping[str, Any]] = None) -> sqlite3.Cursor:
        log.debug("[DB] sql=%s params=%s", sql, params)
        return self._conn.execute(sql, params or {})


def _as_condition(value: Any) -> Optional[Condition]:
    if isinstance(value, Condition):
        return value
    if isinstance(value, Mapping) and "operator" in value:
        return Condition(str(value["operator"]), value.get("value"))
    return None
