# -*- coding: utf-8 -*-
"""
Declarative table schema
- ColumnSpec: column name, raw SQL type fragment, bind type, default
- TableSchema / Schema: read-only ordered mappings (declaration order kept)
- Condition: non-equality WHERE predicate for SchemaStore.get
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .errors import BindTypeError, SchemaError

Scalar = Union[int, float, str, bytes, bool, None]


class BindType(enum.Enum):
    INT = "INT"
    STRING = "STRING"
    BOOL = "BOOL"
    NULL = "NULL"
    FLOAT = "FLOAT"


_BIND_ALIASES: Dict[str, BindType] = {
    "INT": BindType.INT,
    "INTEGER": BindType.INT,
    "STRING": BindType.STRING,
    "STR": BindType.STRING,
    "TEXT": BindType.STRING,
    "BOOL": BindType.BOOL,
    "BOOLEAN": BindType.BOOL,
    "NULL": BindType.NULL,
    "NONE": BindType.NULL,
    "FLOAT": BindType.FLOAT,
    "REAL": BindType.FLOAT,
}

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("", "0", "false", "no", "off")


@dataclass(frozen=True)
class ColumnSpec:
    name: str
    sql_type: str
    bind_type: BindType = BindType.STRING
    default: Scalar = ""


@dataclass(frozen=True)
class Condition:
    """``column <operator> value``; the operator is inserted into SQL verbatim."""

    operator: str
    value: Scalar = None


TableSchema = Mapping[str, ColumnSpec]
Schema = Mapping[str, TableSchema]


# [ANCHOR:BIND_ENCODE]
def bind_type_of(raw: Any) -> BindType:
    if isinstance(raw, BindType):
        return raw
    if isinstance(raw, str):
        bt = _BIND_ALIASES.get(raw.strip().upper())
        if bt is not None:
            return bt
    raise SchemaError(f"unknown bind type: {raw!r}")


def encode(bind_type: BindType, value: Any) -> Scalar:
    """Convert ``value`` to what sqlite3 should bind for ``bind_type``.

    ``None`` always binds NULL. An empty string under a numeric bind type also
    binds NULL so that an ``INTEGER PRIMARY KEY`` with an empty default is
    assigned by the engine.
    """
    if value is None or bind_type is BindType.NULL:
        return None
    try:
        if bind_type is BindType.INT:
            if isinstance(value, str):
                value = value.strip()
                if value == "":
                    return None
            if isinstance(value, float) and not value.is_integer():
                raise ValueError(f"{value!r} is not integral")
            return int(value)
        if bind_type is BindType.FLOAT:
            if isinstance(value, str) and value.strip() == "":
                return None
            return float(value)
        if bind_type is BindType.BOOL:
            if isinstance(value, str):
                v = value.strip().lower()
                if v in _TRUE:
                    return 1
                if v in _FALSE:
                    return 0
                raise ValueError(f"{value!r} is not a boolean")
            return 1 if value else 0
    except (TypeError, ValueError) as e:
        raise BindTypeError(f"cannot bind {value!r} as {bind_type.value}: {e}") from e
    if isinstance(value, bytes):
        return value
    return str(value)


# [ANCHOR:DESCRIPTOR]
def parse_tables(tables: Mapping[str, Any]) -> Schema:
    """Build a read-only Schema from ``{table: {column: {type, bind_type, default}}}``.

    Already-built ColumnSpec values are accepted as column entries.
    """
    if not isinstance(tables, Mapping):
        raise SchemaError("tables must be a mapping of table name -> columns")

    out: Dict[str, TableSchema] = {}
    for table, columns in tables.items():
        if not isinstance(columns, Mapping) or not columns:
            raise SchemaError(f"table {table!r} must declare at least one column")
        cols: Dict[str, ColumnSpec] = {}
        for name, data in columns.items():
            if isinstance(data, ColumnSpec):
                cols[name] = data
                continue
            if not isinstance(data, Mapping) or not data.get("type"):
                raise SchemaError(f"column {table}.{name} needs a 'type'")
            default = data.get("default", "")
            cols[name] = ColumnSpec(
                name=name,
                sql_type=str(data["type"]),
                bind_type=bind_type_of(data.get("bind_type", BindType.STRING)),
                default="" if default is None else default,
            )
        out[table] = MappingProxyType(cols)
    return MappingProxyType(out)


def parse_descriptor(desc: Mapping[str, Any]) -> Tuple[str, Schema]:
    path: Optional[str] = desc.get("path") if isinstance(desc, Mapping) else None
    if not path:
        raise SchemaError("descriptor needs a non-empty 'path'")
    return str(path), parse_tables(desc.get("tables") or {})
