import dataclasses

import pytest

from schemastore.db import (
    BindType,
    BindTypeError,
    ColumnSpec,
    SchemaError,
    encode,
    parse_descriptor,
    parse_tables,
)
from schemastore.db.schema import bind_type_of
from schemastore.tests.tables import people_tables


def test_parse_tables_keeps_order_and_types():
    schema = parse_tables(people_tables())
    cols = schema["test"]
    assert list(cols) == ["id", "name", "email", "age"]
    assert cols["id"] == ColumnSpec("id", "INTEGER PRIMARY KEY AUTOINCREMENT", BindType.INT, "")
    assert cols["name"].bind_type is BindType.STRING


def test_parse_tables_defaults_and_prebuilt_specs():
    spec = ColumnSpec("ts", "REAL", BindType.FLOAT, 0)
    schema = parse_tables({"t": {"k": {"type": "TEXT"}, "ts": spec}})
    assert schema["t"]["k"].bind_type is BindType.STRING
    assert schema["t"]["k"].default == ""
    assert schema["t"]["ts"] is spec


def test_schema_is_read_only():
    schema = parse_tables(people_tables())
    with pytest.raises(TypeError):
        schema["other"] = {}
    with pytest.raises(TypeError):
        schema["test"]["x"] = None
    with pytest.raises(dataclasses.FrozenInstanceError):
        schema["test"]["id"].default = "1"


@pytest.mark.parametrize(
    "tables",
    [
        [],
        {"t": {}},
        {"t": {"c": {"bind_type": "INT"}}},
        {"t": {"c": {"type": "TEXT", "bind_type": "DECIMAL"}}},
    ],
)
def test_parse_tables_rejects_malformed(tables):
    with pytest.raises(SchemaError):
        parse_tables(tables)


def test_parse_descriptor():
    path, schema = parse_descriptor({"path": "x.sqlite", "tables": people_tables()})
    assert path == "x.sqlite"
    assert "test" in schema
    with pytest.raises(SchemaError):
        parse_descriptor({"tables": people_tables()})


def test_bind_type_aliases():
    assert bind_type_of("int") is BindType.INT
    assert bind_type_of("Integer") is BindType.INT
    assert bind_type_of("text") is BindType.STRING
    assert bind_type_of("REAL") is BindType.FLOAT
    assert bind_type_of("none") is BindType.NULL
    assert bind_type_of(BindType.BOOL) is BindType.BOOL


def test_encode_int():
    assert encode(BindType.INT, 5) == 5
    assert encode(BindType.INT, " 7 ") == 7
    assert encode(BindType.INT, True) == 1
    assert encode(BindType.INT, 3.0) == 3
    assert encode(BindType.INT, "") is None
    assert encode(BindType.INT, None) is None
    with pytest.raises(BindTypeError):
        encode(BindType.INT, 2.5)
    with pytest.raises(BindTypeError):
        encode(BindType.INT, "abc")


def test_encode_float_bool_string_null():
    assert encode(BindType.FLOAT, "1.5") == 1.5
    assert encode(BindType.FLOAT, "") is None
    assert encode(BindType.BOOL, True) == 1
    assert encode(BindType.BOOL, "off") == 0
    assert encode(BindType.BOOL, "") == 0
    with pytest.raises(BindTypeError):
        encode(BindType.BOOL, "maybe")
    assert encode(BindType.STRING, 25) == "25"
    assert encode(BindType.STRING, b"\x00") == b"\x00"
    assert encode(BindType.NULL, "anything") is None
