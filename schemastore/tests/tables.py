"""Sample table declarations shared by the test modules."""


def people_tables(with_age: bool = True) -> dict:
    cols = {
        "id": {"type": "INTEGER PRIMARY KEY AUTOINCREMENT", "bind_type": "INT", "default": ""},
        "name": {"type": "TEXT NOT NULL", "bind_type": "STRING", "default": ""},
        "email": {"type": "TEXT", "bind_type": "STRING", "default": ""},
    }
    if with_age:
        cols["age"] = {"type": "INTEGER", "bind_type": "INT", "default": ""}
    return {"test": cols}
