import pytest

from schemastore.db import SchemaStore
from schemastore.tests.tables import people_tables


@pytest.fixture()
def db_path(tmp_path):
    return str(tmp_path / "db.sqlite")


@pytest.fixture()
def store(db_path):
    s = SchemaStore(db_path, people_tables())
    yield s
    s.close()
