"""Tests for schema bootstrap (auto_migrate)."""
import pytest
from sqlalchemy import inspect, text

from db import employee_store
from db.database import SessionLocal, auto_migrate, drop_db, engine
from utils.errors import DuplicateEmail


def _unique_email_indexes():
    return [
        ix for ix in inspect(engine).get_indexes("employees")
        if ix["column_names"] == ["email"] and ix["unique"]
    ]


@pytest.fixture
def legacy_table():
    """An employees table from before the email / status columns existed."""
    drop_db()
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE employees ("
            "id INTEGER PRIMARY KEY, "
            "name VARCHAR(255) NOT NULL, "
            "mobile_no VARCHAR(20) NOT NULL, "
            "skills TEXT NOT NULL)"
        ))
    yield
    SessionLocal.remove()
    drop_db()


def test_fresh_table_has_unique_email_index():
    drop_db()
    try:
        auto_migrate()
        assert len(_unique_email_indexes()) == 1
    finally:
        drop_db()


def test_added_email_column_is_unique(legacy_table):
    auto_migrate()

    columns = {col["name"] for col in inspect(engine).get_columns("employees")}
    assert {"email", "status", "deleted_at", "created_at", "updated_at"} <= columns
    assert len(_unique_email_indexes()) == 1


def test_migrated_table_rejects_duplicate_email(legacy_table):
    auto_migrate()
    fields = {"name": "Ann", "email": "ann@x.com", "mobile_no": "12345", "skills": ["php"]}
    employee_store.create_employee(fields)

    with pytest.raises(DuplicateEmail):
        employee_store.create_employee({**fields, "name": "Ann Again"})
