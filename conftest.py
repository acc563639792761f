"""Shared fixtures: every test gets a fresh in-memory todos table."""
import os

# Must be set before todo_view.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["TODO_ERROR_POLICY"] = "log"

import pytest
from fastapi.testclient import TestClient

from todo_view.database import create_tables, drop_tables
from todo_view.main import app
from todo_view.table import TodoTable
from todo_view.view import TodoView


@pytest.fixture
def table():
    drop_tables()
    create_tables()
    yield TodoTable()
    drop_tables()


@pytest.fixture
def view(table):
    return TodoView(table)


@pytest.fixture
def client(view):
    app.state.todo_view = view
    view.mount()
    yield TestClient(app)
    app.dependency_overrides.clear()
    del app.state.todo_view
