"""
Tests for the todos table client.
"""
import pytest
from sqlalchemy.exc import SQLAlchemyError

from todo_view.database import drop_tables
from todo_view.table import RemoteCallError


def test_insert_assigns_id_and_defaults_flag(table):
    row = table.insert({"task": "Buy milk"})

    assert isinstance(row.id, int)
    assert row.task == "Buy milk"
    assert row.is_complete is False


def test_select_orders_by_id(table):
    for text in ("A", "B", "C"):
        table.insert({"task": text})

    ascending = table.select(order_by="id", ascending=True)
    descending = table.select(order_by="id", ascending=False)

    assert [row.task for row in ascending] == ["A", "B", "C"]
    assert [row.task for row in descending] == ["C", "B", "A"]


def test_update_sets_values_on_matching_rows(table):
    row = table.insert({"task": "Buy milk"})
    other = table.insert({"task": "Other"})

    updated = table.update({"is_complete": True}, match={"id": row.id})

    assert [(r.id, r.is_complete) for r in updated] == [(row.id, True)]
    rows = {r.id: r for r in table.select()}
    assert rows[row.id].is_complete is True
    assert rows[other.id].is_complete is False


def test_update_without_matches_returns_nothing(table):
    assert table.update({"is_complete": True}, match={"id": 999}) == []


def test_delete_returns_deleted_rows(table):
    row = table.insert({"task": "Gone soon"})
    kept = table.insert({"task": "Kept"})

    deleted = table.delete(match={"id": row.id})

    assert [r.id for r in deleted] == [row.id]
    assert [r.id for r in table.select()] == [kept.id]
    assert table.delete(match={"id": row.id}) == []


@pytest.mark.parametrize("call", [
    lambda t: t.select(order_by="created_at"),
    lambda t: t.insert({"title": "x"}),
    lambda t: t.update({"done": True}, match={"id": 1}),
    lambda t: t.delete(match={"owner": "me"}),
])
def test_unknown_columns_are_rejected(table, call):
    with pytest.raises(RemoteCallError) as excinfo:
        call(table)
    assert "unknown column" in str(excinfo.value)


def test_mutations_require_a_match(table):
    table.insert({"task": "Safe"})

    with pytest.raises(RemoteCallError):
        table.delete(match={})
    with pytest.raises(RemoteCallError):
        table.update({"is_complete": True}, match={})

    assert [row.task for row in table.select()] == ["Safe"]


def test_storage_errors_are_wrapped(table):
    drop_tables()

    with pytest.raises(RemoteCallError) as excinfo:
        table.select()

    assert excinfo.value.operation == "select"
    assert isinstance(excinfo.value.__cause__, SQLAlchemyError)
