"""Data-access client for the hosted `todos` table.

Four calls, each in its own session: select (ordered), insert, update
(match + set) and delete (match). Storage errors come back as
RemoteCallError with the original exception chained.
"""
from contextlib import contextmanager
from typing import Any, Callable, ContextManager, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from .database import get_session
from .models import Todo as TodoModel
from .schemas.todo import Todo

COLUMNS = ("id", "task", "is_complete")


class RemoteCallError(Exception):
    """A call against the todos table failed."""

    def __init__(self, operation: str, cause: Any):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} on todos failed: {cause}")


def _check_columns(operation: str, names) -> None:
    unknown = [name for name in names if name not in COLUMNS]
    if unknown:
        raise RemoteCallError(operation, f"unknown column(s): {', '.join(unknown)}")


class TodoTable:
    """Client for the `todos` table.

    `session_factory` must return a context manager yielding a SQLModel
    session; it defaults to the application's `get_session`.
    """

    def __init__(self, session_factory: Callable[[], ContextManager[Session]] = get_session):
        self._session_factory = session_factory

    @contextmanager
    def _call(self, operation: str):
        try:
            with self._session_factory() as session:
                yield session
        except SQLAlchemyError as exc:
            raise RemoteCallError(operation, exc) from exc

    def _matching(self, operation: str, match: Dict[str, Any]):
        if not match:
            raise RemoteCallError(operation, "a match filter is required")
        _check_columns(operation, match)
        return select(TodoModel).where(
            *[getattr(TodoModel, column) == value for column, value in match.items()]
        )

    def select(self, order_by: str = "id", ascending: bool = True) -> List[Todo]:
        """Return every row, ordered by `order_by`."""
        _check_columns("select", [order_by])
        column = getattr(TodoModel, order_by)
        statement = select(TodoModel).order_by(column.asc() if ascending else column.desc())

        with self._call("select") as session:
            rows = session.exec(statement).all()
            return [Todo.model_validate(row) for row in rows]

    def insert(self, values: Dict[str, Any]) -> Todo:
        """Insert one row; storage assigns `id` and defaults `is_complete`."""
        _check_columns("insert", values)

        with self._call("insert") as session:
            row = TodoModel(**values)
            session.add(row)
            session.commit()
            session.refresh(row)
            return Todo.model_validate(row)

    def update(self, values: Dict[str, Any], match: Dict[str, Any]) -> List[Todo]:
        """Set `values` on every row matching `match`; returns the updated rows."""
        _check_columns("update", values)
        statement = self._matching("update", match)

        with self._call("update") as session:
            rows = session.exec(statement).all()
            for row in rows:
                for column, value in values.items():
                    setattr(row, column, value)
                session.add(row)
            session.commit()
            for row in rows:
                session.refresh(row)
            return [Todo.model_validate(row) for row in rows]

    def delete(self, match: Dict[str, Any]) -> List[Todo]:
        """Delete every row matching `match`; returns the deleted rows."""
        statement = self._matching("delete", match)

        with self._call("delete") as session:
            rows = session.exec(statement).all()
            deleted = [Todo.model_validate(row) for row in rows]
            for row in rows:
                session.delete(row)
            session.commit()
            return deleted
