"""TodoView: the to-do page's state and its four operations.

The view owns the displayed list and the pending input text. Every
successful mutation is followed by a full refetch; the list is never
patched locally. Failures are logged and, under the default "log"
policy, dropped.
"""
import logging
from typing import List, Optional

from .config import ERROR_POLICIES, ERROR_POLICY
from .schemas.todo import Todo
from .table import RemoteCallError, TodoTable

logger = logging.getLogger(__name__)


class TodoView:
    def __init__(self, table: TodoTable, error_policy: str = ERROR_POLICY):
        if error_policy not in ERROR_POLICIES:
            raise ValueError(
                f"Unknown error policy {error_policy!r}, expected one of {ERROR_POLICIES}"
            )
        self.table = table
        self.error_policy = error_policy
        self.todos: List[Todo] = []
        self.new_task = ""
        self.mounted = False

    def _report(self, message: str, error: RemoteCallError) -> None:
        logger.error("%s: %s", message, error)
        if self.error_policy == "raise":
            raise error

    def mount(self) -> None:
        """Initial load, run once when the view comes to life."""
        self.mounted = True
        self.fetch_all()

    def set_new_task(self, text: str) -> None:
        self.new_task = text

    def fetch_all(self) -> None:
        """Replace the displayed list with every row, ascending by id."""
        try:
            todos = self.table.select(order_by="id", ascending=True)
        except RemoteCallError as e:
            # The previous list stays on screen
            self._report("Error fetching todos", e)
            return
        self.todos = todos

    def add_task(self, text: Optional[str] = None) -> None:
        """Insert `text` (default: the pending input) unless it is blank."""
        if text is None:
            text = self.new_task
        if not text.strip():
            return

        try:
            self.table.insert({"task": text})
        except RemoteCallError as e:
            self._report("Error adding todo", e)
            return

        self.new_task = ""
        self.fetch_all()

    def delete_task(self, todo_id: int) -> None:
        try:
            self.table.delete(match={"id": todo_id})
        except RemoteCallError as e:
            self._report("Error deleting todo", e)
            return
        self.fetch_all()

    def toggle_complete(self, todo: Todo) -> None:
        """Flip completion based on the flag `todo` carried when clicked."""
        try:
            self.table.update({"is_complete": not todo.is_complete}, match={"id": todo.id})
        except RemoteCallError as e:
            self._report("Error updating todo", e)
            return
        self.fetch_all()
