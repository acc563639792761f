from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..schemas.todo import Todo as TodoSchema, TodoCreate, TodoUpdate
from ..table import RemoteCallError, TodoTable

router = APIRouter()


def get_table() -> TodoTable:
    """Dependency to get the todos table client."""
    return TodoTable()


def _storage_error(error: RemoteCallError) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=str(error),
    )


@router.get("/todos", response_model=List[TodoSchema])
def list_todos(
    ascending: bool = True,
    table: TodoTable = Depends(get_table),
):
    """List every to-do ordered by id."""
    try:
        return table.select(order_by="id", ascending=ascending)
    except RemoteCallError as e:
        raise _storage_error(e)


@router.post("/todos", response_model=TodoSchema, status_code=status.HTTP_201_CREATED)
def create_todo(
    todo: TodoCreate,
    table: TodoTable = Depends(get_table),
):
    """Insert a new to-do; id and is_complete come from storage."""
    try:
        return table.insert({"task": todo.task})
    except RemoteCallError as e:
        raise _storage_error(e)


@router.patch("/todos/{todo_id}", response_model=TodoSchema)
def update_todo(
    todo_id: int,
    todo_update: TodoUpdate,
    table: TodoTable = Depends(get_table),
):
    """Set the completion flag of a to-do."""
    try:
        updated = table.update(todo_update.model_dump(), match={"id": todo_id})
    except RemoteCallError as e:
        raise _storage_error(e)

    if not updated:
        raise HTTPException(status_code=404, detail="Todo not found")
    return updated[0]


@router.delete("/todos/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(
    todo_id: int,
    table: TodoTable = Depends(get_table),
):
    """Delete a to-do."""
    try:
        deleted = table.delete(match={"id": todo_id})
    except RemoteCallError as e:
        raise _storage_error(e)

    if not deleted:
        raise HTTPException(status_code=404, detail="Todo not found")
