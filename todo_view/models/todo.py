from sqlmodel import SQLModel, Field
from sqlalchemy import false
from typing import Optional

class Todo(SQLModel, table=True):
    """A single to-do row in the hosted `todos` table.

    `id` is assigned by storage on insert and is the only sort key.
    """
    __tablename__ = "todos"

    id: Optional[int] = Field(default=None, primary_key=True)
    task: str
    is_complete: bool = Field(default=False, sa_column_kwargs={"server_default": false()})
