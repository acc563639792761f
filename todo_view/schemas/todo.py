from pydantic import BaseModel

class TodoBase(BaseModel):
    """Base to-do schema with the user supplied text."""
    task: str

class TodoCreate(TodoBase):
    """Schema for inserting a new to-do (storage assigns id and is_complete)."""
    pass

class TodoUpdate(BaseModel):
    """Schema for flipping the completion flag."""
    is_complete: bool

class Todo(TodoBase):
    """Complete to-do row as read back from the table."""
    id: int
    is_complete: bool = False

    class Config:
        from_attributes = True
