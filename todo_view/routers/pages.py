from pathlib import Path
import threading

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates

from ..schemas.todo import Todo
from ..table import TodoTable
from ..view import TodoView

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[1] / "templates"))

_view_lock = threading.Lock()


def get_view(request: Request) -> TodoView:
    """Dependency returning the page's TodoView, creating it on first use."""
    view = getattr(request.app.state, "todo_view", None)
    if view is None:
        with _view_lock:
            view = getattr(request.app.state, "todo_view", None)
            if view is None:
                view = TodoView(TodoTable())
                request.app.state.todo_view = view
    return view


def _back_to_page() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/")
def index(request: Request, view: TodoView = Depends(get_view)):
    """Every page load is a mount: refetch, then render."""
    view.mount()
    return templates.TemplateResponse(
        request,
        "index.html",
        {"todos": view.todos, "new_task": view.new_task},
    )


@router.post("/add")
def add(task: str = Form(""), view: TodoView = Depends(get_view)):
    view.set_new_task(task)
    view.add_task()
    return _back_to_page()


@router.post("/todos/{todo_id}/toggle")
def toggle(
    todo_id: int,
    is_complete: bool = Form(...),
    task: str = Form(""),
    view: TodoView = Depends(get_view),
):
    # The flag is the one rendered on the page, so a double click sends it twice
    view.toggle_complete(Todo(id=todo_id, task=task, is_complete=is_complete))
    return _back_to_page()


@router.post("/todos/{todo_id}/delete")
def delete(todo_id: int, view: TodoView = Depends(get_view)):
    view.delete_task(todo_id)
    return _back_to_page()
