import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS, LOG_LEVEL
from .database import create_tables
from .routers import pages, todos
from .table import TodoTable
from .view import TodoView

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Todo View",
    description="Single-page to-do list backed by a hosted todos table",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(pages.router, tags=["pages"])
app.include_router(todos.router, prefix="/api", tags=["todos"])

# Create tables and mount the page view on startup
@app.on_event("startup")
def on_startup():
    create_tables()
    view = TodoView(TodoTable())
    view.mount()
    app.state.todo_view = view
    logger.info("Todo view mounted with %d todo(s)", len(view.todos))

@app.get("/health")
def health_check():
    return {"status": "healthy"}
