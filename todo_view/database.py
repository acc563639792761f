from sqlmodel import Session, SQLModel, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool, StaticPool
from contextlib import contextmanager

from .config import DATABASE_URL

# Import all models to ensure they are registered with SQLModel metadata
from .models import Todo  # noqa: F401

_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def _create_engine():
    if DATABASE_URL.startswith("sqlite"):
        if DATABASE_URL in _IN_MEMORY_URLS:
            # One shared connection, otherwise every thread sees an empty database
            return create_engine(
                DATABASE_URL,
                echo=False,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_engine(
            DATABASE_URL,
            echo=False,
            connect_args={"check_same_thread": False},
        )

    # Hosted Postgres (Supabase/Neon): disable pooling for serverless and enable pre-ping
    return create_engine(
        DATABASE_URL,
        echo=False,
        pool_pre_ping=True,
        poolclass=NullPool,
    )

engine = _create_engine()

SessionLocal = sessionmaker(class_=Session, autoflush=False, bind=engine)

@contextmanager
def get_session():
    """Get a database session (context manager style).

    This is what TodoTable opens for every call, outside of FastAPI dependencies.
    Usage:
        with get_session() as session:
            # do something with session
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()

def create_tables():
    """Create all database tables."""
    SQLModel.metadata.create_all(bind=engine)

def drop_tables():
    """Drop all database tables."""
    SQLModel.metadata.drop_all(bind=engine)
