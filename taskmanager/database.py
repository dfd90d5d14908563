from contextlib import contextmanager

from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool, StaticPool
from sqlmodel import Session, SQLModel, create_engine

from .config import DATABASE_URL

# Register the tasks table with SQLModel metadata
from .models import Task  # noqa: F401


def build_engine(url: str = DATABASE_URL):
    """Engine for url, tuned per backend."""
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        # every connection to an in-memory database would see its own empty db
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=False, **kwargs)

    # Hosted Postgres: no pooling between requests, pre-ping stale connections
    return create_engine(url, echo=False, pool_pre_ping=True, poolclass=NullPool)


engine = build_engine()

SessionLocal = sessionmaker(class_=Session, autoflush=False, bind=engine)


def get_db():
    """FastAPI dependency: one session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_session():
    """Session for scripts running outside a request.

        with get_session() as session:
            create_task(session, TaskCreate(title="..."))
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_tables(bind=None):
    """Create the tasks table if it does not exist."""
    SQLModel.metadata.create_all(bind=bind or engine)
