"""Database engine construction and schema management."""

from typing import Any

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

Base: Any = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """Create an engine suited to the given URL.

    SQLite connections are shared across threads (access is serialised by the
    store). In-memory databases use a single static connection so that every
    session sees the same data.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(database_url, pool_pre_ping=True)

    connect_args = {"check_same_thread": False}
    if url.database in (None, "", ":memory:"):
        return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(database_url, connect_args=connect_args)


def init_db(engine: Engine) -> None:
    """Create all tables that don't exist yet."""
    # Import all models here so they are registered with Base.metadata
    from lunch import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
