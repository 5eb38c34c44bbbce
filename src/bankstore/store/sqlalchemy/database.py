"""Database engine and session management for the relational document store."""

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def create_store_engine(database_url: str) -> Engine:
    """Create an engine for the given database URL."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # SQLite-specific
    return create_engine(database_url, connect_args=connect_args, echo=False)


def init_db(engine: Engine) -> None:
    """Initialize document tables."""
    from bankstore.store.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def get_session_factory(engine: Engine) -> sessionmaker:
    """Build a session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
