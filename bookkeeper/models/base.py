"""
Ledger database plumbing: engine, sessions and the model base.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from bookkeeper.config import get_settings


def make_engine(url: str, **kwargs) -> Engine:
    """
    Create an engine for the ledger store at url.

    SQLite connections are opened with check_same_thread off,
    since FastAPI may hand a session to a different worker
    thread than the one that opened it.
    """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True, **kwargs)


engine = make_engine(get_settings().DATABASE_URL)

# Postings are committed explicitly by the document repository
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


class Base(DeclarativeBase):
    pass


def get_db():
    """Yield a session for one request and close it afterwards."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
