"""
SQLAlchemy engine, session factory and declarative base.
"""

from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from app.config import Config


class Base(DeclarativeBase):
    pass


_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def get_engine(config: Config) -> Engine:
    """Get the process-wide engine. The engine owns the connection pool."""
    global _engine
    if _engine is None:
        connect_args = {}
        if config.database.url.startswith("sqlite"):
            # FastAPI may run sync code in a worker thread
            connect_args["check_same_thread"] = False
        _engine = create_engine(
            config.database.url,
            echo=config.database.echo,
            pool_pre_ping=True,
            connect_args=connect_args,
        )
    return _engine


def get_session_factory(config: Config) -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine(config), expire_on_commit=False)
    return _session_factory


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    # Import models so they register on Base.metadata
    from app.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def ping(engine: Engine) -> None:
    """Run a trivial query, raising if the database is unreachable."""
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
