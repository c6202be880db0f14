from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Base class for models."""


class Database:
    """
    Store client owning the SQLAlchemy engine and session factory.

    One instance is built per application (see the lifespan in
    `products_api.main`) and reached from requests through `app.state`.
    """

    def __init__(self, url: str, echo: bool = False):
        self.engine = create_engine(url, echo=echo, **self._engine_options(url))
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @staticmethod
    def _engine_options(url: str) -> dict:
        if url.startswith("sqlite"):
            options = {"connect_args": {"check_same_thread": False}}
            # In-memory databases live inside a single connection
            if url in ("sqlite://", "sqlite:///:memory:"):
                options["poolclass"] = StaticPool
            return options
        # Connection pooling for server databases
        return {"pool_size": 10, "max_overflow": 20, "pool_pre_ping": True}

    def create_all(self) -> None:
        """Create all tables known to `Base`."""
        Base.metadata.create_all(bind=self.engine)

    def ping(self) -> bool:
        """Run a trivial query; raises if the database is unreachable."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    """Dependency returning the application's store client."""
    return request.app.state.database


def get_db(request: Request) -> Iterator[Session]:
    """
    Dependency to get database session.
    Yields a database session and closes it after use.
    """
    db = get_database(request).SessionLocal()
    try:
        yield db
    finally:
        db.close()
