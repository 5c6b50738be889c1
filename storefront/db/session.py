from typing import Iterator
from fastapi import Depends, Request
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session
from storefront.core.config import Settings

class AppContext:
    """Settings plus the database engine, built once per app instance."""

    def __init__(self, settings: Settings, engine: Engine):
        self.settings = settings
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        return cls(settings, build_engine(settings.DATABASE_URL))

def build_engine(database_url: str) -> Engine:
    # check_same_thread is needed for SQLite, remove for PostgreSQL
    if "sqlite" not in database_url:
        return create_engine(database_url)
    connect_args = {"check_same_thread": False}
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # every connection would otherwise get its own empty database
        return create_engine(database_url, connect_args=connect_args, poolclass=StaticPool)
    return create_engine(database_url, connect_args=connect_args)

def create_db_and_tables(engine: Engine):
    # Import models to ensure they are registered with SQLModel metadata
    import storefront.models  # noqa: F401
    SQLModel.metadata.create_all(engine)

def get_context(request: Request) -> AppContext:
    return request.app.state.context

def get_session(context: AppContext = Depends(get_context)) -> Iterator[Session]:
    with Session(context.engine) as session:
        yield session
