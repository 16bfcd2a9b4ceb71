"""Engine and session factory construction for the record store."""

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from memosync.core.config import Settings
from memosync.models import Base


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine for DATABASE_URL.

    In-memory SQLite shares one connection across threads so every session
    sees the same database.
    """
    if database_url.startswith("sqlite"):
        kwargs: dict = {"connect_args": {"check_same_thread": False}}
        if database_url.rstrip("/").endswith(":memory:") or database_url in (
            "sqlite://",
            "sqlite+pysqlite://",
        ):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)
    return create_engine(database_url, pool_pre_ping=True, echo=echo)


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory used by the SQLAlchemy record store driver."""
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def session_factory_from_settings(settings: Settings) -> sessionmaker[Session]:
    return build_session_factory(build_engine(settings.DATABASE_URL, echo=settings.DEBUG))


def create_tables(engine: Engine) -> None:
    """Create users and memos tables. Production schemas are managed by Alembic."""
    Base.metadata.create_all(engine)


def check_db_connected(session_factory: sessionmaker[Session]) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        with session_factory() as db:
            db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
