"""SQLAlchemy declarative Base shared by the users and memos tables."""

import time

from sqlalchemy.orm import DeclarativeBase


def now_ts() -> int:
    """Current time as integer epoch seconds (the unit of created_ts/updated_ts)."""
    return int(time.time())


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass
