"""SQLAlchemy ORM models."""

from memosync.models.base import Base
from memosync.models.memo import Memo
from memosync.models.user import User

__all__ = ["Base", "Memo", "User"]
