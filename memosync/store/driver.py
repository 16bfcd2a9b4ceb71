"""Record store driver: the durable source of truth for users and memos."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from memosync.models import Memo as MemoRow
from memosync.models import User as UserRow
from memosync.models.base import now_ts
from memosync.schemas.memo import FindMemo, Memo
from memosync.schemas.user import DeleteUser, FindUser, UpdateUser, User
from memosync.store.errors import StoreError

logger = logging.getLogger(__name__)


class RecordStoreDriver(Protocol):
    """Narrow command/query interface consumed by the Store facade."""

    def create_user(self, create: User) -> User: ...

    def update_user(self, update: UpdateUser) -> User: ...

    def list_users(self, find: FindUser) -> list[User]: ...

    def delete_user(self, delete: DeleteUser) -> None: ...

    def create_memo(self, create: Memo) -> Memo: ...

    def list_memos(self, find: FindMemo) -> list[Memo]: ...


class SqlAlchemyDriver:
    """
    RecordStoreDriver backed by a SQLAlchemy session factory.

    One session per call; commit on success, rollback on failure. Rows are
    returned as detached pydantic values, never as live ORM instances.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self, operation: str) -> Iterator[Session]:
        db = self._session_factory()
        try:
            yield db
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.debug("Store operation %s failed: %s", operation, e)
            raise StoreError(operation, str(e)) from e
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def create_user(self, create: User) -> User:
        with self._session("create_user") as db:
            row = UserRow(**create.model_dump(exclude={"id"}, exclude_none=True))
            db.add(row)
            db.flush()
            return User.model_validate(row)

    def update_user(self, update: UpdateUser) -> User:
        with self._session("update_user") as db:
            row = db.get(UserRow, update.id)
            if row is None:
                raise StoreError("update_user", f"user ID={update.id} not found")
            changes = update.changes()
            changes.setdefault("updated_ts", now_ts())
            for field, value in changes.items():
                setattr(row, field, value)
            db.flush()
            return User.model_validate(row)

    def list_users(self, find: FindUser) -> list[User]:
        with self._session("list_users") as db:
            stmt = select(UserRow).filter_by(**find.criteria()).order_by(UserRow.id)
            return [User.model_validate(row) for row in db.scalars(stmt)]

    def delete_user(self, delete: DeleteUser) -> None:
        with self._session("delete_user") as db:
            row = db.get(UserRow, delete.id)
            if row is None:
                raise StoreError("delete_user", f"user ID={delete.id} not found")
            db.delete(row)

    def create_memo(self, create: Memo) -> Memo:
        with self._session("create_memo") as db:
            row = MemoRow(**create.model_dump(exclude={"id"}, exclude_none=True))
            db.add(row)
            db.flush()
            return Memo.model_validate(row)

    def list_memos(self, find: FindMemo) -> list[Memo]:
        with self._session("list_memos") as db:
            stmt = select(MemoRow).filter_by(**find.criteria()).order_by(MemoRow.id)
            return [Memo.model_validate(row) for row in db.scalars(stmt)]
