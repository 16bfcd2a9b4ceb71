"""Record store, user cache and the Store facade composing them."""

from memosync.store.cache import UserCache
from memosync.store.driver import RecordStoreDriver, SqlAlchemyDriver
from memosync.store.errors import StoreError
from memosync.store.store import Store

__all__ = ["RecordStoreDriver", "SqlAlchemyDriver", "Store", "StoreError", "UserCache"]
