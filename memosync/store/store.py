"""Store facade: the record store driver composed with the write-through user cache."""

from memosync.schemas.memo import FindMemo, Memo
from memosync.schemas.user import DeleteUser, FindUser, UpdateUser, User
from memosync.store.cache import UserCache
from memosync.store.driver import RecordStoreDriver


class Store:
    """
    Sanctioned read/write path for users and create path for memos.

    Every successful user write or list refreshes the cache; a successful
    delete evicts the entry. Failed driver calls leave the cache untouched.
    """

    def __init__(self, driver: RecordStoreDriver, user_cache: UserCache | None = None) -> None:
        self.driver = driver
        self.user_cache = user_cache if user_cache is not None else UserCache()

    def create_user(self, create: User) -> User:
        user = self.driver.create_user(create)
        self.user_cache.store(user.id, user)
        return user

    def update_user(self, update: UpdateUser) -> User:
        user = self.driver.update_user(update)
        self.user_cache.store(user.id, user)
        return user

    def list_users(self, find: FindUser) -> list[User]:
        users = self.driver.list_users(find)
        for user in users:
            self.user_cache.store(user.id, user)
        return users

    def get_user(self, find: FindUser) -> User | None:
        """
        Return the first user matching find, or None.

        A lookup by id is answered from the cache when the id is cached;
        otherwise it goes through list_users, which refreshes the cache.
        """
        if find.id is not None:
            cached, found = self.user_cache.load(find.id)
            if found:
                return cached

        users = self.list_users(find)
        if not users:
            return None
        return users[0]

    def delete_user(self, delete: DeleteUser) -> None:
        self.driver.delete_user(delete)
        self.user_cache.delete(delete.id)

    def create_memo(self, create: Memo) -> Memo:
        return self.driver.create_memo(create)

    def list_memos(self, find: FindMemo) -> list[Memo]:
        return self.driver.list_memos(find)
