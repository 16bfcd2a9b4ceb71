"""In-process user cache keyed by user id, kept in sync by the store facade."""

import threading

from memosync.schemas.user import User


class UserCache:
    """
    Thread-safe id -> User map.

    No TTL and no capacity bound: entries change only through store() and
    delete(), which the Store facade calls after successful writes.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._lock = threading.Lock()

    def store(self, user_id: int, user: User) -> None:
        with self._lock:
            self._users[user_id] = user

    def load(self, user_id: int) -> tuple[User | None, bool]:
        """Return (user, True) for the last stored value, or (None, False)."""
        with self._lock:
            user = self._users.get(user_id)
        return user, user is not None

    def delete(self, user_id: int) -> None:
        with self._lock:
            self._users.pop(user_id, None)

    def clear(self) -> None:
        with self._lock:
            self._users.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
