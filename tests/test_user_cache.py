"""Unit tests for memosync.store.cache: per-key store/load/delete consistency."""

import threading
import unittest

from memosync.schemas.user import User
from memosync.store.cache import UserCache


def _user(user_id: int = 1, username: str = "alice", **kwargs: object) -> User:
    """Build a minimal User for tests."""
    return User(id=user_id, username=username, **kwargs)


class TestUserCacheLoad(unittest.TestCase):
    """load reflects the last store/delete on the same key."""

    def test_load_missing_key_reports_not_found(self) -> None:
        cache = UserCache()
        user, found = cache.load(1)
        self.assertIsNone(user)
        self.assertFalse(found)

    def test_store_then_load_returns_value(self) -> None:
        cache = UserCache()
        alice = _user()
        cache.store(1, alice)
        user, found = cache.load(1)
        self.assertTrue(found)
        self.assertIs(user, alice)

    def test_store_overwrites(self) -> None:
        cache = UserCache()
        cache.store(1, _user(nickname="old"))
        cache.store(1, _user(nickname="new"))
        user, _ = cache.load(1)
        self.assertEqual(user.nickname, "new")

    def test_delete_then_load_reports_not_found(self) -> None:
        cache = UserCache()
        cache.store(1, _user())
        cache.delete(1)
        self.assertEqual(cache.load(1), (None, False))

    def test_store_after_delete_is_visible(self) -> None:
        cache = UserCache()
        cache.store(1, _user())
        cache.delete(1)
        cache.store(1, _user(nickname="back"))
        user, found = cache.load(1)
        self.assertTrue(found)
        self.assertEqual(user.nickname, "back")

    def test_delete_missing_key_is_noop(self) -> None:
        cache = UserCache()
        cache.delete(42)
        self.assertEqual(len(cache), 0)

    def test_operation_sequence_last_write_wins_per_key(self) -> None:
        cache = UserCache()
        ops = [("store", 1, "a"), ("store", 2, "b"), ("delete", 1, None), ("store", 2, "c"), ("store", 3, "d"), ("delete", 3, None)]
        for op, key, nickname in ops:
            if op == "store":
                cache.store(key, _user(user_id=key, username=f"u{key}", nickname=nickname))
            else:
                cache.delete(key)
        self.assertEqual(cache.load(1), (None, False))
        self.assertEqual(cache.load(2)[0].nickname, "c")
        self.assertEqual(cache.load(3), (None, False))
        self.assertEqual(len(cache), 1)

    def test_clear(self) -> None:
        cache = UserCache()
        cache.store(1, _user())
        cache.store(2, _user(user_id=2, username="bob"))
        cache.clear()
        self.assertEqual(len(cache), 0)


class TestUserCacheConcurrency(unittest.TestCase):
    """Concurrent writers on distinct keys each observe their own writes."""

    def test_concurrent_store_and_load(self) -> None:
        cache = UserCache()
        errors: list[str] = []

        def worker(key: int) -> None:
            for i in range(200):
                cache.store(key, _user(user_id=key, username=f"u{key}", nickname=str(i)))
                user, found = cache.load(key)
                if not found or user.nickname != str(i):
                    errors.append(f"key {key} iteration {i}")

        threads = [threading.Thread(target=worker, args=(k,)) for k in range(1, 9)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(errors, [])
        self.assertEqual(len(cache), 8)


if __name__ == "__main__":
    unittest.main()
