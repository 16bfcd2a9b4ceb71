"""Unit tests for memosync.core.config: defaults and validation of federation settings."""

import unittest

from pydantic import ValidationError

from memosync.core.config import Settings


class TestSettingsDefaults(unittest.TestCase):
    """Defaults encode the federation contract: 10 minutes, 1 second, 2 memos."""

    def test_federation_defaults(self) -> None:
        s = Settings(_env_file=None)
        self.assertTrue(s.FEDERATION_ENABLED)
        self.assertEqual(s.FEDERATION_SYNC_INTERVAL_SEC, 600.0)
        self.assertEqual(s.FEDERATION_REQUEST_TIMEOUT_SEC, 1.0)
        self.assertEqual(s.FEDERATION_FETCH_LIMIT, 2)


class TestSettingsValidation(unittest.TestCase):
    """Invalid values are rejected at load time."""

    def test_sqlite_url_accepted(self) -> None:
        s = Settings(_env_file=None, DATABASE_URL=" sqlite:///./memosync.db ")
        self.assertEqual(s.DATABASE_URL, "sqlite:///./memosync.db")

    def test_unsupported_database_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, DATABASE_URL="mysql://root@localhost/memosync")

    def test_non_positive_interval(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, FEDERATION_SYNC_INTERVAL_SEC=0)

    def test_timeout_out_of_range(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, FEDERATION_REQUEST_TIMEOUT_SEC=120)

    def test_fetch_limit_out_of_range(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(_env_file=None, FEDERATION_FETCH_LIMIT=0)


if __name__ == "__main__":
    unittest.main()
