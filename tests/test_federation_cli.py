"""Tests for the run-once federation CLI exit codes."""

import unittest
from unittest.mock import AsyncMock, MagicMock, patch

from memosync import federation
from memosync.schemas.federation import FederationSyncResult
from memosync.services.errors import RemoteFetchError


@patch("memosync.federation.session_factory_from_settings", return_value=MagicMock())
class TestFederationMain(unittest.TestCase):
    """main() returns 0 on success and 1 on any failure, logging the cause."""

    def test_success_returns_zero(self, _session_factory: MagicMock) -> None:
        result = FederationSyncResult(users_synced=1, memos_created=2)
        with patch("memosync.federation.sync_all_external_users", new=AsyncMock(return_value=result)):
            with self.assertLogs("memosync.federation", level="INFO") as logs:
                self.assertEqual(federation.main(), 0)
        self.assertIn("memos_created=2", logs.output[-1])

    def test_sync_error_returns_one(self, _session_factory: MagicMock) -> None:
        error = RemoteFetchError("Remote returned status 503 for external user ID=4", user_id=4)
        with patch("memosync.federation.sync_all_external_users", new=AsyncMock(side_effect=error)):
            with self.assertLogs("memosync.federation", level="ERROR") as logs:
                self.assertEqual(federation.main(), 1)
        self.assertIn("status 503", logs.output[0])

    def test_unexpected_error_returns_one(self, _session_factory: MagicMock) -> None:
        with patch(
            "memosync.federation.sync_all_external_users",
            new=AsyncMock(side_effect=RuntimeError("database went away")),
        ):
            with self.assertLogs("memosync.federation", level="ERROR") as logs:
                self.assertEqual(federation.main(), 1)
        self.assertIn("database went away", logs.output[0])
        self.assertIn("Traceback", logs.output[0])


if __name__ == "__main__":
    unittest.main()
