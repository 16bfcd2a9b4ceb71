"""
CLI entrypoint running one federation sync pass and exiting, e.g. from cron:

  python -m memosync.federation

The long-running scheduler is started by the API app (see memosync.main).
"""

import asyncio
import logging
import sys

from memosync.core.config import get_settings
from memosync.core.database import session_factory_from_settings
from memosync.services.errors import FederationSyncError
from memosync.services.federation import sync_all_external_users
from memosync.services.remote_fetcher import RemoteFetcher
from memosync.store import SqlAlchemyDriver, Store

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    """Sync every external user once: fetch remote memos and ingest them."""
    settings = get_settings()
    store = Store(SqlAlchemyDriver(session_factory_from_settings(settings)))
    fetcher = RemoteFetcher(
        timeout=settings.FEDERATION_REQUEST_TIMEOUT_SEC,
        limit=settings.FEDERATION_FETCH_LIMIT,
    )
    try:
        result = asyncio.run(sync_all_external_users(store, fetcher))
    except FederationSyncError as e:
        logger.error("Federation sync failed: %s", e.message)
        return 1
    except Exception as e:
        logger.exception("Federation sync failed: %s", e)
        return 1
    logger.info(
        "Federation sync completed: users_synced=%s, memos_created=%s",
        result.users_synced,
        result.memos_created,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
