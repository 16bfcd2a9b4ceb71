"""Federation sync: mirror external users' remote memos into local memos on a fixed cadence."""

import asyncio
import logging
from typing import TYPE_CHECKING

from memosync.schemas.federation import FederationSyncResult, SchedulerState
from memosync.schemas.memo import VISIBILITY_PROTECTED, Memo
from memosync.schemas.user import EXTERNAL_USERS, User
from memosync.services.errors import (
    ExternalUserListError,
    FederationSyncError,
    MemoIngestError,
)
from memosync.services.remote_fetcher import RemoteFetcher
from memosync.store import Store, StoreError

if TYPE_CHECKING:
    from memosync.core.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_SYNC_INTERVAL_SEC = 600.0


async def sync_external_user(store: Store, fetcher: RemoteFetcher, user: User) -> int:
    """
    Fetch one external user's remote memos and create them as local PROTECTED memos.

    Remote timestamps and content are copied verbatim. There is no dedup key:
    fetching the same remote memos again creates new rows. Returns the number
    of memos created; the first failure aborts the remaining records.
    Store calls run in a worker thread so the event loop stays responsive.
    """
    remote_memos = await fetcher.fetch(user)

    created = 0
    for remote in remote_memos:
        create = Memo(
            creator_id=user.id,
            created_ts=remote.created_ts,
            updated_ts=remote.updated_ts,
            content=remote.content,
            visibility=VISIBILITY_PROTECTED,
        )
        try:
            await asyncio.to_thread(store.create_memo, create)
        except StoreError as e:
            raise MemoIngestError(
                f"Failed to save memo for external user ID={user.id}: {e.message}",
                user_id=user.id,
                cause=e,
            ) from e
        created += 1
    return created


async def sync_all_external_users(store: Store, fetcher: RemoteFetcher) -> FederationSyncResult:
    """
    One sync pass: list external users and sync them sequentially in list order.

    The first failing user aborts the pass; users after it are not attempted
    and memos already created for earlier users stay committed.
    """
    try:
        users = await asyncio.to_thread(store.list_users, EXTERNAL_USERS)
    except StoreError as e:
        raise ExternalUserListError(
            f"Failed to fetch external users list: {e.message}", cause=e
        ) from e

    result = FederationSyncResult()
    for user in users:
        result.memos_created += await sync_external_user(store, fetcher, user)
        result.users_synced += 1
    return result


class FederationSyncScheduler:
    """
    Background task running one sync pass per tick.

    States: idle -> waiting on start; waiting -> running on each tick;
    running -> waiting after the pass, whatever its outcome; any -> stopped
    when the stop event is set. A pass in progress is never interrupted;
    ticks missed while a pass overran are skipped.
    """

    def __init__(
        self,
        store: Store,
        fetcher: RemoteFetcher | None = None,
        interval: float = DEFAULT_SYNC_INTERVAL_SEC,
    ) -> None:
        self.store = store
        self.fetcher = fetcher or RemoteFetcher()
        self.interval = interval
        self.state: SchedulerState = "idle"
        self._stop_event: asyncio.Event | None = None
        self._task: asyncio.Task | None = None

    @classmethod
    def from_settings(cls, store: Store, settings: "Settings") -> "FederationSyncScheduler":
        fetcher = RemoteFetcher(
            timeout=settings.FEDERATION_REQUEST_TIMEOUT_SEC,
            limit=settings.FEDERATION_FETCH_LIMIT,
        )
        return cls(store, fetcher, interval=settings.FEDERATION_SYNC_INTERVAL_SEC)

    async def run(self, stop_event: asyncio.Event) -> None:
        """Run passes every interval seconds until stop_event is set."""
        logger.info("Running federation sync in background every %s seconds", self.interval)
        loop = asyncio.get_running_loop()
        self.state = "waiting"
        next_tick = loop.time() + self.interval
        try:
            while not await self._wait_for_tick(stop_event, next_tick):
                self.state = "running"
                await self.run_pass()
                self.state = "waiting"

                next_tick += self.interval
                now = loop.time()
                while next_tick <= now:
                    next_tick += self.interval
        finally:
            self.state = "stopped"
            logger.info("Federation sync stopped")

    async def _wait_for_tick(self, stop_event: asyncio.Event, deadline: float) -> bool:
        """Sleep until deadline; True if stop_event was set first."""
        if stop_event.is_set():
            return True
        timeout = max(0.0, deadline - asyncio.get_running_loop().time())
        try:
            await asyncio.wait_for(stop_event.wait(), timeout=timeout)
        except asyncio.TimeoutError:
            return stop_event.is_set()
        return True

    async def run_pass(self) -> FederationSyncResult | None:
        """Run one pass and log its outcome. Errors are logged, never raised."""
        try:
            result = await sync_all_external_users(self.store, self.fetcher)
        except FederationSyncError as e:
            logger.error(
                "Failed to sync external users: %s",
                e.message,
                extra={"user_id": e.user_id},
            )
            return None
        except Exception:
            logger.exception("Federation sync pass failed unexpectedly")
            return None

        logger.info("Federation sync pass completed", extra=result.model_dump())
        return result

    def start(self) -> asyncio.Task:
        """Start the background task on the running event loop."""
        if self._task is not None and not self._task.done():
            return self._task
        self._stop_event = asyncio.Event()
        self._task = asyncio.create_task(self.run(self._stop_event))
        return self._task

    async def stop(self) -> None:
        """Signal the task to stop and wait for it (and any pass in progress) to finish."""
        if self._task is None or self._stop_event is None:
            return
        self._stop_event.set()
        await self._task
        self._task = None
