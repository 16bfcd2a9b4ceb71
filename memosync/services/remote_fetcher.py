"""Fetch the latest public memos of an external user from the remote service named by their username."""

import asyncio
import logging
import re
from urllib.parse import unquote, urlencode, urlsplit, urlunsplit

import httpx
from pydantic import TypeAdapter, ValidationError

from memosync.schemas.memo import RemoteMemo
from memosync.schemas.user import ROW_STATUS_NORMAL, User
from memosync.services.errors import (
    RemoteAddressError,
    RemoteDecodeError,
    RemoteFetchError,
)

logger = logging.getLogger(__name__)

# Path prefix identifying a user page on the remote service: https://remote/u/<username>
USER_PATH_PREFIX = "/u/"
REMOTE_MEMO_PATH = "/api/v1/memo"
DEFAULT_FETCH_LIMIT = 2
DEFAULT_REQUEST_TIMEOUT_SEC = 1.0

_INVALID_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_REMOTE_MEMO_LIST = TypeAdapter(list[RemoteMemo] | None)


def remote_username(path: str) -> str:
    """Strip the user path prefix; a path without it is used as-is."""
    return path.removeprefix(USER_PATH_PREFIX)


def build_remote_memo_url(address: str, limit: int = DEFAULT_FETCH_LIMIT) -> str:
    """
    Build the remote memo query URL for an external user's address.

    Raises ValueError when the address is not an absolute http(s) URL or has
    malformed percent escapes.
    """
    if _INVALID_PERCENT_ESCAPE.search(address):
        raise ValueError(f"invalid URL escape in {address!r}")
    parts = urlsplit(address)
    if parts.scheme not in ("http", "https") or not parts.hostname:
        raise ValueError(f"{address!r} is not an absolute http(s) address")
    try:
        parts.port
    except ValueError as e:
        raise ValueError(f"{address!r} has a malformed port") from e

    query = {
        "creatorUsername": remote_username(unquote(parts.path)),
        "rowStatus": ROW_STATUS_NORMAL,
        "limit": str(limit),
    }
    return urlunsplit((parts.scheme, parts.netloc, REMOTE_MEMO_PATH, urlencode(sorted(query.items())), ""))


class RemoteFetcher:
    """
    Issues one bounded GET per external user.

    timeout is an overall deadline for the request, including reading the body.
    transport is injectable so tests can serve responses without a network.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SEC,
        limit: int = DEFAULT_FETCH_LIMIT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = timeout
        self.limit = limit
        self._transport = transport

    async def fetch(self, user: User) -> list[RemoteMemo]:
        """
        Return the remote memos for an external user, in response order.

        Raises RemoteAddressError, RemoteFetchError or RemoteDecodeError.
        """
        try:
            url = build_remote_memo_url(user.username, self.limit)
        except ValueError as e:
            raise RemoteAddressError(
                f"Failed to parse external user address for user ID={user.id}: {e}",
                user_id=user.id,
                cause=e,
            ) from e

        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout), transport=self._transport
            ) as client:
                response = await asyncio.wait_for(client.get(url), timeout=self.timeout)
        except httpx.InvalidURL as e:
            raise RemoteAddressError(
                f"Invalid external user address for user ID={user.id}: {e}",
                user_id=user.id,
                cause=e,
            ) from e
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise RemoteFetchError(
                f"Request for external user ID={user.id} memos timed out after {self.timeout}s",
                user_id=user.id,
                cause=e,
            ) from e
        except httpx.HTTPError as e:
            raise RemoteFetchError(
                f"Failed to request external user ID={user.id} memos: {e}",
                user_id=user.id,
                cause=e,
            ) from e

        if not response.is_success:
            raise RemoteFetchError(
                f"Remote returned status {response.status_code} for external user ID={user.id}",
                user_id=user.id,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteDecodeError(
                f"Remote response for external user ID={user.id} is not valid JSON",
                user_id=user.id,
                cause=e,
            ) from e
        try:
            memos = _REMOTE_MEMO_LIST.validate_python(payload)
        except ValidationError as e:
            raise RemoteDecodeError(
                f"Failed to parse external user ID={user.id} memos: expected a JSON array "
                "of objects with content, createdTs and updatedTs",
                user_id=user.id,
                cause=e,
            ) from e

        memos = memos or []
        logger.debug("Fetched %d remote memos from %s for user ID=%s", len(memos), url, user.id)
        return memos
