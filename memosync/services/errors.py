"""Errors raised while synchronizing external users from their remote services."""


class FederationSyncError(Exception):
    """Base error for a failed federation sync; user_id names the external user when known."""

    def __init__(
        self,
        message: str,
        user_id: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.user_id = user_id
        self.cause = cause
        super().__init__(message)


class ExternalUserListError(FederationSyncError):
    """Listing external users from the store failed; the whole pass is aborted."""


class RemoteAddressError(FederationSyncError):
    """The external user's username is not a usable remote address. No request is made."""


class RemoteFetchError(FederationSyncError):
    """The remote request timed out, could not connect, or returned an error status."""


class RemoteDecodeError(FederationSyncError):
    """The remote response body is not a JSON array of memos."""


class MemoIngestError(FederationSyncError):
    """Creating a local memo for a fetched remote memo failed."""
