"""Pydantic request/response schemas."""

from memosync.schemas.federation import FederationSyncResult, SchedulerState
from memosync.schemas.health import HealthResponse
from memosync.schemas.memo import FindMemo, Memo, RemoteMemo, Visibility
from memosync.schemas.user import (
    EXTERNAL_USERS,
    DeleteUser,
    FindUser,
    Role,
    RowStatus,
    UpdateUser,
    User,
)

__all__ = [
    "DeleteUser",
    "EXTERNAL_USERS",
    "FederationSyncResult",
    "FindMemo",
    "FindUser",
    "HealthResponse",
    "Memo",
    "RemoteMemo",
    "Role",
    "RowStatus",
    "SchedulerState",
    "UpdateUser",
    "User",
    "Visibility",
]
