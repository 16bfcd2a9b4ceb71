"""Pydantic schemas for users: the cached value object, partial updates and lookup filters."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# EXTERNAL marks a user whose content is authored on a remote service.
Role = Literal["HOST", "ADMIN", "USER", "EXTERNAL"]
RowStatus = Literal["NORMAL", "ARCHIVED"]

ROLE_VALUES: frozenset[str] = frozenset({"HOST", "ADMIN", "USER", "EXTERNAL"})
ROLE_EXTERNAL: Role = "EXTERNAL"
ROW_STATUS_NORMAL: RowStatus = "NORMAL"


class User(BaseModel):
    """
    Detached user record as returned by the record store and held in the user cache.

    Profile fields (email, nickname, password_hash, avatar_url) are opaque here
    and pass through unchanged.
    """

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(default=0, ge=0, description="Store-assigned identifier; 0 before creation.")
    row_status: RowStatus = Field(default="NORMAL", description="Lifecycle flag.")
    created_ts: int | None = Field(default=None, description="Creation time (epoch seconds).")
    updated_ts: int | None = Field(default=None, description="Last update time (epoch seconds).")
    username: str = Field(
        ...,
        min_length=1,
        max_length=1024,
        description="Plain handle, or remote address plus /u/<name> for EXTERNAL users.",
    )
    role: Role = Field(default="USER", description="HOST, ADMIN, USER or EXTERNAL.")
    email: str = ""
    nickname: str = ""
    password_hash: str = ""
    avatar_url: str = ""


class UpdateUser(BaseModel):
    """Partial update by id; only fields that are not None are applied."""

    id: int
    updated_ts: int | None = None
    row_status: RowStatus | None = None
    username: str | None = None
    role: Role | None = None
    email: str | None = None
    nickname: str | None = None
    password_hash: str | None = None
    avatar_url: str | None = None

    def changes(self) -> dict[str, object]:
        """Fields to apply, excluding id and unset values."""
        return self.model_dump(exclude={"id"}, exclude_none=True)


class FindUser(BaseModel):
    """Immutable user lookup filter; every set field must match."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    row_status: RowStatus | None = None
    username: str | None = None
    role: Role | None = None
    email: str | None = None
    nickname: str | None = None

    def criteria(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)


class DeleteUser(BaseModel):
    """Delete request for one user."""

    id: int


# Filter selecting every externally hosted user for federation sync.
EXTERNAL_USERS = FindUser(role=ROLE_EXTERNAL)
