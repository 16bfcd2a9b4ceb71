"""Pydantic schemas for memos: local records, lookup filters and remote payloads."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from memosync.schemas.user import RowStatus

Visibility = Literal["PRIVATE", "PROTECTED", "PUBLIC"]

VISIBILITY_PROTECTED: Visibility = "PROTECTED"


class Memo(BaseModel):
    """Detached memo record (subset of the full memo schema used by ingestion)."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(default=0, ge=0, description="Store-assigned identifier; 0 before creation.")
    creator_id: int = Field(..., description="Owning local user id.")
    created_ts: int | None = Field(default=None, description="Creation time (epoch seconds).")
    updated_ts: int | None = Field(default=None, description="Last update time (epoch seconds).")
    row_status: RowStatus = "NORMAL"
    content: str = ""
    visibility: Visibility = "PRIVATE"


class FindMemo(BaseModel):
    """Immutable memo lookup filter; every set field must match."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    creator_id: int | None = None
    row_status: RowStatus | None = None
    visibility: Visibility | None = None

    def criteria(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)


class RemoteMemo(BaseModel):
    """One public memo returned by a remote service's /api/v1/memo endpoint."""

    model_config = ConfigDict(extra="ignore")

    content: str
    created_ts: StrictInt = Field(..., alias="createdTs")
    updated_ts: StrictInt = Field(..., alias="updatedTs")
