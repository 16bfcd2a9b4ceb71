"""Pydantic schemas for federation sync results and scheduler state."""

from typing import Literal

from pydantic import BaseModel, Field

SchedulerState = Literal["idle", "waiting", "running", "stopped"]


class FederationSyncResult(BaseModel):
    """Outcome of one completed sync pass over all external users."""

    users_synced: int = Field(default=0, ge=0, description="External users fetched and ingested.")
    memos_created: int = Field(default=0, ge=0, description="Local memo rows created in the pass.")
