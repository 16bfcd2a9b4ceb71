"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field

from memosync.schemas.federation import SchedulerState


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    database: Literal["connected", "disconnected"] | None = Field(
        default=None,
        description="Database connectivity status when check is performed",
    )
    federation: SchedulerState | Literal["disabled"] = Field(
        default="disabled",
        description="Federation sync scheduler state",
    )
