"""Health check endpoint: database connectivity and federation scheduler state."""

from fastapi import APIRouter, Request

from memosync.core.config import settings
from memosync.core.database import check_db_connected
from memosync.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(request: Request) -> HealthResponse:
    """
    Return service health status, database connectivity and sync scheduler state.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if check_db_connected(request.app.state.session_factory) else "disconnected"
    scheduler = request.app.state.scheduler

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        database=db_status,
        federation=scheduler.state if scheduler is not None else "disabled",
    )
