"""FastAPI application entrypoint. No business logic; only wiring, middleware and the sync lifespan."""

from dotenv import load_dotenv

load_dotenv()

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from memosync.api.v1 import router as v1_router
from memosync.core.config import settings
from memosync.core.database import session_factory_from_settings
from memosync.services.federation import FederationSyncScheduler
from memosync.store import SqlAlchemyDriver, Store


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the store facade and run the federation scheduler for the app's lifetime."""
    session_factory = session_factory_from_settings(settings)
    store = Store(SqlAlchemyDriver(session_factory))
    app.state.session_factory = session_factory
    app.state.store = store
    app.state.scheduler = None
    if settings.FEDERATION_ENABLED:
        app.state.scheduler = FederationSyncScheduler.from_settings(store, settings)
        app.state.scheduler.start()
    try:
        yield
    finally:
        if app.state.scheduler is not None:
            await app.state.scheduler.stop()


app = FastAPI(
    title="memosync API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.APP_ENV == "dev" else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "memosync API"}
