from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, settings as default_settings
from app.core.exceptions import register_exception_handlers
from app.api.v1.api import api_router
from app.infrastructure.ledger import LedgerStore
from app.infrastructure.transport import LedgerTransport

logger = logging.getLogger(__name__)


def build_ledger(settings: Settings) -> LedgerStore:
    """Load the snapshot if one exists, otherwise start seeded or empty"""
    snapshot = settings.LEDGER_SNAPSHOT_PATH
    if snapshot and Path(snapshot).exists():
        return LedgerStore.from_snapshot(snapshot)
    if settings.LEDGER_SEED_FIXTURES:
        return LedgerStore.seeded()
    return LedgerStore()


def build_transport(settings: Settings) -> LedgerTransport:
    return LedgerTransport(
        latency_seconds=settings.LEDGER_LATENCY_SECONDS,
        operation_latency=settings.LEDGER_OPERATION_LATENCY,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    snapshot = app.state.settings.LEDGER_SNAPSHOT_PATH
    if snapshot:
        app.state.ledger.save_snapshot(snapshot)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_STR}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.ledger = build_ledger(settings)
    app.state.transport = build_transport(settings)

    # Set all CORS enabled origins
    if settings.BACKEND_CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_STR)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    logger.info(f"{settings.PROJECT_NAME} ready with {len(app.state.ledger.state.patients)} patients")
    return app

