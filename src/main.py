"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from src.api.router import api_router
from src.config import settings
from src.db.turso import TursoClient
from src.repositories.kv_store import TursoKeyValueStore
from src.services.meeting_cost_service import MeetingCostService

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Route stdlib and structlog output through one handler at ``log_level``.

    Development gets console rendering, every other environment JSON lines.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.app_env == "development"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the store, wire the cost service, close the store on shutdown."""
    logger.info(f"Starting {settings.app_name} ({settings.app_env})")

    db = TursoClient()
    await db.connect()
    app.state.db = db

    store = TursoKeyValueStore(db)
    await store.initialize()
    app.state.cost_service = MeetingCostService(store)
    logger.info(f"Meeting cost service ready on {db.url}")

    yield

    await db.close()
    logger.info(f"{settings.app_name} stopped")


app = FastAPI(
    title=settings.app_name,
    description="Meeting cost tracking and optimization for engineering teams",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("src.main:app", host="0.0.0.0", port=8000, reload=True)
