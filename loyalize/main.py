import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from loyalize import __version__
from loyalize.core.config import Settings, get_settings
from loyalize.core.logging import configure_logging
from loyalize.infrastructure.database.session import dispose_engine, init_db
from loyalize.interfaces.http import create_api_router
from loyalize.interfaces.http.errors import register_exception_handlers
from loyalize.schemas import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("Loyalize %s started", __version__)
    yield
    await dispose_engine()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.project_name,
        description="Restaurant loyalty back-office API: customers, tiers, seating, feedback and point wallets",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(create_api_router(settings.api_prefix))

    @app.get(f"{settings.api_prefix}/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__)

    return app


app = create_app()
