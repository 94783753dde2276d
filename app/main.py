import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.database import ConnectionPool
from app.router import router as api_router
from app.startup import create_schema, populate_db_from_csv
from app.analytics.models import tables as _  # noqa: F401 (registers ORM tables)


load_dotenv()

logger = logging.getLogger(__name__)


def create_app(pool: Optional[ConnectionPool] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API app.

    When `pool` is given it is used as-is: no schema creation or seeding runs
    against it and it is left open at shutdown. Otherwise a pool is created from
    settings at startup, optionally seeded, and disposed at shutdown.
    """
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = pool is None
        app.state.pool = ConnectionPool.from_settings(settings) if owned else pool
        if owned:
            engine = app.state.pool.engine
            if settings.create_schema:
                create_schema(engine)
            if settings.seed_csv_dir:
                populate_db_from_csv(engine, settings.seed_csv_dir)
        try:
            yield
        finally:
            if owned:
                app.state.pool.dispose()
                logger.info("Connection pool disposed")

    app = FastAPI(title="Naming Analytics Dashboard API", lifespan=lifespan)

    # CORS: the dashboard is served from a separate origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    # Stub pools injected by callers are available before startup runs
    if pool is not None:
        app.state.pool = pool
    return app


app = create_app()
