"""Users API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserServiceError → fixed status + plain-text body
    - Fixed static assets and the MongoDB client are created in the lifespan and
      stored on app.state; a missing asset aborts startup
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - app.state carries the shared client instead of a module-level singleton,
      handlers receive it through Depends
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from usersvc import __version__
from usersvc.api.error_handlers import register_error_handlers
from usersvc.api.routes import health, pages, users
from usersvc.config import get_settings
from usersvc.infrastructure.database import MongoManager
from usersvc.infrastructure.observability import setup_logging
from usersvc.infrastructure.static_assets import StaticAssets

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.assets = StaticAssets.load(settings.static_dir)
    app.state.mongo = MongoManager(
        settings.mongo_uri,
        settings.mongo_database,
        users_collection=settings.users_collection,
        server_selection_timeout_ms=settings.mongo_server_selection_timeout_ms,
    )
    logger.info(
        f"Users API started (database={settings.mongo_database}, "
        f"error_mapping={settings.error_mapping})",
    )
    try:
        yield
    finally:
        app.state.mongo.close()
        logger.info("Users API shutting down")


app = FastAPI(title="Users API", version=__version__, lifespan=lifespan)

settings = get_settings()
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(health.router)
app.include_router(users.router)
app.include_router(pages.router)

register_error_handlers(app)
