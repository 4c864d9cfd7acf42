"""Bloglist API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BloglistError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database engine created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: cleaner paired startup/shutdown
    - Handlers receive sessions through get_db, never the engine singleton
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.infrastructure.database import close_db, init_db
from app.infrastructure.observability import setup_logging
from app.config import get_settings
from app.api.routes import blogs, comments, health, login, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Bloglist API started")
    yield
    await close_db()
    logger.info("Bloglist API shut down")


app = FastAPI(
    title="Bloglist API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(blogs.router)
app.include_router(users.router)
app.include_router(login.router)
app.include_router(comments.router)

register_error_handlers(app)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
