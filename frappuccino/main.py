"""
Application entry point.
Run with:  uvicorn frappuccino.main:app --reload

Set SEED_DEMO_DATA=true to load a few demo ingredients and drinks on startup.
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from frappuccino.core.logging_config import configure_logging
from frappuccino.core.config import settings
from frappuccino.core.exception_handlers import configure_exception_handlers
from frappuccino.api.v1.router import api_router
from frappuccino.db.database import init_db
from frappuccino.db.seeder import seed_if_enabled

configure_logging()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance."""
    logger = logging.getLogger(__name__)
    logger.info("Starting FastAPI application setup")
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Inventory and menu management API for a coffee shop.",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # ── Middleware ──────────────────────────────────────────────────────────
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Error handling ──────────────────────────────────────────────────────
    configure_exception_handlers(app)

    # ── Routers ─────────────────────────────────────────────────────────────
    app.include_router(api_router)

    @app.get("/health", tags=["Health"])
    def health() -> dict:
        return {"status": "ok"}

    # ── Startup / shutdown events ───────────────────────────────────────────
    @app.on_event("startup")
    def on_startup() -> None:
        """Initialize the database and optional demo data."""
        logger.info("Initializing database")
        init_db()
        seed_if_enabled()

    return app


app = create_app()
