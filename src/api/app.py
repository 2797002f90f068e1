"""FastAPI application factory"""

import logging
import time
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

from config import DEFAULT_JWT_SECRET
from src.api.error import register_error_handlers
from src.api.routes import auth, exports, health, invoices

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


async def create_tables() -> None:
    # Imported here so every table class is registered on the metadata
    from src.depends import engine
    from src.domain import Admin, Invoice  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


def create_app(config) -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        sentry_sdk.init(
            dsn=config.DSN_SENTRY,
            environment=config.SENTRY_ENVIRONMENT,
        )
        logger.info("Sentry enabled")

    if config.JWT_SECRET == DEFAULT_JWT_SECRET:
        logger.warning("JWT_SECRET is the built-in default; set it in env.yaml before exposing the API")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if getattr(config, "DB_AUTO_CREATE", True):
            await create_tables()
        logger.info("Nota API started")
        yield

    app = FastAPI(title="Nota API", version="1.0.0", lifespan=lifespan)
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Content-Disposition"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            start_time = time.time()
            response = await call_next(request)
            duration_ms = int((time.time() - start_time) * 1000)
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms}ms)"
            )
            return response

    register_error_handlers(app)

    app.include_router(health.router, prefix=config.API_PREFIX)
    app.include_router(auth.router, prefix=config.API_PREFIX)
    app.include_router(invoices.router, prefix=config.API_PREFIX)
    app.include_router(exports.router, prefix=config.API_PREFIX)

    return app
