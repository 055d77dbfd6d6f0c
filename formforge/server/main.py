"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS),
registers exception handlers and includes the API routers.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from formforge.core.cache import close_cache
from formforge.core.database.session import engine, init_db
from formforge.core.logging_config import get_logger, setup_logging

from .api.v1 import health
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Initializes the database on startup; closes the Redis client and disposes
    of the database engine on shutdown.
    """
    logger.info("Starting up FormForge Server...")
    await init_db()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down FormForge Server...")
    await close_cache()
    await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="FormForge backend API.",
    version=constant.VERSION,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors.origins,
    allow_credentials=settings.cors.allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

app.include_router(health.router, tags=["health"])
