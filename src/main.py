import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.core.exceptions.base import register_exception_handlers
from src.api.core.middleware.auth import auth_middleware
from src.api.core.middleware.logging import logging_middleware
from src.api.core.middleware.security import (
    PayloadSizeMiddleware,
    SecurityHeadersMiddleware,
)
from src.api.router import api_router
from src.core.config import load_app_config
from src.database.connection import AsyncSessionLocal
from src.utils.settings.app import AppSettings
from src.utils.logger import setup_logging

app_settings = AppSettings()
is_production = app_settings.is_production


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger = setup_logging(is_production, app_settings.LOG_LEVEL)
    app_settings.validate_prod()
    logger.info("Starting ToolkitForSEO API...")

    app.state.config = load_app_config()
    app.state.session_factory = AsyncSessionLocal
    logger.info(
        "Application configured",
        environment=app.state.config.environment,
        default_vendor=app.state.config.vendors.default_vendor,
        charge_failed_attempts=app.state.config.credits.charge_failed_attempts,
    )

    yield

    # Shutdown
    logger.info("Shutting down ToolkitForSEO API...")


app = FastAPI(
    title="ToolkitForSEO API",
    description="Credit-metered AI writing and SEO tools",
    version=app_settings.API_VERSION,
    lifespan=lifespan,
    docs_url=None if is_production else "/docs",
    redoc_url=None if is_production else "/redoc",
    openapi_url=None if is_production else "/openapi.json",
)

register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID"],
)

app.add_middleware(
    SecurityHeadersMiddleware,
    api_version=app_settings.API_VERSION,
    is_production=is_production,
)
app.add_middleware(PayloadSizeMiddleware)
app.middleware("http")(auth_middleware)
app.middleware("http")(logging_middleware)

app.include_router(api_router)


def run_dev_server():
    """Run development server with auto-reload."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=True, access_log=False
    )


def run_prod_server():
    """Run production server."""
    uvicorn.run(
        "src.main:app", host="0.0.0.0", port=8010, reload=False, access_log=False
    )
