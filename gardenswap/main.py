# gardenswap/main.py

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from gardenswap.config.settings import Settings, get_settings, validate_settings
from gardenswap.logging_config import configure_logging, get_logger
from gardenswap.middleware import request_id_middleware
from gardenswap.routers import health, onboard
from gardenswap.supabase import create_service_supabase

logger = get_logger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    if settings is None:
        # ---------------------------------------------
        # LOAD ENVIRONMENT VARIABLES
        # ---------------------------------------------
        load_dotenv()
        settings = get_settings()

    validate_settings(settings)
    configure_logging(
        level=settings.LOG_LEVEL,
        app_name=settings.APP_NAME,
        environment=settings.ENVIRONMENT,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.SUPABASE_URL and settings.SUPABASE_SERVICE_ROLE_KEY:
            app.state.service_supabase = create_service_supabase(settings)
        else:
            logger.warning("supabase_not_configured")
        yield
        app.state.service_supabase = None

    # ---------------------------------------------
    # APP INIT
    # ---------------------------------------------
    app = FastAPI(
        title="Garden Swap API",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.service_supabase = None

    # ---------------------------------------------
    # CORS
    # ---------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_id_middleware)

    @app.exception_handler(Exception)
    async def unhandled_exception(request: Request, exc: Exception):
        logger.error("unhandled_exception", exc_info=exc)
        return JSONResponse({"error": "Unexpected server error"}, status_code=500)

    # ---------------------------------------------
    # ROUTERS
    # ---------------------------------------------
    app.include_router(health.router, prefix="/health")
    app.include_router(onboard.router, prefix="/api", tags=["Onboarding"])

    return app
