# clientdesk/main.py
import logging
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env BEFORE anything else
load_dotenv()

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .core.audit import configure_audit_log
from .core.config import Settings, get_settings
from .core.exceptions import DuplicateEmailError, NotFoundError, ValidationError
from .services.registry import ServiceRegistry, build_registry

# API routers
from .api import health
from .api.assignments import main as assignments_main_api
from .api.catalog import main as catalog_main_api
from .api.clients import main as clients_main_api
from .api.dashboard import main as dashboard_main_api
from .api.tickets import main as tickets_main_api

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[ServiceRegistry] = None,
) -> FastAPI:
    """
    Build the FastAPI application around one ServiceRegistry.
    Tests pass their own registry (usually with NoLatency) to stay isolated.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    configure_audit_log(settings.audit_log_file)

    app = FastAPI(title=settings.app_name, version=settings.app_version)
    app.state.settings = settings
    app.state.registry = registry or build_registry(settings)

    # ========================================================================
    # --- CORS ---
    # ========================================================================
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ========================================================================
    # --- DOMAIN ERROR HANDLERS ---
    # ========================================================================
    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})

    @app.exception_handler(DuplicateEmailError)
    async def duplicate_email_handler(request: Request, exc: DuplicateEmailError):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": exc.message})

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})

    # --- Routers ---
    app.include_router(health.router, prefix="/api")
    app.include_router(clients_main_api.router, prefix="/api", tags=["Clients"])
    app.include_router(catalog_main_api.router, prefix="/api", tags=["Service catalog"])
    app.include_router(assignments_main_api.router, prefix="/api", tags=["Client services"])
    app.include_router(tickets_main_api.router, prefix="/api", tags=["Tickets"])
    app.include_router(dashboard_main_api.router, prefix="/api", tags=["Dashboard"])

    logger.info(f"Starting {settings.app_name} in {settings.app_env} mode")
    return app

