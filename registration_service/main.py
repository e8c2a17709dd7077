# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import auth_router, health_router, register_error_handlers
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.container import get_container, reset_container
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Builds the DI container on startup and closes the MongoDB client on
    shutdown.
    """
    settings = get_settings()
    get_container()
    logger.info(
        f"{settings.app_name} {settings.app_version} started "
        f"(user repository backend: {settings.user_repository_backend})"
    )
    
    yield
    
    close_database()
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging
    - CORS middleware configuration
    - Domain exception handlers
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    setup_logging(settings.log_level)
    
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="User registration service (domain-driven layout)",
        lifespan=lifespan
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_error_handlers(application)
    
    application.include_router(health_router, prefix="/api/v1")
    application.include_router(auth_router, prefix="/api/v1/auth")
    
    return application


# Create application instance
app = create_application()
