# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api import image_router, measure_router, register_error_handlers
from .core.config import Settings, get_settings
from .di.base_container import BaseContainer
from .di.container import DIContainer
from .domain.repositories.measure_repository import MeasureRepository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Validates settings (failing fast on missing values), builds the dependency
    container unless one was injected, and makes sure the database indexes
    exist. On shutdown the container releases its connections.
    """
    settings: Settings = app.state.settings
    settings.validate()

    if app.state.container is None:
        app.state.container = DIContainer(settings)
    container: BaseContainer = app.state.container

    await container.get(MeasureRepository).ensure_indexes()
    logger.info("Meter reader started")

    yield

    await container.shutdown()
    logger.info("Application shutdown complete")


def create_application(
    settings: Optional[Settings] = None,
    container: Optional[BaseContainer] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error handlers
    - API route registration

    Args:
        settings: Settings to use (defaults to get_settings())
        container: Pre-built dependency container (tests); built at startup when omitted

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    application = FastAPI(
        title="Meter Reader API",
        version="1.0.0",
        description="Registers water and gas meter readings from photographs",
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.container = container

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials="*" not in settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    # Measure routes first so "/images/list" still lists customer "images"
    application.include_router(measure_router)
    application.include_router(image_router)

    return application


# Create application instance
app = create_application()
