# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import user_router, user_body_validation_handler
from .core.config import get_settings
from .di.container import reset_container
from .infrastructure.db.mongo_connection import close_mongo_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    The MongoDB client is created lazily on first use; shutdown closes it and
    drops the container that holds its collection handles.
    """
    settings = get_settings()
    logger.info(
        f"Users API starting (database '{settings.mongo_database_name}', "
        f"collection '{settings.mongo_users_collection}')"
    )
    
    yield
    
    close_mongo_connection()
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    
    application = FastAPI(
        title="Users API",
        version="1.0.0",
        description="Create, read and update user records stored in MongoDB",
        lifespan=lifespan
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    # Register API routers
    application.include_router(user_router, prefix=settings.api_prefix)
    application.add_exception_handler(RequestValidationError, user_body_validation_handler)
    
    @application.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}
    
    return application


# Create application instance
app = create_application()
