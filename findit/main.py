# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import health_router, media_router
from .core.config import get_settings, reset_settings
from .core.exceptions import ExternalServiceError, FinditError, get_user_message
from .core.logging_config import configure_logging
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup and shutdown hooks.

    Warns about missing vendor API keys on startup (calls then fall back to
    their default results) and closes the shared HTTP client on shutdown.
    """
    missing = get_settings().missing_api_keys()
    if missing:
        logger.warning(
            f"API keys not configured: {', '.join(missing)}. "
            f"Vision/LLM calls will return fallback results."
        )

    yield

    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)

    logger.info("Application shutdown complete")


async def findit_error_handler(request: Request, exc: FinditError) -> JSONResponse:
    """Return the user-facing message for application errors that escape a route."""
    logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    status_code = 502 if isinstance(exc, ExternalServiceError) else 400
    return JSONResponse(status_code=status_code, content={"detail": get_user_message(exc)})


def create_application() -> FastAPI:
    """
    Build the Findit API app.

    Reads .env, configures logging from settings, allows the mobile client
    origins and mounts the health and media routers.

    Returns:
        FastAPI app ready to be served by uvicorn
    """
    # .env next to the package root
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    # Settings may have been read before .env was loaded
    reset_settings()
    settings = get_settings()

    configure_logging(settings.log_level)

    application = FastAPI(
        title="Findit API",
        version="1.0.0",
        description="Photo/video OCR, classification, task suggestion and Q&A",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(FinditError, findit_error_handler)

    application.include_router(health_router)
    application.include_router(media_router, prefix="/api/v1")

    return application


# Module-level app for `uvicorn findit.main:app`
app = create_application()
