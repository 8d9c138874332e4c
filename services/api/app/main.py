"""FastAPI application entry point."""

import logging
import sys
from contextlib import asynccontextmanager
from uuid import uuid4

from app.config import get_settings

settings = get_settings()

# Configure logging to output to stdout
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.database.base import Base
from app.database.engine import get_engine
from app.models import User  # noqa: F401 - register table metadata
from app.routers import health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup when schema auto-creation is enabled."""
    if settings.db_auto_create:
        Base.metadata.create_all(get_engine())
        logger.info("Database tables created")
    yield


app = FastAPI(
    title="FunApp API",
    description="Geo-restricted user signup and profile lookup",
    version="1.0.0",
    redirect_slashes=False,
    lifespan=lifespan,
)

def cors_origins(frontend_url: str | None) -> list[str]:
    """Origins allowed to call the API: FRONTEND_URL with and without www."""
    if not frontend_url:
        return []
    origins = [frontend_url]
    if "://www." in frontend_url:
        origins.append(frontend_url.replace("://www.", "://"))
    elif "://" in frontend_url:
        origins.append(frontend_url.replace("://", "://www."))
    return origins


app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(settings.frontend_url),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router)
app.include_router(users.router)


# Global exception handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with consistent format."""
    error_id = str(uuid4())

    # Determine error type
    if exc.status_code == 404:
        error_type = "not_found"
    elif exc.status_code == 409:
        error_type = "conflict"
    elif exc.status_code == 400:
        error_type = "validation"
    elif exc.status_code == 401 or exc.status_code == 403:
        error_type = "auth"
    else:
        error_type = "server_error"

    content = {
        "detail": str(exc.detail),
        "error_type": error_type,
        "error_id": error_id,
    }

    logger.warning(
        f"HTTP {exc.status_code} [{error_id}]: {exc.detail} - {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors with field details."""
    error_id = str(uuid4())

    # Format validation errors
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"])
        errors.append({"field": field, "message": error["msg"]})

    content = {
        "detail": "Validation error",
        "error_type": "validation",
        "error_id": error_id,
        "errors": errors,
    }

    logger.warning(
        f"Validation error [{error_id}]: {errors} - {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=content,
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all handler for unhandled exceptions."""
    error_id = str(uuid4())

    logger.error(
        f"Unhandled exception [{error_id}]: {type(exc).__name__}: {exc} - "
        f"{request.method} {request.url.path}",
        exc_info=True,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Internal server error",
            "error_type": "server_error",
            "error_id": error_id,
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=3000)
