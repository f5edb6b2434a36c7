"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from mindful_meals.api import analytics, households, pantry, reference, shopping_lists
from mindful_meals.config import get_settings
from mindful_meals.schemas.common import ErrorResponse
from mindful_meals.services.errors import InventoryError, ValidationError

settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting MindfulMeals API ({settings.environment})")
    yield


app = FastAPI(
    title="MindfulMeals API",
    description="Household pantry inventory, shopping lists and waste tracking",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(
        exc.status_code,
        ErrorResponse(message=exc.message, error=exc.error_code, errors=exc.errors),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"] if part != "body")
        errors.append(f"{location}: {err['msg']}" if location else err["msg"])
    return await inventory_error_handler(request, ValidationError("Validation failed", errors))


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"{request.method} {request.url.path} integrity error: {exc.orig}")
    return error_response(
        status.HTTP_409_CONFLICT,
        ErrorResponse(message="Resource already exists", error="CONFLICT"),
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"{request.method} {request.url.path} database error")
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(message="Internal server error", error="INTERNAL_ERROR"),
    )


# Register routers
app.include_router(households.router)
app.include_router(pantry.router)
app.include_router(shopping_lists.router)
app.include_router(analytics.router)
app.include_router(reference.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
