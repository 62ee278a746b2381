"""
Main FastAPI application for the PC Compatibility Engine
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError
from pccompat.core.config import settings
from pccompat.core.cache import cache
from pccompat.core.logging import get_logger, setup_logging, RequestResponseLoggingMiddleware

# Setup logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    logger.info("Starting PC Compatibility Engine...")
    logger.info(f"Version: {settings.version}")
    logger.info(f"Environment: {'development' if settings.debug else 'production'}")
    try:
        yield
    finally:
        logger.info("Shutting down PC Compatibility Engine...")
        await cache.clear()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Compatibility checks for PC component builds",
    version=settings.version,
    openapi_url=f"{settings.api_prefix}/openapi.json",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)


allowed_origins = list(settings.allowed_origins) if settings.allowed_origins else []
if settings.debug and '*' not in allowed_origins:
    # Development: allow all origins
    allowed_origins.append('*')

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_origin_regex=settings.allowed_origin_regex,
    allow_credentials='*' not in allowed_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type", "Accept", "Origin", "X-Requested-With"],
    max_age=86400
)
app.add_middleware(RequestResponseLoggingMiddleware)


# Centralized exception handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors"""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Request validation failed",
                "details": jsonable_encoder(exc.errors(), custom_encoder={Exception: str})
            }
        }
    )


@app.exception_handler(ValidationError)
async def pydantic_validation_exception_handler(request: Request, exc: ValidationError):
    """Handle pydantic errors raised while mapping catalog data"""
    logger.warning(f"Pydantic validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Data validation failed",
                "details": jsonable_encoder(exc.errors(include_url=False), custom_encoder={Exception: str})
            }
        }
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unexpected errors"""
    logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)

    # Don't expose internal errors in production
    error_details = str(exc) if settings.debug else None

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred",
                "details": error_details
            }
        }
    )


# Router registration
from pccompat.api.routes import health, compatibility  # noqa: E402

app.include_router(health.router, prefix=settings.api_prefix, tags=["Health"])
app.include_router(compatibility.router, prefix=settings.api_prefix, tags=["Compatibility"])
logger.info("Routers registered")


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.version,
        "docs": "/docs",
        "health": f"{settings.api_prefix}/health"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "pccompat.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level="info" if settings.debug else "warning"
    )
