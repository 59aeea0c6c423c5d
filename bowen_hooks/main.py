"""
FastAPI main application
"""

import logging
import traceback
from contextlib import asynccontextmanager
from datetime import datetime

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .core.config import settings
from .core.errors import AppError
from .core.logging_config import configure_logging
from .api.router import api_router
from .db.database import SessionLocal, engine
from .infrastructure.cache.redis_cache import RedisCache

# Import all ORM models so relationships resolve
import bowen_hooks.infrastructure.orm  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    configure_logging(settings)
    logger.info("Starting %s API (%s)...", settings.PROJECT_NAME, settings.ENVIRONMENT)
    if getattr(app.state, "cache", None) is None:
        app.state.cache = RedisCache.from_url(settings.REDIS_URL)
    yield
    logger.info("Shutting down %s API...", settings.PROJECT_NAME)
    app.state.cache.close()
    engine.dispose()


def _error_body(message: str, code: str, exc: Exception, errors=None) -> dict:
    body = {"status": "error", "message": message, "code": code}
    if errors is not None:
        body["errors"] = errors
    if settings.DEBUG and not settings.is_production:
        body["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, exc.code, exc),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"].removeprefix("Value error, "),
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(_error_body("Validation failed", "VALIDATION_ERROR", exc, errors)),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body("Internal server error", "INTERNAL_ERROR", exc),
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title=f"{settings.PROJECT_NAME} API",
        description=settings.DESCRIPTION,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_HOSTS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    @app.get("/api/health")
    async def api_health():
        """Basic liveness check"""
        return {
            "status": "success",
            "message": f"{settings.PROJECT_NAME} API is running!",
            "timestamp": datetime.utcnow().isoformat(),
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
        }

    @app.get("/health")
    async def health_check():
        """Health check that probes the database and Redis"""
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            db_status = "healthy"
        except SQLAlchemyError as e:
            logger.error("Database health check failed: %s", e)
            db_status = "unhealthy"
        finally:
            db.close()

        cache = getattr(app.state, "cache", None)
        redis_status = "healthy" if cache is not None and cache.ping() else "unhealthy"

        return {
            "status": "healthy" if db_status == "healthy" and redis_status == "healthy" else "degraded",
            "database": db_status,
            "redis": redis_status,
            "version": settings.VERSION,
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "bowen_hooks.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )
