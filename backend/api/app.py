"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import get_settings
from shared.exceptions import ScholarisError

from .models.errors import ErrorResponse
from .routes import health
from modules.auth.routes import router as auth_router
from modules.billing.routes import router as subscription_router
from modules.categories.routes import navigation_router, router as categories_router
from modules.chat.routes import chats_router, router as chat_router
from modules.admin.routes import router as admin_router
from modules.quizzes.routes import router as quizzes_router
from modules.sponsors.routes import router as sponsors_router
from modules.blogs.routes import router as blogs_router
from modules.banners.routes import router as banners_router
from modules.updates.routes import router as updates_router

logger = logging.getLogger(__name__)


async def scholaris_error_handler(request: Request, exc: ScholarisError) -> JSONResponse:
    status_code = exc.status_code
    if status_code >= 500:
        logger.error("%s on %s %s: %s", exc.code, request.method, request.url.path, exc.message)

    headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
    body = ErrorResponse(error=exc.code, message=exc.message, details=exc.details)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


def public_validation_errors(exc: RequestValidationError) -> list[dict]:
    """
    Reduce validation errors to type, location and message.

    The raw entries carry the rejected input (passwords included) and, for
    custom validators, the exception object itself, which is not JSON.
    """
    return [
        {"type": error["type"], "loc": list(error["loc"]), "msg": error["msg"]}
        for error in exc.errors()
    ]


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = ErrorResponse(
        error="VALIDATION_ERROR",
        message="Request validation failed",
        details={"errors": public_validation_errors(exc)},
    )
    return JSONResponse(status_code=422, content=jsonable_encoder(body))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    body = ErrorResponse(error="INTERNAL_ERROR", message="Internal server error")
    return JSONResponse(status_code=500, content=jsonable_encoder(body))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="E-learning platform API: categories, subscriptions, AI chat and site content",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Error handling
    app.add_exception_handler(ScholarisError, scholaris_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, tags=["auth"])
    app.include_router(navigation_router, tags=["categories"])
    app.include_router(categories_router, prefix="/api/categories", tags=["categories"])
    app.include_router(subscription_router, prefix="/subscription", tags=["subscription"])
    app.include_router(chat_router, prefix="/api/chat", tags=["chat"])
    app.include_router(chats_router, tags=["chat"])
    app.include_router(admin_router, prefix="/api/admin", tags=["admin"])
    app.include_router(quizzes_router, prefix="/api/quizzes", tags=["quizzes"])
    app.include_router(sponsors_router, prefix="/api/sponsors", tags=["sponsors"])
    app.include_router(blogs_router, prefix="/api/blogs", tags=["blogs"])
    app.include_router(banners_router, prefix="/api/hero-banners", tags=["banners"])
    app.include_router(updates_router, prefix="/api/latest-updates", tags=["updates"])

    return app


# Application instance for uvicorn
app = create_app()
