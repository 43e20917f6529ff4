"""
Application entry point. FastAPI app with middleware, routers and error mapping.
Run: uvicorn main:app --host 0.0.0.0 --port 8000
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import furniture_router, health_router, users_router
from core.config import get_settings
from core.exceptions import HttpException
from core.middleware import RequestTimingMiddleware, SecureHeadersMiddleware
from models.schemas import ErrorDetail
from repositories import FurnitureRepository, UserRepository
from services.furniture_service import FurnitureService
from services.user_service import UserService
from utils.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: seed or promote the admin account when configured.
    Shutdown: log only; in-memory stores need no teardown.
    """
    settings = get_settings()
    logger.info(
        "startup",
        extra={
            "app": settings.APP_NAME,
            "env": settings.ENVIRONMENT,
            "log_level": settings.LOG_LEVEL,
        },
    )
    if settings.seed_admin_enabled:
        await app.state.user_service.ensure_admin(settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
    yield
    logger.info("shutdown", extra={"app": settings.APP_NAME})


def create_app() -> FastAPI:
    """Factory for FastAPI app. Each call gets its own repositories, so tests stay isolated."""
    settings = get_settings()
    app = FastAPI(
        title=settings.APP_NAME,
        description="Furniture store API: users, addresses and furniture catalog",
        version="1.0.0",
        debug=settings.DEBUG,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.user_service = UserService(UserRepository())
    app.state.furniture_service = FurnitureService(FurnitureRepository())

    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(SecureHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(users_router, prefix=settings.API_PREFIX)
    app.include_router(furniture_router, prefix=settings.API_PREFIX)

    @app.exception_handler(HttpException)
    async def http_exception_handler(request: Request, exc: HttpException):
        if exc.status_code >= 500:
            logger.error("http_exception", extra={"path": request.url.path, "code": exc.code})
        error = ErrorDetail(detail=exc.message, code=exc.code)
        return JSONResponse(
            status_code=exc.status_code,
            content=error.model_dump(mode="json"),
            headers=exc.headers,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("unhandled_exception", extra={"path": request.url.path})
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    s = get_settings()
    uvicorn.run(
        "main:app",
        host=s.HOST,
        port=s.PORT,
        reload=s.ENVIRONMENT == "development",
        log_level=s.LOG_LEVEL.lower(),
    )
