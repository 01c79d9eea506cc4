"""
Task Reminder API - application factory and entry point.
"""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from .core.config import Settings, get_settings
from .core.database import Database
from .core.exceptions import AuthError, ServiceError
from .core.jwt_handler import TokenService
from .core.notifications import Notifier
from .routers import auth, tasks

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings):
    logging.basicConfig(
        level=settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; services are created on startup and released on shutdown"""
    settings = settings or get_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Starting Task Reminder API...")
        if settings.uses_default_secret:
            logger.warning("SECRET_KEY is not set, using the development default")

        database = Database(settings.database_url, echo=settings.debug)
        if database.init_db():
            logger.info("Database initialized successfully")
        else:
            logger.error("Database initialization failed")

        app.state.database = database
        app.state.token_service = TokenService(settings.secret_key, settings.algorithm)
        app.state.notifier = Notifier.from_settings(settings)
        if not app.state.notifier.configured:
            logger.warning("Email reminders disabled or SMTP credentials missing")

        logger.info("✅ Task Reminder API startup completed")
        yield

        logger.info("Shutting down Task Reminder API...")
        database.dispose()
        logger.info("Task Reminder API shutdown completed")

    app = FastAPI(
        title="Task Reminder API",
        description="Task management with email reminders",
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        """Log all requests with timing"""
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        response.headers["X-Process-Time"] = str(process_time)
        if request.url.path != "/health":
            logger.info(f"{request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)")
        return response

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError):
        headers = None
        if isinstance(exc, AuthError) and exc.status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return PlainTextResponse(exc.message, status_code=exc.status_code, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected body for {request.method} {request.url.path}: {exc.errors()}")
        return PlainTextResponse("Invalid request body", status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception: {exc}")
        return PlainTextResponse(
            "Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    app.include_router(auth.router)
    app.include_router(tasks.router)

    @app.get("/", tags=["service"])
    async def root():
        """Root endpoint"""
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "status": "running",
        }

    @app.get("/health", tags=["service"])
    def health_check(request: Request):
        """Health check endpoint"""
        db_healthy = request.app.state.database.check_connection()
        return {
            "service": settings.service_name,
            "version": settings.service_version,
            "status": "healthy" if db_healthy else "unhealthy",
            "database": "connected" if db_healthy else "disconnected",
            "timestamp": time.time(),
        }

    return app


def run():
    import uvicorn

    settings = get_settings()
    # Each worker (and each reload) builds its own application
    uvicorn.run(
        "task_reminder.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
