"""
FastAPI application factory and main app configuration.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.errors import APIError
from .api.routers import appointments, auth, blog, health, practitioner, practitioners, user
from .api.schemas.common import ErrorResponse
from .core.config import get_settings
from .core.exceptions import WellnessHubException
from .core.rate_limiter import RateLimiter
from .core.structured_logger import configure_logging
from .domain.errors import DomainError
from .middleware.auth_middleware import AuthenticationMiddleware
from .middleware.performance_middleware import PerformanceMiddleware
from .middleware.request_id_middleware import RequestIDMiddleware

logger = logging.getLogger("wellnesshub")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    from beanie import init_beanie
    from motor.motor_asyncio import AsyncIOMotorClient
    import certifi

    from .adapters.db.mongo.models import DOCUMENT_MODELS

    settings = get_settings()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.app_env}, debug: {settings.debug}")

    mongo_uri = settings.database.uri
    timeout_ms = settings.database.server_selection_timeout_ms
    try:
        # Enable TLS only for Atlas SRV URIs
        if mongo_uri.startswith("mongodb+srv://"):
            client = AsyncIOMotorClient(
                mongo_uri,
                serverSelectionTimeoutMS=timeout_ms,
                tls=True,
                tlsCAFile=certifi.where(),
                tlsAllowInvalidCertificates=False,
            )
        else:
            client = AsyncIOMotorClient(mongo_uri, serverSelectionTimeoutMS=timeout_ms)

        await init_beanie(database=client[settings.database.db_name], document_models=DOCUMENT_MODELS)
    except Exception:
        logger.error("Database connection failed", exc_info=True)
        raise

    app.state.mongo_client = client
    logger.info("Database connection established")

    yield

    logger.info(f"Shutting down {settings.app_name}")
    client.close()
    app.state.mongo_client = None


def _error_response(request: Request, status_code: int, error: str, message: str, details=None, headers=None) -> JSONResponse:
    req_id = getattr(request.state, "request_id", None)
    body = ErrorResponse(error=error, message=message, request_id=req_id or "", details=details or {})
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True), headers=headers)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    configure_logging(settings.logging)

    app = FastAPI(
        title=settings.app_name,
        description="Wellness platform: practitioner directory, profiles, blog and appointment booking",
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # One limiter per process, injected into routes through api.deps.enforce_rate_limit
    app.state.rate_limiter = (
        RateLimiter.from_settings(settings.rate_limit) if settings.rate_limit.enabled else None
    )
    app.state.mongo_client = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_credentials=settings.cors.allow_credentials,
        allow_methods=settings.cors.allowed_methods,
        allow_headers=settings.cors.allowed_headers,
        max_age=600,
        expose_headers=["X-Request-ID", "X-Process-Time"],
    )
    app.add_middleware(AuthenticationMiddleware)
    app.add_middleware(PerformanceMiddleware)
    # Outermost, so every other middleware sees request.state.request_id
    app.add_middleware(RequestIDMiddleware)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(appointments.router)
    app.include_router(user.router)
    app.include_router(practitioner.router)
    app.include_router(practitioners.router)
    app.include_router(blog.router)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.info(f"DomainError: {exc.error_code} ({exc.status_code}) {exc.message}")
        return _error_response(
            request, exc.status_code, exc.error_code or "DOMAIN_ERROR", exc.message, exc.details
        )

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        req_id = getattr(request.state, "request_id", None)
        logger.warning(f"APIError: {exc.code} ({exc.http_status}) {exc.message} | request_id={req_id}")
        headers = None
        retry_after = getattr(exc, "retry_after", None)
        if retry_after:
            headers = {"Retry-After": str(max(1, int(round(retry_after))))}
        return _error_response(request, exc.http_status, exc.code, exc.message, exc.details, headers)

    @app.exception_handler(RequestValidationError)
    async def pydantic_error_handler(request: Request, exc: RequestValidationError):
        req_id = getattr(request.state, "request_id", None)
        error_details = exc.errors()
        logger.warning(f"ValidationError on {request.method} {request.url.path}: {error_details} | request_id={req_id}")

        missing = [e for e in error_details if e.get("type") == "missing"]
        if missing:
            message = "Missing required fields"
        else:
            error_messages = []
            for error in error_details:
                loc = " -> ".join(str(x) for x in error.get("loc", []))
                error_messages.append(f"{loc}: {error.get('msg', 'Validation error')}")
            message = f"Input validation failed: {'; '.join(error_messages)}"

        errors = [
            {"loc": list(e.get("loc", [])), "msg": e.get("msg", ""), "type": e.get("type", "")}
            for e in error_details
        ]
        return _error_response(
            request, 400, "INVALID_INPUT", message, {"errors": errors, "path": request.url.path}
        )

    @app.exception_handler(WellnessHubException)
    async def infrastructure_error_handler(request: Request, exc: WellnessHubException):
        logger.error(f"{type(exc).__name__}: {exc.message}", exc_info=exc)
        details = {"error": exc.message} if get_settings().is_development else None
        return _error_response(
            request, 500, "INTERNAL_ERROR", "An unexpected error has occurred. Please try again later.", details
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request: Request, exc: Exception):
        req_id = getattr(request.state, "request_id", None)
        logger.error(f"Unhandled error: {type(exc).__name__} | request_id={req_id}", exc_info=exc)
        details = {"error": str(exc)} if get_settings().is_development else None
        return _error_response(
            request, 500, "INTERNAL_ERROR", "An unexpected error has occurred. Please try again later.", details
        )

    @app.get("/", tags=["health"])
    async def root():
        """Root endpoint with API information."""
        return {
            "service": settings.app_name,
            "version": settings.app_version,
            "environment": settings.app_env,
            "status": "running",
            "docs": "/docs",
            "endpoints": {
                "health": "/health",
                "register": "POST /auth/register",
                "book_appointment": "POST /appointments",
                "my_appointments": "GET /user/appointments",
                "user_profile": "GET|PUT /user/profile",
                "directory": "GET /practitioners",
                "practitioner_detail": "GET /practitioners/{id}",
                "practitioner_appointments": "GET|PUT /practitioner/appointments",
                "practitioner_profile": "GET|PUT /practitioner/profile",
                "toggle_day": "PUT /practitioner/availability/{day}",
                "create_post": "POST /blog",
                "post": "GET|PUT /blog/{id}",
            },
        }

    return app


# Create the app instance
app = create_app()
