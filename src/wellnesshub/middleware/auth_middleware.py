"""
Authentication middleware - validates the bearer session before request processing.

Public endpoints (health checks, docs, registration, reading blog posts)
are excluded. Role checks happen per endpoint (see ``api.deps.require_role``).
"""
import logging

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from ..api.schemas.common import ErrorResponse
from ..core.auth import get_auth_service

logger = logging.getLogger(__name__)


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """
    Middleware to enforce authentication on every non-public endpoint.

    On success ``request.state.principal`` and ``request.state.user_id`` are set.
    """

    PUBLIC_PATHS = {
        "/",
        "/favicon.ico",
        "/docs",
        "/redoc",
        "/openapi.json",
        "/health",
        "/health/ready",
        "/health/live",
        "/auth/register",
    }

    PUBLIC_PATH_PREFIXES = {
        "/docs",
        "/redoc",
    }

    # Readable without a session; writes under the same prefix still need one
    PUBLIC_GET_PREFIXES = {
        "/blog",
    }

    def is_public_endpoint(self, path: str, method: str = "GET") -> bool:
        normalized_path = path.rstrip("/") or "/"

        if normalized_path in self.PUBLIC_PATHS:
            return True

        for prefix in self.PUBLIC_PATH_PREFIXES:
            if path.startswith(prefix + "/"):
                return True

        if method == "GET":
            for prefix in self.PUBLIC_GET_PREFIXES:
                if path.startswith(prefix + "/"):
                    return True

        return False

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS" or self.is_public_endpoint(request.url.path, request.method):
            return await call_next(request)

        auth_service = get_auth_service()
        auth_header = request.headers.get("Authorization") or request.headers.get("authorization")

        try:
            principal = auth_service.get_principal_from_header(auth_header)
        except HTTPException as e:
            logger.warning(
                f"Authentication failed for {request.method} {request.url.path}: {e.detail} "
                f"(IP: {request.client.host if request.client else 'unknown'})"
            )
            body = ErrorResponse(
                error="UNAUTHORIZED",
                message=e.detail,
                details={"path": request.url.path, "method": request.method},
                request_id=getattr(request.state, "request_id", None) or "",
            )
            return JSONResponse(
                status_code=401,
                content=body.model_dump(by_alias=True),
                headers={"WWW-Authenticate": "Bearer"},
            )

        request.state.principal = principal
        request.state.user_id = principal.user_id
        logger.debug(f"Authenticated {principal.user_id} accessing {request.url.path}")

        return await call_next(request)
