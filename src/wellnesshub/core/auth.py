"""
Authentication service.

Verifies the signed bearer tokens issued by the identity provider (HS256 by
default, PyJWT) and hashes passwords for local registration (passlib).
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import HTTPException
from passlib.context import CryptContext

from ..domain.enums import Role
from .config import SecuritySettings, get_settings

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


@dataclass
class Principal:
    """Identity carried by a verified session token."""

    user_id: str
    email: str = ""
    name: str = ""
    role: Optional[Role] = None


class AuthService:
    """Authentication service for validating bearer tokens"""

    def __init__(self, settings: Optional[SecuritySettings] = None):
        self._settings = settings or get_settings().security

    def create_access_token(
        self,
        user_id: str,
        role: Optional[str] = None,
        email: str = "",
        name: str = "",
        expires_minutes: Optional[int] = None,
    ) -> str:
        """Issue a token in the identity provider's format (local tooling and tests)."""
        now = datetime.now(timezone.utc)
        minutes = expires_minutes if expires_minutes is not None else self._settings.access_token_expire_minutes
        payload: Dict[str, Any] = {
            "sub": user_id,
            "id": user_id,
            "email": email,
            "name": name,
            "iat": now,
            "exp": now + timedelta(minutes=minutes),
        }
        if role is not None:
            payload["role"] = role
        return jwt.encode(payload, self._settings.secret_key, algorithm=self._settings.algorithm)

    def verify_token(self, token: Optional[str]) -> Principal:
        """
        Validate a bearer token and return its principal.

        Raises:
            HTTPException: 401 if the token is missing, expired or malformed
        """
        if not token:
            raise HTTPException(
                status_code=401,
                detail="Unauthorized: No authentication token found",
                headers={"WWW-Authenticate": "Bearer"},
            )
        try:
            payload = jwt.decode(token, self._settings.secret_key, algorithms=[self._settings.algorithm])
        except jwt.ExpiredSignatureError:
            raise HTTPException(
                status_code=401,
                detail="Unauthorized: Token expired",
                headers={"WWW-Authenticate": "Bearer"},
            )
        except jwt.InvalidTokenError:
            logger.warning(f"Invalid token attempted: {token[:10]}...")
            raise HTTPException(
                status_code=401,
                detail="Unauthorized: Invalid token",
                headers={"WWW-Authenticate": "Bearer"},
            )

        user_id = payload.get("sub") or payload.get("id")
        if not user_id:
            raise HTTPException(
                status_code=401,
                detail="Unauthorized: Token has no subject",
                headers={"WWW-Authenticate": "Bearer"},
            )
        return Principal(
            user_id=str(user_id),
            email=payload.get("email") or "",
            name=payload.get("name") or "",
            role=Role.parse(payload.get("role")),
        )

    def get_principal_from_header(self, auth_header: Optional[str]) -> Principal:
        """Extract and validate the principal from an ``Authorization`` header."""
        if auth_header and auth_header.startswith("Bearer "):
            return self.verify_token(auth_header[7:].strip())
        return self.verify_token(None)


# Global instance
_auth_service: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get global authentication service instance (singleton)"""
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService()
    return _auth_service
