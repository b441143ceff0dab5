"""
Authentication Utility - JWT verification.

Tokens are issued by the platform's login flow (HS256, "sub" = user
ObjectId). This module only verifies them and loads the caller.

Provides:
- JWT token creation/verification
- FastAPI dependencies for protected routes
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import get_settings
from app.core.errors import AccountPendingApprovalError
from app.schemas.schemas import UserStatus, UserType
from app.services.mongo_service import UserService

# Bearer token extractor
bearer_scheme = HTTPBearer()


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token (used by scripts and tests)."""
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


async def get_current_user(credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme)) -> dict:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @app.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Token inválido ou expirado",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_token(credentials.credentials)
    if not payload:
        raise credentials_exception

    user_id = payload.get("sub")
    if not user_id:
        raise credentials_exception

    # Verify user exists
    user = await run_in_threadpool(UserService().find_by_id, user_id)
    if not user:
        raise credentials_exception

    return {
        "user_id": user["_id"],
        "email": user.get("email"),
        "name": user.get("name"),
        "type": user.get("type"),
        "status": user.get("status"),
    }


async def get_current_candidate(user: dict = Depends(get_current_user)) -> dict:
    """Dependency - Require an approved candidate account."""
    if user["type"] != UserType.candidate.value:
        raise HTTPException(status_code=401, detail="Não autorizado - apenas candidatos")

    if user["status"] != UserStatus.approved.value:
        raise AccountPendingApprovalError(user["status"])

    return user
