from fastapi import APIRouter, Depends, HTTPException, status, Request
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials
from typing import Optional
import logging

from auth import IdentityVerifier, get_identity_verifier
from auth.utils import security
from models import ROLE_ADMIN
import schemas
from services.exceptions import AuthenticationError, AuthorizationError
from .limiter import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.post("/login", response_model=schemas.PrincipalResponse)
@limiter.limit("5/minute")
def login(
    request: Request,
    payload: schemas.LoginRequest,
    verifier: IdentityVerifier = Depends(get_identity_verifier)
):
    """Exchange an identity-provider ID token for the admin's profile - rate limited"""
    if not payload.token:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing token")

    try:
        principal = verifier.verify(payload.token)
    except AuthenticationError as e:
        logger.info("Login rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except AuthorizationError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User not found in database")

    if principal.role != ROLE_ADMIN:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin privileges required")

    return principal


@router.post("/verify", response_model=schemas.VerifyResponse)
def verify(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: IdentityVerifier = Depends(get_identity_verifier)
):
    """Check a bearer token and report who it belongs to"""
    if credentials is None:
        return JSONResponse(status_code=401, content={"valid": False, "error": "No token"})

    try:
        principal = verifier.verify(credentials.credentials)
    except AuthenticationError as e:
        logger.info("Token verification failed: %s", e)
        return JSONResponse(status_code=401, content={"valid": False, "error": "Invalid token"})
    except AuthorizationError:
        return JSONResponse(status_code=403, content={"valid": False, "error": "User not found"})

    return {"valid": True, **principal.model_dump()}
