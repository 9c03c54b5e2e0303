import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import BaseModel

from database import get_db, get_identity_provider
from models import COLLECTION_USERS, ROLE_ADMIN, default_name, role_satisfies
from services.exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


class Principal(BaseModel):
    uid: str
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None

    def has_role(self, required: str) -> bool:
        return role_satisfies(self.role, required)


class IdentityVerifier:
    """Resolves a bearer token to a role-annotated principal.

    Signature and expiry checks are delegated to the identity provider; the
    role comes from the users/{uid} document. Nothing is cached between calls.
    """

    def __init__(self, identity_provider, db):
        self.identity_provider = identity_provider
        self.db = db

    def verify(self, token: str) -> Principal:
        if not token:
            raise AuthenticationError("No token")

        decoded = self.identity_provider.verify_token(token)
        uid = decoded.get("uid")
        if not uid:
            raise AuthenticationError("Token has no subject")

        snapshot = self.db.collection(COLLECTION_USERS).document(uid).get()
        if not snapshot.exists:
            raise AuthorizationError("User not found")

        user_data = snapshot.to_dict()
        email = decoded.get("email")
        return Principal(
            uid=uid,
            email=email,
            name=user_data.get("name") or default_name(email),
            role=user_data.get("role")
        )


def get_identity_verifier(
    provider=Depends(get_identity_provider),
    db=Depends(get_db)
) -> IdentityVerifier:
    return IdentityVerifier(provider, db)


def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    verifier: IdentityVerifier = Depends(get_identity_verifier)
) -> Principal:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return verifier.verify(credentials.credentials)
    except AuthenticationError as e:
        logger.info("Rejected bearer token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except AuthorizationError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


def require_role(role: str):
    """Route dependency admitting principals whose role satisfies `role`"""
    def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if not principal.has_role(role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"{role.capitalize()} access required",
            )
        return principal
    return dependency


get_current_admin = require_role(ROLE_ADMIN)
