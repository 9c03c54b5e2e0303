from .identity import FirebaseIdentityProvider, IdentityRecord
from .utils import (
    IdentityVerifier,
    Principal,
    get_current_admin,
    get_current_principal,
    get_identity_verifier,
    require_role
)

__all__ = [
    "FirebaseIdentityProvider",
    "IdentityRecord",
    "IdentityVerifier",
    "Principal",
    "get_current_admin",
    "get_current_principal",
    "get_identity_verifier",
    "require_role"
]
