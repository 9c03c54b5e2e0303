from .comment import CommentResponse, CommentActionResponse
from .site_content import SiteContentUpdate, SiteContentResponse
from .user import (
    UserCreate,
    UserRoleUpdate,
    UserResponse,
    UserRoleResponse,
    UserDeleteResponse
)
from .auth import LoginRequest, PrincipalResponse, VerifyResponse
from .email import ContactInquiry

__all__ = [
    "CommentResponse", "CommentActionResponse",
    "SiteContentUpdate", "SiteContentResponse",
    "UserCreate", "UserRoleUpdate", "UserResponse", "UserRoleResponse", "UserDeleteResponse",
    "LoginRequest", "PrincipalResponse", "VerifyResponse",
    "ContactInquiry"
]
