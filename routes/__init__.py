from fastapi import APIRouter
from .auth import router as auth_router
from .comments import router as comments_router
from .site import router as site_router
from .users import router as users_router
from .email import router as email_router
from .health import router as health_router

# Create main API router
api_router = APIRouter()

# Include all route modules
api_router.include_router(auth_router, tags=["Authentication"])
api_router.include_router(comments_router, tags=["Comments"])
api_router.include_router(site_router, tags=["Site Content"])
api_router.include_router(users_router, tags=["Users"])
api_router.include_router(email_router, tags=["Contact"])
api_router.include_router(health_router, tags=["Health"])

__all__ = ["api_router"]
