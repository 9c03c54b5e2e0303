from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse

from config import Settings
from .deps import get_app_settings
from .limiter import limiter

router = APIRouter(tags=["Health"])


@router.get("/")
@limiter.limit("100/minute")
async def root(request: Request, settings: Settings = Depends(get_app_settings)):
    """Contact page, or a status payload when the public site is not deployed"""
    contact_page = settings.public_dir / "contact.html"
    if contact_page.is_file():
        return FileResponse(contact_page)
    return {
        "status": "online",
        "message": "Site API is running",
        "version": "1.0.0"
    }


@router.get("/health")
@limiter.limit("100/minute")
async def health_check(request: Request):
    """Health check endpoint"""
    return {"status": "healthy"}
