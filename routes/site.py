from fastapi import APIRouter, Depends, HTTPException
import logging

from auth import Principal, get_current_admin
import schemas
from services import SiteContentStore
from .deps import get_site_content_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/site", tags=["Site Content"])


@router.get("/content", response_model=schemas.SiteContentResponse)
def get_site_content(store: SiteContentStore = Depends(get_site_content_store)):
    """Get homepage content (public)"""
    try:
        return store.read()
    except Exception:
        logger.exception("Error fetching site content")
        raise HTTPException(status_code=500, detail="Failed to fetch site content")


@router.put("/content", response_model=schemas.SiteContentResponse)
def update_site_content(
    content: schemas.SiteContentUpdate,
    store: SiteContentStore = Depends(get_site_content_store),
    current_admin: Principal = Depends(get_current_admin)
):
    """Update homepage content (Admin only)"""
    try:
        return store.write(content.model_dump(exclude_unset=True), current_admin.uid)
    except Exception:
        logger.exception("Error updating site content")
        raise HTTPException(status_code=500, detail="Failed to update site content")
