from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class SiteContentUpdate(BaseModel):
    heroTitle: Optional[str] = None
    heroSubtitle: Optional[str] = None
    aboutText: Optional[str] = None
    contactInfo: Optional[str] = None


class SiteContentResponse(BaseModel):
    heroTitle: Optional[str] = None
    heroSubtitle: Optional[str] = None
    aboutText: Optional[str] = None
    contactInfo: Optional[str] = None
    updatedAt: Optional[datetime] = None
    updatedBy: Optional[str] = None
