from pydantic import BaseModel
from typing import Optional
from datetime import datetime


class CommentResponse(BaseModel):
    id: str
    fullName: str
    email: str
    company: str = ""
    phone: str = ""
    website: str = ""
    products: str = ""
    message: str
    imageUrl: Optional[str] = None
    approved: bool = False
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    class Config:
        from_attributes = True


class CommentActionResponse(BaseModel):
    success: bool
    id: str
