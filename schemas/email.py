from pydantic import BaseModel, EmailStr, Field
from typing import Optional


class ContactInquiry(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    message: str = Field(min_length=1)
    # Field name kept as the contact form posts it
    Subject: Optional[str] = None
