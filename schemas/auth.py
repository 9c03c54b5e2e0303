from pydantic import BaseModel
from typing import Optional


class LoginRequest(BaseModel):
    token: Optional[str] = None


class PrincipalResponse(BaseModel):
    uid: str
    email: Optional[str] = None
    name: Optional[str] = None
    role: Optional[str] = None


class VerifyResponse(PrincipalResponse):
    valid: bool
