from pydantic import BaseModel, EmailStr, Field
from typing import Literal, Optional
from datetime import datetime

Role = Literal["admin", "user"]


class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)
    name: Optional[str] = None
    role: Role = "user"


class UserRoleUpdate(BaseModel):
    role: Role


class UserResponse(BaseModel):
    uid: str
    email: Optional[str] = None
    name: Optional[str] = None
    role: str
    createdAt: Optional[datetime] = None


class UserRoleResponse(BaseModel):
    success: bool
    uid: str
    role: str


class UserDeleteResponse(BaseModel):
    success: bool
    uid: str
