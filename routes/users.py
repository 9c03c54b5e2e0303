from fastapi import APIRouter, Depends, HTTPException
from typing import List
import logging

from auth import Principal, get_current_admin
import schemas
from services import UserDirectory
from services.exceptions import EmailAlreadyExistsError, NotFoundError
from .deps import get_user_directory

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=List[schemas.UserResponse])
def get_users(
    users: UserDirectory = Depends(get_user_directory),
    current_admin: Principal = Depends(get_current_admin)
):
    """List every account with its role (Admin only)"""
    try:
        return users.list_users()
    except Exception:
        logger.exception("Error fetching users")
        raise HTTPException(status_code=500, detail="Failed to fetch users")


@router.post("", response_model=schemas.UserResponse, status_code=201)
def create_user(
    user: schemas.UserCreate,
    users: UserDirectory = Depends(get_user_directory),
    current_admin: Principal = Depends(get_current_admin)
):
    """Create an account and its role record (Admin only)"""
    try:
        return users.create_user(user.email, user.password, user.name, user.role)
    except EmailAlreadyExistsError:
        raise HTTPException(status_code=400, detail="Email already exists")
    except Exception:
        logger.exception("Error creating user")
        raise HTTPException(status_code=500, detail="Failed to create user")


@router.put("/{uid}", response_model=schemas.UserRoleResponse)
def update_user_role(
    uid: str,
    update: schemas.UserRoleUpdate,
    users: UserDirectory = Depends(get_user_directory),
    current_admin: Principal = Depends(get_current_admin)
):
    """Change a user's role (Admin only)"""
    try:
        return users.update_role(uid, update.role)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except Exception:
        logger.exception("Error updating user %s", uid)
        raise HTTPException(status_code=500, detail="Failed to update user")


@router.delete("/{uid}", response_model=schemas.UserDeleteResponse)
def delete_user(
    uid: str,
    users: UserDirectory = Depends(get_user_directory),
    current_admin: Principal = Depends(get_current_admin)
):
    """Delete an account and its role record (Admin only)"""
    try:
        return users.delete_user(uid)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="User not found")
    except Exception:
        logger.exception("Error deleting user %s", uid)
        raise HTTPException(status_code=500, detail="Failed to delete user")
