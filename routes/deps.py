from fastapi import Depends, Request

from config import Settings
from database import get_attachment_store, get_db, get_identity_provider
from services import CommentRepository, SiteContentStore, UserDirectory


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_comment_repository(
    db=Depends(get_db),
    attachments=Depends(get_attachment_store)
) -> CommentRepository:
    return CommentRepository(db, attachments)


def get_site_content_store(db=Depends(get_db)) -> SiteContentStore:
    return SiteContentStore(db)


def get_user_directory(
    db=Depends(get_db),
    provider=Depends(get_identity_provider)
) -> UserDirectory:
    return UserDirectory(db, provider)
