from .comment_service import CommentRepository
from .site_content_service import SiteContentStore
from .user_service import UserDirectory
from .email_service import EmailService, build_subject
from .storage_service import (
    AttachmentStore,
    LocalAttachmentStore,
    CloudAttachmentStore,
    create_attachment_store,
    discard_attachment,
    validate_image
)

__all__ = [
    "CommentRepository", "SiteContentStore", "UserDirectory",
    "EmailService", "build_subject",
    "AttachmentStore", "LocalAttachmentStore", "CloudAttachmentStore",
    "create_attachment_store", "discard_attachment", "validate_image"
]
