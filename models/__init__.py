from .collections import (
    COLLECTION_COMMENTS,
    COLLECTION_USERS,
    COLLECTION_SITE_CONTENT,
    SITE_CONTENT_DOCUMENT
)
from .comment import (
    EDITABLE_COMMENT_FIELDS,
    OPTIONAL_COMMENT_FIELDS,
    new_comment_document,
    utcnow
)
from .site_content import DEFAULT_SITE_CONTENT, SITE_CONTENT_FIELDS
from .user import ROLE_ADMIN, ROLE_USER, ROLE_RANK, role_satisfies, default_name

__all__ = [
    "COLLECTION_COMMENTS",
    "COLLECTION_USERS",
    "COLLECTION_SITE_CONTENT",
    "SITE_CONTENT_DOCUMENT",
    "EDITABLE_COMMENT_FIELDS",
    "OPTIONAL_COMMENT_FIELDS",
    "new_comment_document",
    "utcnow",
    "DEFAULT_SITE_CONTENT",
    "SITE_CONTENT_FIELDS",
    "ROLE_ADMIN",
    "ROLE_USER",
    "ROLE_RANK",
    "role_satisfies",
    "default_name"
]
