from datetime import datetime, timezone
from typing import Optional

OPTIONAL_COMMENT_FIELDS = ("company", "phone", "website", "products")
EDITABLE_COMMENT_FIELDS = (
    "fullName", "email", "message", "approved",
) + OPTIONAL_COMMENT_FIELDS


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_comment_document(fields: dict, image_url: Optional[str] = None) -> dict:
    """Build the stored shape of a freshly submitted comment."""
    document = {
        "fullName": fields.get("fullName"),
        "email": fields.get("email"),
        "message": fields.get("message"),
        "imageUrl": image_url,
        "approved": False,
        "createdAt": utcnow(),
    }
    for key in OPTIONAL_COMMENT_FIELDS:
        document[key] = fields.get(key) or ""
    return document
