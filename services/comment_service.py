import logging
from typing import List, Optional

from firebase_admin import firestore

from models import (
    COLLECTION_COMMENTS,
    EDITABLE_COMMENT_FIELDS,
    new_comment_document,
    utcnow
)
from .exceptions import NotFoundError
from .storage_service import AttachmentStore, discard_attachment

logger = logging.getLogger(__name__)


class CommentRepository:
    """CRUD over the comments collection.

    Records are returned as plain dicts carrying the document id under "id".
    The attachment store is only used to clean up images an update replaces
    or clears; deleting a comment's image is the caller's job.
    """

    def __init__(self, db, attachments: AttachmentStore):
        self.db = db
        self.attachments = attachments

    def _collection(self):
        return self.db.collection(COLLECTION_COMMENTS)

    def _existing(self, comment_id: str):
        ref = self._collection().document(comment_id)
        snapshot = ref.get()
        if not snapshot.exists:
            raise NotFoundError(f"Comment {comment_id} not found")
        return ref, snapshot.to_dict()

    def create(self, fields: dict, image_url: Optional[str] = None) -> dict:
        document = new_comment_document(fields, image_url)
        _, ref = self._collection().add(document)
        logger.info("Created comment %s", ref.id)
        return {"id": ref.id, **document}

    def list(self) -> List[dict]:
        query = self._collection().order_by("createdAt", direction=firestore.Query.DESCENDING)
        return [{"id": snapshot.id, **snapshot.to_dict()} for snapshot in query.stream()]

    def get_by_id(self, comment_id: str) -> Optional[dict]:
        snapshot = self._collection().document(comment_id).get()
        if not snapshot.exists:
            return None
        return {"id": snapshot.id, **snapshot.to_dict()}

    def approve(self, comment_id: str) -> dict:
        ref, _ = self._existing(comment_id)
        ref.update({"approved": True})
        logger.info("Approved comment %s", comment_id)
        return {"success": True, "id": comment_id}

    def update(
        self,
        comment_id: str,
        fields: dict,
        new_image_url: Optional[str] = None,
        remove_image: bool = False
    ) -> dict:
        ref, current = self._existing(comment_id)

        update_data = {
            key: value for key, value in fields.items()
            if key in EDITABLE_COMMENT_FIELDS and value is not None
        }

        old_image = current.get("imageUrl")
        stale_image = None
        if remove_image:
            update_data["imageUrl"] = None
            stale_image = old_image
        elif new_image_url:
            update_data["imageUrl"] = new_image_url
            if old_image != new_image_url:
                stale_image = old_image

        update_data["updatedAt"] = utcnow()
        ref.update(update_data)
        logger.info("Updated comment %s (%s)", comment_id, ", ".join(sorted(update_data)))

        discard_attachment(self.attachments, stale_image)

        current.update(update_data)
        return {"id": comment_id, **current}

    def delete(self, comment_id: str) -> dict:
        self._collection().document(comment_id).delete()
        logger.info("Deleted comment %s", comment_id)
        return {"success": True, "id": comment_id}
