import logging

from models import (
    COLLECTION_SITE_CONTENT,
    SITE_CONTENT_DOCUMENT,
    DEFAULT_SITE_CONTENT,
    SITE_CONTENT_FIELDS,
    utcnow
)

logger = logging.getLogger(__name__)


class SiteContentStore:
    def __init__(self, db):
        self.db = db

    def _document(self):
        return self.db.collection(COLLECTION_SITE_CONTENT).document(SITE_CONTENT_DOCUMENT)

    def read(self) -> dict:
        """Stored homepage copy, or the defaults when nothing was ever written"""
        snapshot = self._document().get()
        if snapshot.exists:
            return snapshot.to_dict()
        return dict(DEFAULT_SITE_CONTENT)

    def write(self, fields: dict, writer_id: str) -> dict:
        content_data = {
            key: value for key, value in fields.items()
            if key in SITE_CONTENT_FIELDS and value is not None
        }
        content_data["updatedAt"] = utcnow()
        content_data["updatedBy"] = writer_id

        ref = self._document()
        ref.set(content_data, merge=True)
        logger.info("Site content updated by %s", writer_id)
        return ref.get().to_dict()
