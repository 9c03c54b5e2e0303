import logging
from typing import List, Optional

from models import COLLECTION_USERS, ROLE_USER, default_name, utcnow
from .exceptions import NotFoundError

logger = logging.getLogger(__name__)


class UserDirectory:
    """Admin view over identity-provider accounts and their role records.

    An account and its users/{uid} document are created and deleted together.
    """

    def __init__(self, db, identity_provider):
        self.db = db
        self.identity_provider = identity_provider

    def _user_document(self, uid: str):
        return self.db.collection(COLLECTION_USERS).document(uid)

    def list_users(self) -> List[dict]:
        users = []
        for record in self.identity_provider.list_users():
            snapshot = self._user_document(record.uid).get()
            user_data = snapshot.to_dict() if snapshot.exists else {}
            users.append({
                "uid": record.uid,
                "email": record.email,
                "name": user_data.get("name") or record.display_name or default_name(record.email),
                "role": user_data.get("role") or ROLE_USER,
                "createdAt": record.created_at,
            })
        return users

    def create_user(self, email: str, password: str, name: Optional[str] = None, role: str = ROLE_USER) -> dict:
        display_name = name or default_name(email)
        record = self.identity_provider.create_user(email=email, password=password, display_name=display_name)

        try:
            self._user_document(record.uid).set({
                "email": email,
                "name": display_name,
                "role": role,
                "createdAt": utcnow(),
            })
        except Exception:
            # Roll back so no account exists without its role record
            logger.exception("Failed to store role record for %s, removing identity account", record.uid)
            self.identity_provider.delete_user(record.uid)
            raise

        logger.info("Created user %s with role %s", record.uid, role)
        return {"uid": record.uid, "email": record.email or email, "name": display_name, "role": role}

    def update_role(self, uid: str, role: str) -> dict:
        ref = self._user_document(uid)
        if not ref.get().exists:
            raise NotFoundError(f"User {uid} not found")
        ref.update({"role": role})
        logger.info("Role of user %s set to %s", uid, role)
        return {"success": True, "uid": uid, "role": role}

    def delete_user(self, uid: str) -> dict:
        self.identity_provider.delete_user(uid)
        self._user_document(uid).delete()
        logger.info("Deleted user %s", uid)
        return {"success": True, "uid": uid}
