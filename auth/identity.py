from datetime import datetime, timezone
from typing import Iterator, Optional

from firebase_admin import auth
from pydantic import BaseModel

from services.exceptions import AuthenticationError, EmailAlreadyExistsError, NotFoundError


class IdentityRecord(BaseModel):
    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    created_at: Optional[datetime] = None


def _to_record(user) -> IdentityRecord:
    created_at = None
    metadata = getattr(user, "user_metadata", None)
    if metadata is not None and metadata.creation_timestamp:
        created_at = datetime.fromtimestamp(metadata.creation_timestamp / 1000, tz=timezone.utc)
    return IdentityRecord(
        uid=user.uid,
        email=user.email,
        display_name=user.display_name,
        created_at=created_at
    )


class FirebaseIdentityProvider:
    """Firebase Auth bound to one initialized firebase_admin app"""

    def __init__(self, app=None):
        self.app = app

    def verify_token(self, token: str) -> dict:
        try:
            return auth.verify_id_token(token, app=self.app)
        except (ValueError, auth.InvalidIdTokenError, auth.UserDisabledError) as e:
            raise AuthenticationError(str(e)) from e

    def list_users(self) -> Iterator[IdentityRecord]:
        for user in auth.list_users(app=self.app).iterate_all():
            yield _to_record(user)

    def create_user(self, email: str, password: str, display_name: Optional[str] = None) -> IdentityRecord:
        try:
            user = auth.create_user(
                email=email,
                password=password,
                display_name=display_name,
                app=self.app
            )
        except auth.EmailAlreadyExistsError as e:
            raise EmailAlreadyExistsError("Email already exists") from e
        return _to_record(user)

    def delete_user(self, uid: str) -> None:
        try:
            auth.delete_user(uid, app=self.app)
        except auth.UserNotFoundError as e:
            raise NotFoundError(f"User {uid} not found") from e
