import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from models import COLLECTION_USERS
from services import LocalAttachmentStore
from fakes import FakeFirestore, FakeIdentityProvider, FakeMailer
from helpers import ADMIN_TOKEN, USER_TOKEN, ORPHAN_TOKEN


@pytest.fixture
def settings(tmp_path):
    return Settings(
        uploads_dir=tmp_path / "uploads",
        public_dir=tmp_path / "public",
        email_user="info@example.com",
        smtp_host="smtp.example.com",
        smtp_port=465,
        rate_limit_enabled=False
    )


@pytest.fixture
def db():
    firestore = FakeFirestore()
    users = firestore.collection(COLLECTION_USERS)
    users.document("admin-uid").set({"email": "boss@example.com", "name": "Boss", "role": "admin"})
    users.document("user-uid").set({"email": "jane@example.com", "role": "user"})
    return firestore


@pytest.fixture
def identity():
    provider = FakeIdentityProvider()
    provider.add_account("admin-uid", "boss@example.com", "Boss", token=ADMIN_TOKEN)
    provider.add_account("user-uid", "jane@example.com", token=USER_TOKEN)
    # Valid credential without a users/{uid} record
    provider.add_account("orphan-uid", "ghost@example.com", token=ORPHAN_TOKEN)
    return provider


@pytest.fixture
def attachments(settings):
    return LocalAttachmentStore(settings.uploads_dir, settings.images_url_prefix)


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def test_app(settings, db, identity, attachments, mailer):
    return create_app(
        settings,
        db=db,
        identity_provider=identity,
        attachment_store=attachments,
        mailer=mailer
    )


@pytest.fixture
def client(test_app):
    return TestClient(test_app)
