import pytest

from fakes import FakeFirestore, FakeIdentityProvider
from helpers import ADMIN_HEADERS, USER_HEADERS
from models import COLLECTION_USERS
from services import UserDirectory


def test_list_users_requires_admin(client):
    assert client.get("/api/users").status_code == 401
    assert client.get("/api/users", headers=USER_HEADERS).status_code == 403


def test_list_users_joins_roles(client):
    response = client.get("/api/users", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    users = {u["uid"]: u for u in response.json()}
    assert users["admin-uid"]["role"] == "admin"
    assert users["admin-uid"]["name"] == "Boss"
    assert users["user-uid"]["name"] == "jane"
    # Accounts without a role record default to "user"
    assert users["orphan-uid"]["role"] == "user"
    assert users["orphan-uid"]["createdAt"]


def test_create_user_writes_account_and_role(client, identity, db):
    response = client.post(
        "/api/users",
        json={"email": "new@example.com", "password": "s3cret!", "role": "admin"},
        headers=ADMIN_HEADERS
    )

    assert response.status_code == 201
    body = response.json()
    assert body["email"] == "new@example.com"
    assert body["name"] == "new"
    assert body["role"] == "admin"
    assert body["uid"] in identity.accounts
    assert db.collection(COLLECTION_USERS).docs[body["uid"]]["role"] == "admin"


def test_create_user_with_existing_email_is_400(client):
    response = client.post(
        "/api/users",
        json={"email": "jane@example.com", "password": "pw"},
        headers=ADMIN_HEADERS
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Email already exists"


def test_create_user_validates_body(client):
    response = client.post("/api/users", json={"email": "not-an-email", "password": "pw"}, headers=ADMIN_HEADERS)
    assert response.status_code == 422


def test_update_role(client, db):
    response = client.put("/api/users/user-uid", json={"role": "admin"}, headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"success": True, "uid": "user-uid", "role": "admin"}
    assert db.collection(COLLECTION_USERS).docs["user-uid"]["role"] == "admin"


def test_update_role_rejects_unknown_role(client):
    response = client.put("/api/users/user-uid", json={"role": "owner"}, headers=ADMIN_HEADERS)
    assert response.status_code == 422


def test_update_role_of_missing_user_is_404(client):
    response = client.put("/api/users/ghost", json={"role": "user"}, headers=ADMIN_HEADERS)
    assert response.status_code == 404


def test_delete_user_removes_both_records(client, identity, db):
    response = client.delete("/api/users/user-uid", headers=ADMIN_HEADERS)

    assert response.status_code == 200
    assert response.json() == {"success": True, "uid": "user-uid"}
    assert "user-uid" not in identity.accounts
    assert "user-uid" not in db.collection(COLLECTION_USERS).docs


def test_delete_missing_user_is_404(client):
    assert client.delete("/api/users/ghost", headers=ADMIN_HEADERS).status_code == 404


class BrokenUsersFirestore(FakeFirestore):
    def collection(self, name):
        collection = super().collection(name)
        if name == COLLECTION_USERS:
            def fail(*args, **kwargs):
                raise RuntimeError("write failed")
            original_document = collection.document

            def document(doc_id=None):
                ref = original_document(doc_id)
                ref.set = fail
                return ref
            collection.document = document
        return collection


def test_create_user_rolls_back_identity_account_when_role_write_fails():
    provider = FakeIdentityProvider()
    directory = UserDirectory(BrokenUsersFirestore(), provider)

    with pytest.raises(RuntimeError):
        directory.create_user("new@example.com", "pw")

    assert provider.accounts == {}
