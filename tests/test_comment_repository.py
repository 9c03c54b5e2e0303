import pytest

from fakes import FakeFirestore, RecordingAttachmentStore
from helpers import JANE
from services import CommentRepository
from services.exceptions import NotFoundError


@pytest.fixture
def store():
    return RecordingAttachmentStore()


@pytest.fixture
def repo(store):
    return CommentRepository(FakeFirestore(), store)


def test_create_sets_moderation_defaults(repo):
    comment = repo.create(dict(JANE))

    assert comment["approved"] is False
    assert comment["imageUrl"] is None
    assert comment["website"] == ""
    assert "updatedAt" not in comment
    assert repo.get_by_id(comment["id"]) == comment


def test_list_returns_every_comment_newest_first(repo):
    for i in range(3):
        repo.create({**JANE, "message": str(i)})

    comments = repo.list()

    assert len(comments) == 3
    created = [c["createdAt"] for c in comments]
    assert created == sorted(created, reverse=True)


def test_approve_is_idempotent(repo):
    comment = repo.create(dict(JANE))

    assert repo.approve(comment["id"]) == {"success": True, "id": comment["id"]}
    assert repo.approve(comment["id"]) == {"success": True, "id": comment["id"]}
    assert repo.get_by_id(comment["id"])["approved"] is True


def test_approve_missing_raises(repo):
    with pytest.raises(NotFoundError):
        repo.approve("missing")


def test_update_leaves_other_fields_untouched(repo):
    comment = repo.create(dict(JANE), image_url="/images/comments/a.png")

    updated = repo.update(comment["id"], {"message": "new"})

    assert updated["message"] == "new"
    for field in ("fullName", "email", "imageUrl", "approved", "createdAt"):
        assert updated[field] == comment[field]
    assert updated["updatedAt"] is not None
    assert repo.get_by_id(comment["id"]) == updated


def test_update_ignores_unknown_and_none_fields(repo):
    comment = repo.create(dict(JANE))

    updated = repo.update(comment["id"], {"fullName": None, "id": "hijack", "imageUrl": "/x.png"})

    assert updated["id"] == comment["id"]
    assert updated["fullName"] == "Jane Doe"
    assert updated["imageUrl"] is None


def test_update_with_new_image_discards_previous(repo, store):
    comment = repo.create(dict(JANE), image_url="/images/comments/old.png")

    updated = repo.update(comment["id"], {}, new_image_url="/images/comments/new.png")

    assert updated["imageUrl"] == "/images/comments/new.png"
    assert store.deleted == ["/images/comments/old.png"]


def test_update_with_new_image_and_no_previous_deletes_nothing(repo, store):
    comment = repo.create(dict(JANE))

    repo.update(comment["id"], {}, new_image_url="/images/comments/new.png")

    assert store.deleted == []


def test_remove_image_wins_over_new_image(repo, store):
    comment = repo.create(dict(JANE), image_url="/images/comments/old.png")

    updated = repo.update(comment["id"], {}, new_image_url="/images/comments/new.png", remove_image=True)

    assert updated["imageUrl"] is None
    assert store.deleted == ["/images/comments/old.png"]


def test_update_survives_cleanup_failure():
    repo = CommentRepository(FakeFirestore(), RecordingAttachmentStore(fail_delete=True))
    comment = repo.create(dict(JANE), image_url="/images/comments/old.png")

    updated = repo.update(comment["id"], {}, remove_image=True)

    assert updated["imageUrl"] is None
    assert repo.get_by_id(comment["id"])["imageUrl"] is None


def test_update_missing_raises(repo):
    with pytest.raises(NotFoundError):
        repo.update("missing", {"message": "x"})


def test_delete_then_lookup_is_not_found(repo, store):
    comment = repo.create(dict(JANE), image_url="/images/comments/a.png")

    assert repo.delete(comment["id"]) == {"success": True, "id": comment["id"]}
    assert repo.get_by_id(comment["id"]) is None
    # The repository leaves attachment cleanup to the caller
    assert store.deleted == []
