import re

import pytest

from config import Settings
from fakes import FakeBucket, RecordingAttachmentStore
from services import (
    CloudAttachmentStore,
    LocalAttachmentStore,
    create_attachment_store,
    discard_attachment,
    validate_image
)
from services.exceptions import AttachmentRejected
from services.storage_service import safe_filename


def test_validate_image_accepts_images():
    validate_image("image/jpeg", 1024)


def test_validate_image_rejects_other_types():
    with pytest.raises(AttachmentRejected) as exc:
        validate_image("application/pdf", 10)
    assert exc.value.status_code == 400

    with pytest.raises(AttachmentRejected):
        validate_image(None, 10)


def test_validate_image_caps_size_at_five_mib():
    validate_image("image/png", 5 * 1024 * 1024)
    with pytest.raises(AttachmentRejected) as exc:
        validate_image("image/png", 5 * 1024 * 1024 + 1)
    assert exc.value.status_code == 413


def test_safe_filename():
    assert safe_filename("Holiday pic (1).JPG") == "Holiday_pic__1_.jpg"
    assert safe_filename("../../etc/passwd") == "passwd"


def test_local_store_writes_collision_resistant_names(tmp_path):
    store = LocalAttachmentStore(tmp_path, "/images/comments")

    first = store.store(b"one", "photo.png", "image/png")
    second = store.store(b"two", "photo.png", "image/png")

    assert first != second
    assert re.fullmatch(r"/images/comments/photo-\d+-\d+\.png", first)
    assert (tmp_path / first.rsplit("/", 1)[-1]).read_bytes() == b"one"


def test_local_store_delete_tolerates_missing_file(tmp_path):
    store = LocalAttachmentStore(tmp_path)
    url = store.store(b"data", "a.gif", "image/gif")

    store.delete(url)
    store.delete(url)

    assert list(tmp_path.iterdir()) == []


def test_local_store_delete_stays_inside_directory(tmp_path):
    images = tmp_path / "images"
    outside = tmp_path / "keep.txt"
    outside.write_text("keep")
    store = LocalAttachmentStore(images)

    store.delete("/images/comments/../../keep.txt")

    assert outside.exists()


def test_cloud_store_uploads_public_object():
    bucket = FakeBucket("site-bucket")
    store = CloudAttachmentStore(bucket)

    url = store.store(b"bytes", "cat pic.png", "image/png")

    key = url.rsplit("/", 1)[-1]
    assert url == f"https://storage.googleapis.com/site-bucket/{key}"
    assert re.fullmatch(r"\d+_cat_pic\.png", key)
    blob = bucket.blobs[key]
    assert blob.data == b"bytes"
    assert blob.content_type == "image/png"
    assert blob.public is True


def test_cloud_store_delete_leaves_object():
    bucket = FakeBucket()
    store = CloudAttachmentStore(bucket)
    url = store.store(b"bytes", "a.png", "image/png")

    store.delete(url)

    assert len(bucket.blobs) == 1


def test_create_attachment_store_selects_backend(tmp_path):
    local = create_attachment_store(Settings(uploads_dir=tmp_path))
    assert isinstance(local, LocalAttachmentStore)

    cloud = create_attachment_store(Settings(attachment_backend="cloud"), FakeBucket())
    assert isinstance(cloud, CloudAttachmentStore)


def test_create_attachment_store_rejects_bad_configuration(tmp_path):
    with pytest.raises(ValueError):
        create_attachment_store(Settings(attachment_backend="cloud"))
    with pytest.raises(ValueError):
        create_attachment_store(Settings(attachment_backend="ftp", uploads_dir=tmp_path))


def test_discard_attachment_swallows_failures():
    failing = RecordingAttachmentStore(fail_delete=True)
    discard_attachment(failing, "/images/comments/a.png")

    store = RecordingAttachmentStore()
    discard_attachment(store, None)
    assert store.deleted == []
