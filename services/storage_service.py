import logging
import random
import re
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from config import MAX_UPLOAD_BYTES
from .exceptions import AttachmentRejected

logger = logging.getLogger(__name__)


def validate_image(content_type: Optional[str], size: int, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    """Only image uploads up to max_bytes are accepted"""
    if not content_type or not content_type.startswith("image/"):
        raise AttachmentRejected("Only image files are allowed!")
    if size > max_bytes:
        raise AttachmentRejected(
            f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB",
            status_code=413,
        )


def safe_filename(filename: str) -> str:
    """Keep the extension, replace anything but letters and digits in the base name"""
    name = Path(filename or "upload").name
    suffix = Path(name).suffix
    base = name[: -len(suffix)] if suffix else name
    return re.sub(r"[^a-zA-Z0-9]", "_", base) + suffix.lower()


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


class AttachmentStore(ABC):
    @abstractmethod
    def store(self, data: bytes, filename: str, content_type: str) -> str:
        """Persist the binary and return the URL it is served from."""

    @abstractmethod
    def delete(self, url: str) -> None:
        """Remove a previously stored attachment."""


class LocalAttachmentStore(AttachmentStore):
    def __init__(self, directory: Path, url_prefix: str = "/images/comments"):
        self.directory = Path(directory)
        self.url_prefix = url_prefix.rstrip("/")
        self.directory.mkdir(parents=True, exist_ok=True)

    def generate_filename(self, filename: str) -> str:
        cleaned = safe_filename(filename)
        suffix = Path(cleaned).suffix
        base = cleaned[: -len(suffix)] if suffix else cleaned
        unique_suffix = f"{_timestamp_ms()}-{random.randint(0, 10 ** 9)}"
        return f"{base}-{unique_suffix}{suffix}"

    def store(self, data: bytes, filename: str, content_type: str) -> str:
        unique_filename = self.generate_filename(filename)
        file_path = self.directory / unique_filename
        with open(file_path, "wb") as buffer:
            buffer.write(data)
        logger.info("Stored image %s (%d bytes)", unique_filename, len(data))
        return f"{self.url_prefix}/{unique_filename}"

    def delete(self, url: str) -> None:
        if not url:
            return
        # Only the basename is trusted so a URL can never point outside the directory
        image_path = self.directory / Path(url).name
        if image_path.exists():
            image_path.unlink()
            logger.info("Removed image %s", image_path.name)


class CloudAttachmentStore(AttachmentStore):
    """Firebase Storage bucket with publicly readable objects."""

    def __init__(self, bucket):
        self.bucket = bucket

    def store(self, data: bytes, filename: str, content_type: str) -> str:
        key = f"{_timestamp_ms()}_{safe_filename(filename)}"
        blob = self.bucket.blob(key)
        blob.upload_from_string(data, content_type=content_type)
        blob.make_public()
        logger.info("Uploaded image %s to bucket %s", key, self.bucket.name)
        return f"https://storage.googleapis.com/{self.bucket.name}/{key}"

    def delete(self, url: str) -> None:
        # Cloud objects are not reclaimed; no retention policy is defined for them.
        logger.warning("Cloud attachment not deleted (reclamation not implemented): %s", url)


def create_attachment_store(settings, bucket=None) -> AttachmentStore:
    if settings.attachment_backend == "cloud":
        if bucket is None:
            raise ValueError("ATTACHMENT_BACKEND=cloud requires a storage bucket (STORAGE_BUCKET)")
        return CloudAttachmentStore(bucket)
    if settings.attachment_backend != "local":
        raise ValueError(f"Unknown ATTACHMENT_BACKEND: {settings.attachment_backend}")
    return LocalAttachmentStore(settings.uploads_dir, settings.images_url_prefix)


def discard_attachment(store: AttachmentStore, url: Optional[str]) -> None:
    """Best-effort removal; failures are logged and never propagate"""
    if not url:
        return
    try:
        store.delete(url)
    except Exception as e:
        logger.warning("Could not delete old image %s: %s", url, e)
