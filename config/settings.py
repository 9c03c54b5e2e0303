from functools import lru_cache
from pathlib import Path
from typing import List, Optional
import os

from dotenv import load_dotenv
from pydantic import BaseModel

MAX_UPLOAD_BYTES = 5 * 1024 * 1024


def is_serverless_environment() -> bool:
    """Check if running in a serverless environment"""
    # Vercel
    if os.getenv("VERCEL") or os.getenv("VERCEL_ENV"):
        return True
    # AWS Lambda
    if os.getenv("AWS_LAMBDA_FUNCTION_NAME"):
        return True
    return False


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes", "on")


class Settings(BaseModel):
    port: int = 3000
    log_level: str = "INFO"

    # Mail relay
    smtp_host: Optional[str] = None
    smtp_port: Optional[int] = None
    email_user: Optional[str] = None
    email_pass: Optional[str] = None
    smtp_validate_certs: bool = True

    # Firebase
    firebase_credentials_path: Optional[str] = None
    firebase_credentials_json: Optional[str] = None
    firebase_credentials_base64: Optional[str] = None
    storage_bucket: Optional[str] = None

    # Attachments
    attachment_backend: str = "local"
    uploads_dir: Path = Path("public/images/comments")
    images_url_prefix: str = "/images/comments"
    public_dir: Path = Path("public")
    max_upload_bytes: int = MAX_UPLOAD_BYTES

    cors_origins: List[str] = ["*"]
    rate_limit_enabled: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        if is_serverless_environment():
            default_uploads = Path("/tmp/uploads/comments")
        else:
            default_uploads = Path("public/images/comments")

        smtp_port = os.getenv("SMTP_PORT")
        origins = os.getenv("CORS_ORIGINS", "*").split(",")

        return cls(
            port=int(os.getenv("PORT", "3000")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            smtp_host=os.getenv("SMTP_HOST"),
            smtp_port=int(smtp_port) if smtp_port else None,
            email_user=os.getenv("EMAIL_USER"),
            email_pass=os.getenv("EMAIL_PASS"),
            smtp_validate_certs=_env_bool("SMTP_VALIDATE_CERTS", True),
            firebase_credentials_path=os.getenv("FIREBASE_CREDENTIALS_PATH"),
            firebase_credentials_json=os.getenv("FIREBASE_CREDENTIALS_JSON"),
            firebase_credentials_base64=os.getenv("FIREBASE_CREDENTIALS_BASE64"),
            storage_bucket=os.getenv("STORAGE_BUCKET"),
            attachment_backend=os.getenv("ATTACHMENT_BACKEND", "local").strip().lower(),
            uploads_dir=Path(os.getenv("UPLOADS_DIR", str(default_uploads))),
            public_dir=Path(os.getenv("PUBLIC_DIR", "public")),
            # Strip whitespace from origins
            cors_origins=[origin.strip() for origin in origins if origin.strip()],
            rate_limit_enabled=_env_bool("RATE_LIMIT_ENABLED", True),
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()
