from .settings import Settings, get_settings, is_serverless_environment, MAX_UPLOAD_BYTES
from .logging_setup import setup_logging

__all__ = ["Settings", "get_settings", "is_serverless_environment", "MAX_UPLOAD_BYTES", "setup_logging"]
