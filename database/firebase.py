import base64
import json
import logging
import os
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore, storage

from config import Settings

logger = logging.getLogger(__name__)


def load_credentials(settings: Settings) -> Optional[credentials.Certificate]:
    """Resolve a service-account credential from the environment.

    Base64 and raw JSON variables (for Vercel/production) take precedence over
    the file path used for local development.
    """
    cred_json = settings.firebase_credentials_json

    if settings.firebase_credentials_base64:
        try:
            cred_json = base64.b64decode(settings.firebase_credentials_base64).decode("utf-8")
        except (ValueError, UnicodeDecodeError) as e:
            logger.error("Error decoding base64 Firebase credentials: %s", e)

    if cred_json:
        try:
            cred = credentials.Certificate(json.loads(cred_json))
            logger.info("Firebase credentials loaded from environment variable")
            return cred
        except ValueError as e:
            logger.error("Invalid Firebase credentials in environment variable: %s", e)
            return None

    path = settings.firebase_credentials_path
    if path and os.path.exists(path):
        cred = credentials.Certificate(path)
        logger.info("Firebase credentials loaded from file path")
        return cred
    if path:
        logger.warning("FIREBASE_CREDENTIALS_PATH %s does not exist", path)

    return None


def initialize_firebase(settings: Settings) -> Optional[firebase_admin.App]:
    cred = load_credentials(settings)
    if cred is None:
        logger.warning(
            "Firebase credentials not found. Database, storage and authentication are disabled. "
            "Set FIREBASE_CREDENTIALS_JSON, FIREBASE_CREDENTIALS_BASE64 or FIREBASE_CREDENTIALS_PATH."
        )
        return None

    options = {}
    if settings.storage_bucket:
        options["storageBucket"] = settings.storage_bucket

    try:
        app = firebase_admin.get_app()
    except ValueError:
        app = firebase_admin.initialize_app(cred, options)
    logger.info("Firebase Admin SDK initialized successfully")
    return app


def get_firestore_client(app: firebase_admin.App):
    return firestore.client(app=app)


def get_storage_bucket(app: firebase_admin.App, name: Optional[str] = None):
    return storage.bucket(name, app=app)
