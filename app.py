from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from typing import Optional
import logging

from config import Settings, get_settings, setup_logging
from database import initialize_firebase, get_firestore_client, get_storage_bucket
from auth import FirebaseIdentityProvider
from services import EmailService, create_attachment_store
from routes import api_router
from routes.limiter import limiter

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    *,
    db=None,
    bucket=None,
    identity_provider=None,
    attachment_store=None,
    mailer=None
) -> FastAPI:
    """Build the application with explicitly constructed collaborators.

    Anything not passed in is built from settings; Firebase-backed pieces stay
    unset when no credentials are configured.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    if db is None or identity_provider is None or (bucket is None and settings.attachment_backend == "cloud"):
        firebase_app = initialize_firebase(settings)
        if firebase_app is not None:
            if db is None:
                db = get_firestore_client(firebase_app)
            if identity_provider is None:
                identity_provider = FirebaseIdentityProvider(firebase_app)
            if bucket is None and settings.attachment_backend == "cloud":
                bucket = get_storage_bucket(firebase_app, settings.storage_bucket)

    if attachment_store is None:
        attachment_store = create_attachment_store(settings, bucket)

    app = FastAPI(title="Site API", version="1.0.0")

    app.state.settings = settings
    app.state.db = db
    app.state.identity_provider = identity_provider
    app.state.attachment_store = attachment_store
    app.state.mailer = mailer or EmailService(settings)

    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    # Locally stored comment images are served next to the public site
    if settings.attachment_backend == "local":
        try:
            settings.uploads_dir.mkdir(parents=True, exist_ok=True)
            app.mount(
                settings.images_url_prefix,
                StaticFiles(directory=str(settings.uploads_dir)),
                name="comment-images"
            )
        except OSError as e:
            logger.warning("Could not mount uploaded images directory: %s", e)

    if settings.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(settings.public_dir), html=True), name="public")
    else:
        logger.warning("Public directory %s not found, static site disabled", settings.public_dir)

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
