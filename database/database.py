from fastapi import HTTPException, Request


def get_db(request: Request):
    """Firestore client constructed at startup by create_app()"""
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise HTTPException(status_code=503, detail="Database is not configured")
    return db


def get_attachment_store(request: Request):
    store = getattr(request.app.state, "attachment_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Attachment storage is not configured")
    return store


def get_identity_provider(request: Request):
    provider = getattr(request.app.state, "identity_provider", None)
    if provider is None:
        raise HTTPException(status_code=503, detail="Authentication is not configured")
    return provider


def get_mailer(request: Request):
    return request.app.state.mailer
