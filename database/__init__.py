from .database import (
    get_db,
    get_attachment_store,
    get_identity_provider,
    get_mailer
)
from .firebase import (
    initialize_firebase,
    get_firestore_client,
    get_storage_bucket
)

__all__ = [
    'get_db', 'get_attachment_store', 'get_identity_provider', 'get_mailer',
    'initialize_firebase', 'get_firestore_client', 'get_storage_bucket'
]
