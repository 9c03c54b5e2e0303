"""Firestore collection names.

Firestore has no DDL; collections appear on first write. These constants are
the single source of truth for where each record type lives.
"""

COLLECTION_COMMENTS = "comments"
COLLECTION_USERS = "users"
COLLECTION_SITE_CONTENT = "siteContent"

# The site content collection holds exactly one document
SITE_CONTENT_DOCUMENT = "homepage"
