ADMIN_TOKEN = "admin-token"
USER_TOKEN = "user-token"
ORPHAN_TOKEN = "orphan-token"

ADMIN_HEADERS = {"Authorization": f"Bearer {ADMIN_TOKEN}"}
USER_HEADERS = {"Authorization": f"Bearer {USER_TOKEN}"}
ORPHAN_HEADERS = {"Authorization": f"Bearer {ORPHAN_TOKEN}"}

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32

JANE = {"fullName": "Jane Doe", "email": "jane@x.com", "message": "Great service"}
