"""
Create the first admin account (identity-provider user plus its role record),
or promote an existing account to admin.

Usage: python scripts/create_admin.py <email> <password> [name]
"""
import sys
import os

# Add parent directory to path so we can import from root
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from firebase_admin import auth

from auth import FirebaseIdentityProvider
from config import get_settings, setup_logging
from database import initialize_firebase, get_firestore_client
from models import COLLECTION_USERS, ROLE_ADMIN, default_name, utcnow
from services import UserDirectory
from services.exceptions import EmailAlreadyExistsError, NotFoundError


def create_admin(email: str, password: str, name: str = None) -> bool:
    settings = get_settings()
    setup_logging(settings.log_level)

    firebase_app = initialize_firebase(settings)
    if firebase_app is None:
        print("❌ Firebase credentials are not configured")
        return False

    db = get_firestore_client(firebase_app)
    directory = UserDirectory(db, FirebaseIdentityProvider(firebase_app))
    try:
        user = directory.create_user(email, password, name, role=ROLE_ADMIN)
        print(f"✅ Created admin user: {user['email']} ({user['uid']})")
        return True
    except EmailAlreadyExistsError:
        record = auth.get_user_by_email(email, app=firebase_app)

    try:
        directory.update_role(record.uid, ROLE_ADMIN)
    except NotFoundError:
        # Account exists without a role record yet
        db.collection(COLLECTION_USERS).document(record.uid).set({
            "email": email,
            "name": name or default_name(email),
            "role": ROLE_ADMIN,
            "createdAt": utcnow(),
        })
    print(f"✅ Promoted existing user to admin: {email}")
    return True


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print(__doc__)
        sys.exit(1)
    ok = create_admin(sys.argv[1], sys.argv[2], sys.argv[3] if len(sys.argv) > 3 else None)
    sys.exit(0 if ok else 1)
