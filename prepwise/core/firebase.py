"""Firebase Admin bootstrap and the shared Firestore client."""
import logging
from typing import Optional

import firebase_admin
from firebase_admin import credentials, firestore
from google.cloud.firestore import Client as FirestoreClient

from prepwise.core.config import settings
from prepwise.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

_db: Optional[FirestoreClient] = None


def _service_account_info() -> dict:
    project_id = settings.FIREBASE_PROJECT_ID
    client_email = settings.FIREBASE_CLIENT_EMAIL
    private_key = settings.FIREBASE_PRIVATE_KEY

    if not project_id or not client_email or not private_key:
        raise ConfigurationError(
            "Missing Firebase Admin env vars. Check FIREBASE_PROJECT_ID, FIREBASE_CLIENT_EMAIL, FIREBASE_PRIVATE_KEY."
        )

    return {
        "type": "service_account",
        "project_id": project_id,
        "client_email": client_email,
        "private_key": private_key,
        "token_uri": GOOGLE_TOKEN_URI,
    }


def init_firebase_admin() -> firebase_admin.App:
    """Initialize the default Firebase app once per process and return it."""
    if not firebase_admin._apps:
        cred = credentials.Certificate(_service_account_info())
        firebase_admin.initialize_app(cred)
        logger.info(f"Firebase Admin initialized for project '{settings.FIREBASE_PROJECT_ID}'")
    return firebase_admin.get_app()


def get_firestore_client() -> FirestoreClient:
    global _db
    if _db is None:
        _db = firestore.client(init_firebase_admin())
    return _db
