"""Reads and writes against the Firestore feedback collection."""
import logging
from typing import Any, Dict, Optional

from google.cloud.firestore import Client
from google.cloud.firestore_v1.base_query import FieldFilter

from prepwise.core.config import settings
from prepwise.services.store.interview_store import snapshot_to_dict

logger = logging.getLogger(__name__)


def _feedback(db: Client):
    return db.collection(settings.FEEDBACK_COLLECTION)


def save_feedback(db: Client, feedback: Dict[str, Any], feedback_id: Optional[str] = None) -> str:
    """
    Write a feedback document and return its id.

    With ``feedback_id`` the existing document is replaced; without it a new
    document is created, so repeated calls without an id produce duplicates.
    """
    collection = _feedback(db)
    doc_ref = collection.document(feedback_id) if feedback_id else collection.document()
    doc_ref.set(feedback)
    logger.info(f"Stored feedback {doc_ref.id} for interview {feedback.get('interviewId')}")
    return doc_ref.id


def get_feedback_by_interview_id(db: Client, interview_id: str, user_id: str) -> Optional[Dict[str, Any]]:
    """Any one feedback document for the (interview, user) pair, or None."""
    query = (
        _feedback(db)
        .where(filter=FieldFilter("interviewId", "==", interview_id))
        .where(filter=FieldFilter("userId", "==", user_id))
        .limit(1)
    )
    docs = list(query.stream())
    if not docs:
        return None
    return snapshot_to_dict(docs[0])
