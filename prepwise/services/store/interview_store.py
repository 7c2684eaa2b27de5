"""Reads and writes against the Firestore interviews collection."""
import logging
from typing import Any, Dict, List, Optional

from google.cloud.firestore import Client, Query
from google.cloud.firestore_v1.base_query import FieldFilter

from prepwise.core.config import settings

logger = logging.getLogger(__name__)


def snapshot_to_dict(snapshot) -> Dict[str, Any]:
    """Flatten a document snapshot into its data plus the document id."""
    return {"id": snapshot.id, **(snapshot.to_dict() or {})}


def _interviews(db: Client):
    return db.collection(settings.INTERVIEWS_COLLECTION)


def add_interview(db: Client, interview: Dict[str, Any]) -> str:
    """Insert an interview under a Firestore-assigned id and return that id."""
    _, doc_ref = _interviews(db).add(interview)
    logger.info(f"Stored interview {doc_ref.id} for user {interview.get('userId')}")
    return doc_ref.id


def get_interviews_by_user_id(db: Client, user_id: Optional[str]) -> List[Dict[str, Any]]:
    """All interviews owned by ``user_id``, newest first."""
    if not user_id:
        return []

    query = (
        _interviews(db)
        .where(filter=FieldFilter("userId", "==", user_id))
        .order_by("createdAt", direction=Query.DESCENDING)
    )
    return [snapshot_to_dict(doc) for doc in query.stream()]


def get_latest_interviews(db: Client, user_id: Optional[str], limit: int = 20) -> List[Dict[str, Any]]:
    """
    Discovery feed: finalized interviews owned by anyone except ``user_id``.

    Newest first, at most ``limit`` results. Needs the composite index
    declared in firestore.indexes.json.
    """
    if not user_id:
        return []

    query = (
        _interviews(db)
        .order_by("createdAt", direction=Query.DESCENDING)
        .where(filter=FieldFilter("finalized", "==", True))
        .where(filter=FieldFilter("userId", "!=", user_id))
        .limit(limit)
    )
    return [snapshot_to_dict(doc) for doc in query.stream()]


def get_interview_by_id(db: Client, interview_id: str) -> Optional[Dict[str, Any]]:
    snapshot = _interviews(db).document(interview_id).get()
    if not snapshot.exists:
        return None
    return snapshot_to_dict(snapshot)
