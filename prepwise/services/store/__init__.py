"""Firestore data access for interviews and feedback."""
from .interview_store import (
    add_interview,
    get_interview_by_id,
    get_interviews_by_user_id,
    get_latest_interviews,
)
from .feedback_store import get_feedback_by_interview_id, save_feedback

__all__ = [
    "add_interview",
    "get_interview_by_id",
    "get_interviews_by_user_id",
    "get_latest_interviews",
    "get_feedback_by_interview_id",
    "save_feedback",
]
