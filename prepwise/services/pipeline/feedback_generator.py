import asyncio
import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from google.cloud.firestore import Client

from prepwise.core.prompts import generate_feedback_prompt
from prepwise.core.llm import TextModel
from prepwise.services.pipeline.llm_parser import extract_json_object
from prepwise.services.store import save_feedback
from prepwise.services.tools.helpers import format_transcript, utc_now_iso

logger = logging.getLogger(__name__)


def build_feedback_record(interview_id: str, user_id: str, assessment: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "interviewId": interview_id,
        "userId": user_id,
        "totalScore": assessment.get("totalScore"),
        "categoryScores": assessment.get("categoryScores"),
        "strengths": assessment.get("strengths"),
        "areasForImprovement": assessment.get("areasForImprovement"),
        "finalAssessment": assessment.get("finalAssessment"),
        "createdAt": utc_now_iso(),
    }


async def create_feedback(
    db: Client,
    model: TextModel,
    interview_id: str,
    user_id: str,
    transcript: Iterable[Mapping[str, Any]],
    feedback_id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Score a finished interview transcript and store the feedback.

    Returns {"success": True, "feedbackId": ...} or {"success": False};
    failures are logged here and never raised to the caller.
    """
    try:
        prompt = generate_feedback_prompt(format_transcript(transcript))
        text = await model.generate(prompt)
        assessment = extract_json_object(text)

        feedback = build_feedback_record(interview_id, user_id, assessment)
        resolved_id = await asyncio.to_thread(save_feedback, db, feedback, feedback_id)

        return {"success": True, "feedbackId": resolved_id}

    except Exception as e:
        logger.error(f"Error saving feedback for interview {interview_id}: {e}", exc_info=True)
        return {"success": False}
