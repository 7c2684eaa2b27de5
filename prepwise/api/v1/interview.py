import asyncio
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from prepwise.api.deps import get_db, get_text_model
from prepwise.core.config import settings
from prepwise.core.exceptions import NotFoundError
from prepwise.schemas.interview import CreateFeedbackRequest, CreateFeedbackResponse, Feedback, Interview
from prepwise.services.pipeline.feedback_generator import create_feedback
from prepwise.services.store import (
    get_feedback_by_interview_id,
    get_interview_by_id,
    get_interviews_by_user_id,
    get_latest_interviews,
)

logger = logging.getLogger(__name__)

interview_router = APIRouter()


@interview_router.get("/interviews", response_model=List[Interview])
async def list_user_interviews(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    db = Depends(get_db),
):
    """Interviews owned by the user, newest first."""
    return await asyncio.to_thread(get_interviews_by_user_id, db, user_id)


@interview_router.get("/interviews/latest", response_model=List[Interview])
async def list_latest_interviews(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    limit: int = Query(default=settings.DISCOVERY_FEED_LIMIT, ge=1),
    db = Depends(get_db),
):
    """Finalized interviews by other users, newest first."""
    return await asyncio.to_thread(get_latest_interviews, db, user_id, limit)


@interview_router.get("/interviews/{interview_id}", response_model=Interview)
async def read_interview(interview_id: str, db = Depends(get_db)):
    interview = await asyncio.to_thread(get_interview_by_id, db, interview_id)
    if interview is None:
        raise NotFoundError(f"Interview {interview_id} not found")
    return interview


@interview_router.get("/interviews/{interview_id}/feedback", response_model=Optional[Feedback])
async def read_feedback(
    interview_id: str,
    user_id: str = Query(..., alias="userId"),
    db = Depends(get_db),
):
    return await asyncio.to_thread(get_feedback_by_interview_id, db, interview_id, user_id)


@interview_router.post("/feedback", response_model=CreateFeedbackResponse, response_model_exclude_none=True)
async def generate_feedback(
    payload: Any = Body(default=None),
    model = Depends(get_text_model),
    db = Depends(get_db),
):
    """
    Score a finished interview transcript and store the feedback.

    A body that parses but does not match the request shape, and any
    failure while scoring, answer with a bare {"success": false}.
    """
    try:
        request = CreateFeedbackRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Rejected feedback request: {e.errors()}")
        return JSONResponse(status_code=400, content={"success": False})

    result = await create_feedback(
        db,
        model,
        interview_id=request.interviewId,
        user_id=request.userId,
        transcript=[turn.model_dump() for turn in request.transcript],
        feedback_id=request.feedbackId,
    )
    if not result["success"]:
        return JSONResponse(status_code=500, content=result)
    return result
