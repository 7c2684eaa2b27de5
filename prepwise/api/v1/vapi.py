import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from prepwise.api.deps import get_db, get_text_model
from prepwise.core.exceptions import AppError
from prepwise.services.pipeline.interview_generator import generate_interview

logger = logging.getLogger(__name__)

vapi_router = APIRouter()


@vapi_router.get("/vapi/generate")
async def generate_ping():
    return {"success": True, "data": "THANK YOU!"}


@vapi_router.post("/vapi/generate")
async def generate_interview_questions(
    payload: Any = Body(default=None),
    model = Depends(get_text_model),
    db = Depends(get_db),
):
    """
    Generate and store an interview.

    Serves two callers: the web client posting the arguments directly, and
    the voice agent posting a tool-call envelope. Both receive the
    results[].toolCallId/result acknowledgement on success.
    """
    try:
        ack = await generate_interview(payload, model, db)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"Server error while generating interview: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": {"message": str(e)}},
        )
    return ack.model_dump()
