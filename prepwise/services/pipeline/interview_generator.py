"""
Interview generation for both direct API callers and voice-agent tool calls.

Flow:
1. Resolve the effective arguments (tool-call envelope or direct body)
2. Validate required fields
3. Prompt the model for a JSON array of questions
4. Extract the array and store the interview
5. Acknowledge in the tool-call result envelope
"""
import asyncio
import logging
from typing import Any, Dict, Optional, Tuple

from google.cloud.firestore import Client

from prepwise.core.config import settings
from prepwise.core.exceptions import InvalidPayloadError
from prepwise.core.llm import TextModel
from prepwise.core.prompts import generate_interview_questions_prompt
from prepwise.schemas.interview import ToolCallAck, ToolCallResult
from prepwise.services.pipeline.llm_parser import extract_json_array
from prepwise.services.store import add_interview
from prepwise.services.tools.helpers import get_random_interview_cover, split_techstack, utc_now_iso

logger = logging.getLogger(__name__)

TOOL_CALLS_MESSAGE_TYPE = "tool-calls"
REQUIRED_FIELDS = ("role", "type", "level", "userid")
MISSING_FIELDS_MESSAGE = "role, type, level, techstack, amount, userid are required."
GENERATED_MESSAGE = "Your interview has been successfully generated. You can now access it on the website."


def _first_tool_call(message: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(message, dict):
        return None
    calls = message.get("toolCallList")
    if isinstance(calls, list) and calls and isinstance(calls[0], dict):
        return calls[0]
    return None


def resolve_generation_args(payload: Any) -> Tuple[Dict[str, Any], Optional[str]]:
    """
    Decode a request body into (arguments, tool call id).

    A body whose ``message.type`` is "tool-calls" with a ``toolCallList``
    list carries its arguments inside the first call; any other body is the
    argument bag itself and has no call id. An empty call list yields empty
    arguments and no call id rather than an error.
    """
    if not isinstance(payload, dict):
        return {}, None

    message = payload.get("message")
    if (
        isinstance(message, dict)
        and message.get("type") == TOOL_CALLS_MESSAGE_TYPE
        and isinstance(message.get("toolCallList"), list)
    ):
        first_call = _first_tool_call(message) or {}
        tool_call_id = first_call.get("id")
        function = first_call.get("function") or {}
        args = function.get("arguments") if isinstance(function, dict) else None
        return (args if isinstance(args, dict) else {}), tool_call_id

    return payload, None


def validate_generation_args(args: Dict[str, Any]) -> None:
    """Raise InvalidPayloadError unless every required field is truthy."""
    if not all(args.get(field) for field in REQUIRED_FIELDS):
        raise InvalidPayloadError(MISSING_FIELDS_MESSAGE)


def build_interview_record(args: Dict[str, Any], techstack: list, questions: list) -> Dict[str, Any]:
    return {
        "role": args["role"],
        "type": args["type"],
        "level": args["level"],
        "techstack": techstack,
        "questions": questions,
        "userId": args["userid"],
        "finalized": True,
        "coverImage": get_random_interview_cover(),
        "createdAt": utc_now_iso(),
    }


async def generate_interview(payload: Any, model: TextModel, db: Client) -> ToolCallAck:
    """
    Generate, store and acknowledge an interview.

    Raises:
        InvalidPayloadError: A required field is missing.
        ExtractionError: The model reply is not a JSON array; nothing is stored.
    Model and Firestore errors propagate unchanged.
    """
    args, tool_call_id = resolve_generation_args(payload)
    validate_generation_args(args)

    techstack = split_techstack(args.get("techstack"))
    amount = args.get("amount") or settings.DEFAULT_QUESTION_AMOUNT

    prompt = generate_interview_questions_prompt(
        role=args["role"],
        level=args["level"],
        interview_type=args["type"],
        techstack=techstack,
        amount=amount,
    )

    logger.info(f"Generating {amount} {args['type']} questions for a {args['level']} {args['role']}")
    text = await model.generate(prompt)
    questions = extract_json_array(text)
    logger.info(f"Model returned {len(questions)} question(s)")

    interview = build_interview_record(args, techstack, questions)
    await asyncio.to_thread(add_interview, db, interview)

    return ToolCallAck(results=[ToolCallResult(toolCallId=tool_call_id, result=GENERATED_MESSAGE)])
