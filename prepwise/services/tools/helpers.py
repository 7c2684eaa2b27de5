import logging
import random
from datetime import datetime, timezone
from typing import Any, Iterable, List, Mapping

logger = logging.getLogger(__name__)

INTERVIEW_COVERS = [
    "/adobe.png",
    "/amazon.png",
    "/facebook.png",
    "/hostinger.png",
    "/pinterest.png",
    "/quora.png",
    "/reddit.png",
    "/skype.png",
    "/spotify.png",
    "/telegram.png",
    "/tiktok.png",
    "/yahoo.png",
]


def get_random_interview_cover() -> str:
    """Pick a cover image path for a newly generated interview."""
    return f"/covers{random.choice(INTERVIEW_COVERS)}"


def utc_now_iso() -> str:
    """
    Current UTC time as ISO-8601 with millisecond precision and a 'Z' suffix.

    Fixed width keeps string ordering identical to chronological ordering,
    which the createdAt sorts rely on.
    """
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def split_techstack(techstack: Any) -> List[str]:
    """
    Normalize a techstack value into an ordered list of technology names.

    Accepts a comma-separated string ("React, Node") or a list of strings.
    Pieces are trimmed and blanks dropped; anything else yields an empty list.
    """
    if not techstack:
        return []
    if isinstance(techstack, str):
        pieces: Iterable[Any] = techstack.split(",")
    elif isinstance(techstack, (list, tuple)):
        pieces = techstack
    else:
        logger.warning(f"Ignoring techstack of unexpected type {type(techstack).__name__}")
        return []
    return [str(piece).strip() for piece in pieces if str(piece).strip()]


def format_transcript(transcript: Iterable[Mapping[str, Any]]) -> str:
    """Render transcript turns as newline-joined '- role: content' lines."""
    return "\n".join(f"- {turn['role']}: {turn['content']}" for turn in transcript)
