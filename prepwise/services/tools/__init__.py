"""Small helpers shared by the interview and feedback pipelines."""
from .helpers import (
    format_transcript,
    get_random_interview_cover,
    split_techstack,
    utc_now_iso,
)

__all__ = [
    "format_transcript",
    "get_random_interview_cover",
    "split_techstack",
    "utc_now_iso",
]
