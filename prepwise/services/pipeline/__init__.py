"""
Interview Pipeline Package

Architecture:
- llm_parser.py: Structured-output extraction from model text
- interview_generator.py: Question generation for API and voice-agent callers
- feedback_generator.py: Transcript scoring and feedback upsert
"""

from .llm_parser import extract_json, extract_json_array, extract_json_object
from .interview_generator import generate_interview, resolve_generation_args
from .feedback_generator import create_feedback

__all__ = [
    'extract_json',
    'extract_json_array',
    'extract_json_object',
    'generate_interview',
    'resolve_generation_args',
    'create_feedback',
]
