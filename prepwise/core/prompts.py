from typing import List

FEEDBACK_CATEGORIES = (
    "communication",
    "technical",
    "problemSolving",
    "cultureFit",
    "confidence",
)


def generate_interview_questions_prompt(
    role: str,
    level: str,
    interview_type: str,
    techstack: List[str],
    amount: int,
) -> str:
    """
    Generate the prompt for interview question generation.

    Args:
        role: The job role being interviewed for.
        level: Seniority level (e.g. 'junior', 'senior').
        interview_type: Interview focus (e.g. 'technical', 'behavioural', 'mixed').
        techstack: Technologies the questions should cover.
        amount: Exact number of questions to request.

    Returns:
        The formatted prompt string.
    """
    return (
        f"Generate ONLY a valid JSON array of {amount} interview questions.\n"
        "NO explanation. NO additional text.\n\n"
        f"Role: {role}\n"
        f"Level: {level}\n"
        f"Type: {interview_type}\n"
        f"Techstack: {', '.join(techstack)}\n\n"
        "The questions will be read aloud by a voice assistant, so do not use "
        "slashes, asterisks or other special characters.\n\n"
        "Return STRICT JSON like:\n"
        "[\"Question 1\", \"Question 2\", \"Question 3\"]"
    )


def generate_feedback_prompt(formatted_transcript: str) -> str:
    """
    Generate the scoring-rubric prompt for a finished mock interview.

    Args:
        formatted_transcript: Transcript lines in "- role: content" form.

    Returns:
        The formatted prompt string.
    """
    return (
        "You are a professional interviewer analyzing a mock interview.\n"
        "Evaluate the candidate strictly and thoroughly based on structured categories.\n"
        "Do NOT be lenient. Highlight mistakes or areas for improvement.\n\n"
        f"Transcript:\n{formatted_transcript}\n\n"
        "Score the candidate from 0 to 100 in the following areas (do not add extra categories):\n"
        "- Communication Skills: Clarity, articulation, structured responses\n"
        "- Technical Knowledge: Understanding of key concepts for the role\n"
        "- Problem-Solving: Ability to analyze problems and propose solutions\n"
        "- Cultural & Role Fit: Alignment with company values and job role\n"
        "- Confidence & Clarity: Confidence in responses, engagement, and clarity\n\n"
        "Return ONLY valid JSON in this exact format:\n"
        "{\n"
        "  \"totalScore\": number,\n"
        "  \"categoryScores\": {\n"
        + ",\n".join(f"    \"{name}\": number" for name in FEEDBACK_CATEGORIES)
        + "\n  },\n"
        "  \"strengths\": string[],\n"
        "  \"areasForImprovement\": string[],\n"
        "  \"finalAssessment\": string\n"
        "}"
    )
