from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

# --- Shared/Base Models ---

class StoredRecord(BaseModel):
    """
    Base model for documents read back from Firestore.

    Identity and content fields hold whatever the caller or the model sent,
    so they are typed loosely; reads never reject a stored record.
    """
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = Field(default=None, description="Firestore document id.")
    userId: Any = Field(default=None, description="Id of the user who owns the record.")
    createdAt: Optional[str] = Field(default=None, description="UTC ISO-8601 creation timestamp.")

# --- Stored Records ---

class Interview(StoredRecord):
    """An interview generated for a user and stored in the interviews collection."""
    role: Any = None
    type: Any = None
    level: Any = None
    techstack: list[Any] = Field(default_factory=list)
    questions: list[Any] = Field(default_factory=list, description="Questions as returned by the model.")
    finalized: bool = True
    coverImage: Optional[str] = None


class Feedback(StoredRecord):
    """Model-written assessment of one user's attempt at an interview."""
    interviewId: Any = None
    totalScore: Any = None
    categoryScores: Any = Field(default=None, description="Scores keyed by rubric category, as returned by the model.")
    strengths: Any = None
    areasForImprovement: Any = None
    finalAssessment: Any = None

# --- API Request/Response Models ---

class TranscriptTurn(BaseModel):
    """One utterance of the interview conversation."""
    role: str
    content: str


class CreateFeedbackRequest(BaseModel):
    interviewId: str
    userId: str
    transcript: list[TranscriptTurn]
    feedbackId: Optional[str] = None


class CreateFeedbackResponse(BaseModel):
    success: bool
    feedbackId: Optional[str] = None


class ToolCallResult(BaseModel):
    """Result entry in the envelope voice agents use to correlate tool calls."""
    toolCallId: Any = None
    result: str


class ToolCallAck(BaseModel):
    results: list[ToolCallResult]
