from google.cloud.firestore import Client

from prepwise.core.firebase import get_firestore_client
from prepwise.core.llm import GeminiTextModel

_text_model = GeminiTextModel()


def get_db() -> Client:
    """
    Dependency providing the shared Firestore client.
    Firebase Admin is initialized on first use.
    """
    return get_firestore_client()


def get_text_model() -> GeminiTextModel:
    """Dependency providing the Gemini text model used by the pipelines."""
    return _text_model
