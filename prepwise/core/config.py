from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from dotenv import load_dotenv



# Get the path to the .env file
CONFIG_DIR = Path(__file__).resolve().parent
# .env lives in the project root (two levels up from prepwise/core)
PROJECT_ROOT = CONFIG_DIR.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / '.env'

# Load environment variables from .env file
load_dotenv(ENV_FILE_PATH)


def _strip_quotes(value: str) -> str:
    """Remove surrounding double quotes left over from copy-pasted .env values."""
    return value.strip('"')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding='utf-8',
        extra='ignore'
    )


    DEBUG_MODE: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    LOG_CLEAR_ON_STARTUP: bool = False


    # Gemini
    GEMINI_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"

    # Firebase Admin service account
    FIREBASE_PROJECT_ID: str = ""
    FIREBASE_CLIENT_EMAIL: str = ""
    FIREBASE_PRIVATE_KEY: str = ""

    # Firestore collections
    INTERVIEWS_COLLECTION: str = "interviews"
    FEEDBACK_COLLECTION: str = "feedback"

    # Interview generation
    DEFAULT_QUESTION_AMOUNT: int = 5
    DISCOVERY_FEED_LIMIT: int = 20

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    @field_validator("FIREBASE_PROJECT_ID", "FIREBASE_CLIENT_EMAIL", mode="before")
    @classmethod
    def _clean_identity(cls, value):
        if isinstance(value, str):
            return _strip_quotes(value.strip()).strip()
        return value

    @field_validator("FIREBASE_PRIVATE_KEY", mode="before")
    @classmethod
    def _clean_private_key(cls, value):
        # Keys pasted into .env carry literal "\n" sequences instead of newlines
        if isinstance(value, str):
            return _strip_quotes(value).replace("\\n", "\n")
        return value


# Initialize settings; credentials are checked when the clients are first built
settings = Settings()
