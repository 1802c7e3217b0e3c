from enum import Enum
from typing import List, Optional
import os

from dotenv import find_dotenv, load_dotenv


class ValueIsolation(str, Enum):
    """How dependency values are copied before being handed to a recompute function."""
    SHALLOW = "shallow"
    DEEP = "deep"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        # Graph behaviour
        isolation = os.getenv("VALUE_ISOLATION", ValueIsolation.SHALLOW.value).lower()
        try:
            self.VALUE_ISOLATION = ValueIsolation(isolation)
        except ValueError:
            raise ValueError(
                f"VALUE_ISOLATION must be one of "
                f"{', '.join(i.value for i in ValueIsolation)}, got {isolation!r}"
            ) from None
        self.VERIFY_TRANSITIONS = os.getenv("VERIFY_TRANSITIONS", "false").lower() == "true"

        # CORS
        self.ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173")

        # Application
        self.APP_TITLE = "Dataflow Graph"
        self.DEBUG = os.getenv("DEBUG", "false").lower() == "true"
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load a .env file (default: nearest one from the working directory) into the environment, then read settings."""
    load_dotenv(env_file or find_dotenv(usecwd=True), override=True)
    return Settings()


settings = load_settings()
