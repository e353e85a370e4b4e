"""Chat configuration with environment variable loading.

Pydantic-based configuration for the Gemini client. The config is built once
at startup and passed to the client; nothing downstream reads the environment.
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-2.0-flash"


class ChatConfig(BaseModel):
    """Configuration for the Gemini chat client.

    Attributes:
        api_key: Gemini API key, sent as the ``key`` query parameter.
        base_url: API base URL up to and including the version segment.
        model_name: Model identifier used in the generateContent path.
        request_timeout: Seconds to wait for the API before giving up.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", ""),
        description="API key for the Gemini API",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        description="Gemini API base URL",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        description="Model to use",
    )
    request_timeout: float = Field(
        default=120.0,
        gt=0.0,
        description="HTTP timeout in seconds for a single generation call",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip whitespace; an empty key is allowed and fails remotely."""
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def generate_url(self) -> str:
        """Endpoint URL for generateContent, without the key parameter."""
        return f"{self.base_url}/models/{self.model_name}:generateContent"


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.
    """
    config = ChatConfig()
    if not config.api_key:
        logger.warning(
            "No Gemini API key configured. Set GEMINI_API_KEY in .env; "
            "requests will be rejected by the API."
        )
    return config
