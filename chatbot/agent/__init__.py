"""Chat turn logic and the Gemini client.

Responsibilities:
    - Configuration loading for the Gemini API
    - One-shot generateContent calls with classified failures
    - Transcript state with change notification
    - The turn controller that ties a submission to a transcript update

Maintains clean separation from the UI layer.
"""

from chatbot.agent.config import ChatConfig, get_chat_config
from chatbot.agent.controller import FAILURE_MESSAGE, TurnController, TurnState
from chatbot.agent.gemini_client import (
    GeminiAPIError,
    GeminiClient,
    GeminiHTTPError,
    GeminiResponseError,
    GeminiTransportError,
    GenerationError,
)
from chatbot.agent.transcript import Transcript

__all__ = [
    "FAILURE_MESSAGE",
    "ChatConfig",
    "GeminiAPIError",
    "GeminiClient",
    "GeminiHTTPError",
    "GeminiResponseError",
    "GeminiTransportError",
    "GenerationError",
    "Transcript",
    "TurnController",
    "TurnState",
    "get_chat_config",
]
