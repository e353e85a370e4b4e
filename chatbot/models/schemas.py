"""Pydantic models for transcript turns and Gemini payloads.

Models:
    - Sender / Turn: One message in the chat transcript
    - GenerateContentRequest: Outbound body for generateContent
    - GenerateContentResponse: Inbound body (candidates or error)
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Placeholder text for a bot turn that is still awaiting its response.
PENDING_TEXT = "__typing__"


class Sender(str, Enum):
    """Who authored a turn."""

    USER = "user"
    BOT = "bot"


class Turn(BaseModel):
    """A single message in the transcript.

    Attributes:
        sender: The speaker (user or bot).
        text: The message text, or PENDING_TEXT while awaiting a reply.
        awaiting_reply: Set only on the placeholder built by ``pending()``,
            so a reply whose text equals PENDING_TEXT is still a real turn.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str
    awaiting_reply: bool = False

    @classmethod
    def user(cls, text: str) -> "Turn":
        return cls(sender=Sender.USER, text=text)

    @classmethod
    def bot(cls, text: str) -> "Turn":
        return cls(sender=Sender.BOT, text=text)

    @classmethod
    def pending(cls) -> "Turn":
        return cls(sender=Sender.BOT, text=PENDING_TEXT, awaiting_reply=True)

    @property
    def is_pending(self) -> bool:
        return self.awaiting_reply


class Part(BaseModel):
    """A text part of a Gemini content block."""

    model_config = ConfigDict(extra="ignore")

    text: str | None = None


class Content(BaseModel):
    """A Gemini content block made of parts."""

    model_config = ConfigDict(extra="ignore")

    parts: list[Part] = Field(default_factory=list)


class Candidate(BaseModel):
    """One generated candidate in a Gemini response."""

    model_config = ConfigDict(extra="ignore")

    content: Content | None = None


class GenerateContentRequest(BaseModel):
    """Request payload for the generateContent endpoint.

    Only the latest user utterance is sent; prior turns are not serialized.
    """

    contents: list[Content]

    @classmethod
    def from_text(cls, text: str) -> "GenerateContentRequest":
        return cls(contents=[Content(parts=[Part(text=text)])])


class ApiErrorDetail(BaseModel):
    """Structured error object returned by the Gemini API.

    Attributes:
        code: HTTP-style numeric code.
        message: Human-readable description (logged, never shown to users).
        status: Canonical status name, e.g. INVALID_ARGUMENT.
    """

    model_config = ConfigDict(extra="ignore")

    code: int | None = None
    message: str = ""
    status: str | None = None


class GenerateContentResponse(BaseModel):
    """Response payload from the generateContent endpoint."""

    model_config = ConfigDict(extra="ignore")

    candidates: list[Candidate] | None = None
    error: ApiErrorDetail | None = None

    def first_text(self) -> str | None:
        """Return candidates[0].content.parts[0].text, or None if absent or empty."""
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text or None
