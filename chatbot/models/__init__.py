from chatbot.models.schemas import (
    PENDING_TEXT,
    ApiErrorDetail,
    Candidate,
    Content,
    GenerateContentRequest,
    GenerateContentResponse,
    Part,
    Sender,
    Turn,
)

__all__ = [
    "PENDING_TEXT",
    "ApiErrorDetail",
    "Candidate",
    "Content",
    "GenerateContentRequest",
    "GenerateContentResponse",
    "Part",
    "Sender",
    "Turn",
]
