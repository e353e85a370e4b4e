"""HTTP client for the Gemini generateContent endpoint.

Sends a single user utterance and returns the first generated text.
Every failure is raised as a GenerationError subclass so callers can tell the
kinds apart in logs while treating them alike.
"""

import logging

import httpx
from pydantic import ValidationError

from chatbot.agent.config import ChatConfig
from chatbot.models.schemas import GenerateContentRequest, GenerateContentResponse

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Base class for failed generation calls."""

    kind = "generation"


class GeminiTransportError(GenerationError):
    """The request never completed (connection, DNS, timeout...)."""

    kind = "transport"


class GeminiHTTPError(GenerationError):
    """The API answered with a non-success HTTP status."""

    kind = "http_status"

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class GeminiResponseError(GenerationError):
    """Success status, but the body lacks the candidate/text shape."""

    kind = "malformed_response"


class GeminiAPIError(GenerationError):
    """The API returned a structured error object instead of candidates."""

    kind = "api_error"

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        status: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.status = status


class GeminiClient:
    """Async client for one-shot Gemini text generation.

    A fresh httpx.AsyncClient is opened per call. ``transport`` can be
    supplied to route requests elsewhere (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        config: ChatConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._transport = transport

    @property
    def config(self) -> ChatConfig:
        return self._config

    async def generate(self, text: str) -> str:
        """Generate a reply for a single user message.

        Args:
            text: The user's message, sent verbatim with no prior history.

        Returns:
            candidates[0].content.parts[0].text from the response.

        Raises:
            GeminiTransportError: The request could not be completed.
            GeminiAPIError: The body carried an ``error`` object.
            GeminiHTTPError: Non-2xx status without a usable error object.
            GeminiResponseError: 2xx status without generated text.
        """
        body = GenerateContentRequest.from_text(text).model_dump(exclude_none=True)
        logger.debug(
            f"Requesting generation from {self._config.model_name} ({len(text)} chars)"
        )

        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    self._config.generate_url,
                    params={"key": self._config.api_key},
                    json=body,
                    headers={"Content-Type": "application/json"},
                )
            except httpx.RequestError as e:
                # str(e) never includes the URL, so the key stays out of logs
                raise GeminiTransportError(
                    f"Connection failed: {type(e).__name__}: {e}"
                ) from e

        return self._parse(response)

    def _parse(self, response: httpx.Response) -> str:
        try:
            payload = GenerateContentResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            # ValueError covers undecodable JSON bodies
            if not response.is_success:
                raise GeminiHTTPError(
                    f"HTTP {response.status_code}", status_code=response.status_code
                ) from e
            raise GeminiResponseError(f"Unreadable response body: {e}") from e

        if payload.error is not None:
            raise GeminiAPIError(
                payload.error.message or "Gemini API returned an error",
                code=payload.error.code,
                status=payload.error.status,
            )

        if not response.is_success:
            raise GeminiHTTPError(
                f"HTTP {response.status_code}", status_code=response.status_code
            )

        generated = payload.first_text()
        if generated is None:
            raise GeminiResponseError("Invalid response from Gemini API")
        return generated
