"""Turn controller: one request/response cycle per user submission.

State machine per submission::

    IDLE -> SENDING -> {RESOLVED, FAILED} -> IDLE

Only one request is ever in flight. submit() ignores calls made while
SENDING, so the transcript never holds more than one pending turn even when
the UI's disabled controls are bypassed.
"""

import logging
from enum import Enum
from typing import Protocol

from chatbot.agent.gemini_client import GenerationError
from chatbot.agent.transcript import Transcript
from chatbot.models.schemas import Turn

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "Error: Unable to get response."


class TurnState(str, Enum):
    """Lifecycle of a single submission."""

    IDLE = "idle"
    SENDING = "sending"
    RESOLVED = "resolved"
    FAILED = "failed"


class TextGenerator(Protocol):
    async def generate(self, text: str) -> str:
        """Return generated text for a single user message."""


class TurnController:
    """Drives the transcript through one request/response cycle.

    Attributes:
        transcript: Turns shown to the user.
        draft: Current contents of the input field; cleared on submit.
        state: IDLE or SENDING between submissions.
        last_outcome: RESOLVED or FAILED for the most recent settled turn.
    """

    def __init__(
        self,
        generator: TextGenerator,
        transcript: Transcript | None = None,
    ) -> None:
        self._generator = generator
        self.transcript = transcript if transcript is not None else Transcript()
        self.draft: str = ""
        self.state = TurnState.IDLE
        self.last_outcome: TurnState | None = None
        self._active = True

    @property
    def is_sending(self) -> bool:
        return self.state is TurnState.SENDING

    @property
    def is_idle(self) -> bool:
        return not self.is_sending

    @property
    def active(self) -> bool:
        return self._active

    def close(self) -> None:
        """Detach from the UI; late responses will no longer touch the transcript."""
        self._active = False

    async def submit(self, raw_input: str) -> bool:
        """Run one chat turn for ``raw_input``.

        Args:
            raw_input: Text from the input field, sent untrimmed.

        Returns:
            True if the submission was processed, False if it was ignored
            (blank input, a request already in flight, or a closed controller).
        """
        if not raw_input.strip():
            return False
        if self.is_sending:
            logger.debug("Ignoring submit while a request is in flight")
            return False
        if not self._active:
            return False

        self.transcript.append(Turn.user(raw_input))
        self.draft = ""
        self.state = TurnState.SENDING
        try:
            self.transcript.append(Turn.pending())
            try:
                reply = await self._generator.generate(raw_input)
            except GenerationError as e:
                logger.warning(f"Generation failed ({e.kind}): {e}")
                self._resolve(Turn.bot(FAILURE_MESSAGE), TurnState.FAILED)
            except Exception:
                logger.exception("Unexpected error during generation")
                self._resolve(Turn.bot(FAILURE_MESSAGE), TurnState.FAILED)
            else:
                self._resolve(Turn.bot(reply), TurnState.RESOLVED)
        finally:
            self.state = TurnState.IDLE

        return True

    def _resolve(self, turn: Turn, outcome: TurnState) -> None:
        self.last_outcome = outcome
        if not self._active:
            logger.info(f"Discarding {outcome.value} turn for closed chat")
            return
        self.transcript.replace_last(turn)
        logger.info(f"Chat turn {outcome.value}")
