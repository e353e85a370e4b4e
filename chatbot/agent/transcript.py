"""Ordered, observable list of chat turns."""

import logging
from collections.abc import Callable, Iterator

from chatbot.models.schemas import Turn

logger = logging.getLogger(__name__)

TranscriptListener = Callable[[], None]


class Transcript:
    """Chronological sequence of turns.

    Append-only, except for replace_last which resolves a pending turn.
    Listeners run synchronously after every mutation so the UI can
    re-render and scroll to the newest turn. A failing listener is logged
    and does not stop the mutation or the remaining listeners.
    """

    def __init__(self) -> None:
        self._turns: list[Turn] = []
        self._listeners: list[TranscriptListener] = []

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(tuple(self._turns))

    def __getitem__(self, index: int) -> Turn:
        return self._turns[index]

    @property
    def turns(self) -> tuple[Turn, ...]:
        return tuple(self._turns)

    @property
    def last(self) -> Turn | None:
        return self._turns[-1] if self._turns else None

    def pending_count(self) -> int:
        return sum(1 for turn in self._turns if turn.is_pending)

    def has_pending(self) -> bool:
        return self.last is not None and self.last.is_pending

    def subscribe(self, listener: TranscriptListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: TranscriptListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def append(self, turn: Turn) -> None:
        """Add a turn at the end."""
        self._turns.append(turn)
        self._notify()

    def replace_last(self, turn: Turn) -> None:
        """Swap the final turn for ``turn``.

        Raises:
            IndexError: If the transcript is empty.
        """
        if not self._turns:
            raise IndexError("replace_last on an empty transcript")
        self._turns[-1] = turn
        self._notify()

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Transcript listener failed")
