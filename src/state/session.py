"""In-memory session state shared by the upload and query workflows.

One SessionState exists per open assistant page. Controllers mutate it and
call ``notify()``; the page subscribes to redraw the panels that are not
covered by NiceGUI bindings. Nothing here is persisted.
"""

import itertools
import logging
from collections.abc import Callable, Iterator
from datetime import datetime

from src.models.schemas import ChatEntry, UploadStatus

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%I:%M:%S %p"

Listener = Callable[[], None]


class ChatHistory:
    """Newest-first sequence of completed exchanges.

    Entries are only ever added at the head and never changed or removed.
    IDs come from a per-history monotonic counter.
    """

    def __init__(self, clock: Callable[[], datetime] = datetime.now) -> None:
        self._entries: list[ChatEntry] = []
        self._ids = itertools.count(1)
        self._clock = clock

    def _next_id(self) -> int:
        return next(self._ids)

    def prepend(self, question: str, answer: str, is_error: bool = False) -> ChatEntry:
        """Record a completed exchange at the head of the history.

        Args:
            question: The question as submitted.
            answer: Answer text to show for this exchange.
            is_error: Whether the exchange failed.

        Returns:
            The newly created entry.
        """
        entry = ChatEntry(
            id=self._next_id(),
            question=question,
            answer=answer,
            timestamp=self._clock().strftime(TIMESTAMP_FORMAT),
            is_error=is_error,
        )
        self._entries.insert(0, entry)
        return entry

    @property
    def entries(self) -> tuple[ChatEntry, ...]:
        return tuple(self._entries)

    @property
    def latest(self) -> ChatEntry | None:
        return self._entries[0] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> ChatEntry:
        return self._entries[index]

    def __iter__(self) -> Iterator[ChatEntry]:
        return iter(self._entries)


class SessionState:
    """Manages assistant state for a single page session."""

    def __init__(self, history: ChatHistory | None = None) -> None:
        self.question_draft: str = ""
        self.is_asking: bool = False
        self.is_uploading: bool = False
        self.upload_status: UploadStatus | None = None
        self.history: ChatHistory = history if history is not None else ChatHistory()
        self._listeners: list[Listener] = []

    @property
    def current_answer(self) -> str | None:
        """Answer of the most recently inserted history entry."""
        latest = self.history.latest
        return latest.answer if latest else None

    @property
    def last_entry_is_error(self) -> bool:
        latest = self.history.latest
        return bool(latest and latest.is_error)

    @property
    def can_ask(self) -> bool:
        return not self.is_asking and bool(self.question_draft.strip())

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def notify(self) -> None:
        """Call every listener; a failing listener does not stop the rest."""
        for listener in list(self._listeners):
            try:
                listener()
            except Exception as e:
                logger.warning(f"Session listener failed: {e}")
