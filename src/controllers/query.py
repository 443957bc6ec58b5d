"""Question workflow: submit a question and record the exchange.

Every accepted question ends up as exactly one entry at the head of the
chat history, whether the service answered or not.
"""

import logging

from src.client.errors import KnowledgeServiceError
from src.client.knowledge_client import KnowledgeServiceClient, get_knowledge_client
from src.controllers.keyboard import KeyPress, is_submit_key
from src.models.schemas import ChatEntry
from src.state.session import SessionState

logger = logging.getLogger(__name__)

ASK_FAILED_ANSWER = (
    "Error: Unable to get an answer. Please ensure the server is running "
    "and you have uploaded documents."
)


class QueryController:
    """Drives one question at a time for a session."""

    def __init__(
        self,
        session: SessionState,
        client: KnowledgeServiceClient | None = None,
    ) -> None:
        self._session = session
        self._client = client or get_knowledge_client()

    async def submit_question(self, text: str) -> ChatEntry | None:
        """Ask a question and prepend the outcome to the history.

        The draft is cleared and the in-flight flag raised before the
        request is sent, so the next question can be typed right away.

        Args:
            text: The question. Blank text is ignored.

        Returns:
            The recorded entry, or None if the question was not accepted.
        """
        if not text.strip():
            return None

        session = self._session
        if session.is_asking:
            logger.debug("Question already in flight, ignoring submission")
            return None

        question = text
        session.question_draft = ""
        session.is_asking = True
        session.notify()

        try:
            answer = await self._client.ask(question)
            entry = session.history.prepend(question, answer)
            logger.info(f"Answered question #{entry.id}")
        except KnowledgeServiceError as e:
            logger.warning(f"Question failed: {e}")
            entry = session.history.prepend(question, ASK_FAILED_ANSWER, is_error=True)
        except Exception:
            logger.exception("Unexpected error while asking a question")
            entry = session.history.prepend(question, ASK_FAILED_ANSWER, is_error=True)
        finally:
            session.is_asking = False
            session.notify()

        return entry

    async def submit_draft(self) -> ChatEntry | None:
        """Submit whatever is currently typed in the question box."""
        return await self.submit_question(self._session.question_draft)

    async def handle_key_press(self, press: KeyPress) -> ChatEntry | None:
        """Submit the draft on a plain Enter; ignore anything else."""
        if not is_submit_key(press):
            return None
        return await self.submit_draft()
