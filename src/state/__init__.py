"""Per-page session state: draft text, in-flight flags, upload status, chat history."""

from src.state.session import ChatHistory, SessionState

__all__ = ["ChatHistory", "SessionState"]
