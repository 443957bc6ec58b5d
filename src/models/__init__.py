"""Pydantic models for session data and knowledge service payloads.

Provides type safety and validation for everything crossing the HTTP boundary
and for the immutable records kept in the chat history.

Models:
    - UploadStatus: Result banner of the latest upload attempt
    - ChatEntry: One immutable question/answer exchange
    - SelectedFile: File chosen by the user, independent of the widget
    - EmbedResponse: Reply of the embedding endpoint
    - AskRequest / AskResponse: Query endpoint request and reply
"""

from src.models.schemas import (
    PDF_MEDIA_TYPE,
    AskRequest,
    AskResponse,
    ChatEntry,
    EmbedResponse,
    SelectedFile,
    UploadStatus,
    UploadStatusKind,
)

__all__ = [
    "PDF_MEDIA_TYPE",
    "AskRequest",
    "AskResponse",
    "ChatEntry",
    "EmbedResponse",
    "SelectedFile",
    "UploadStatus",
    "UploadStatusKind",
]
