from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

PDF_MEDIA_TYPE = "application/pdf"


class UploadStatusKind(str, Enum):
    """Outcome of an upload attempt."""

    SUCCESS = "success"
    ERROR = "error"


class UploadStatus(BaseModel):
    """User-visible result of the most recent upload attempt.

    Attributes:
        kind: Whether the attempt succeeded or failed.
        message: Text shown in the status banner.
    """

    model_config = ConfigDict(frozen=True)

    kind: UploadStatusKind
    message: str

    @classmethod
    def success(cls, message: str) -> "UploadStatus":
        return cls(kind=UploadStatusKind.SUCCESS, message=message)

    @classmethod
    def error(cls, message: str) -> "UploadStatus":
        return cls(kind=UploadStatusKind.ERROR, message=message)

    @property
    def is_success(self) -> bool:
        return self.kind is UploadStatusKind.SUCCESS


class ChatEntry(BaseModel):
    """One completed question/answer exchange.

    Attributes:
        id: Monotonic identifier assigned by the chat history.
        question: The question exactly as submitted.
        answer: The service answer, or the fixed fallback text on failure.
        timestamp: Local time of day the exchange completed.
        is_error: Whether the exchange failed.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    question: str
    answer: str
    timestamp: str
    is_error: bool = False


class SelectedFile(BaseModel):
    """A file picked by the user, detached from any UI widget.

    Attributes:
        name: Original filename.
        content_type: Declared media type reported by the browser.
        content: Raw file bytes.
    """

    name: str
    content_type: str
    content: bytes = b""


class EmbedResponse(BaseModel):
    """Body returned by the embedding endpoint.

    Attributes:
        success: Whether the document was processed. Null counts as failure.
        message: Optional explanation, mostly present on failure.
    """

    success: bool | None = False
    message: str | None = None

    @field_validator("message", mode="before")
    @classmethod
    def stringify_message(cls, v: Any) -> str | None:
        """Show non-text messages as text; falsy ones count as absent."""
        if v is None or isinstance(v, str):
            return v
        return str(v) if v else None


class AskRequest(BaseModel):
    """Body sent to the query endpoint."""

    question: str


class AskResponse(BaseModel):
    """Body returned by the query endpoint.

    Exactly one of the fields is expected. A reply carrying neither is
    treated as malformed by the client.

    Attributes:
        answer: Generated answer on success.
        error: Handled failure reported by the service.
    """

    answer: str | None = None
    error: str | None = None
