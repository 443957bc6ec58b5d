"""Unit tests for session records and service payload models."""

import pytest
import pytest_check as check
from pydantic import ValidationError

from src.models.schemas import (
    AskRequest,
    AskResponse,
    ChatEntry,
    EmbedResponse,
    UploadStatus,
    UploadStatusKind,
)


class TestUploadStatus:
    """Tests for UploadStatus."""

    def test_success_factory(self) -> None:
        """success() builds a success status."""
        status = UploadStatus.success("done")

        check.equal(status.kind, UploadStatusKind.SUCCESS)
        check.equal(status.message, "done")
        check.is_true(status.is_success)

    def test_error_factory(self) -> None:
        """error() builds an error status."""
        status = UploadStatus.error("nope")

        check.equal(status.kind, UploadStatusKind.ERROR)
        check.is_false(status.is_success)

    def test_kind_serializes_as_string(self) -> None:
        """Kind is dumped as its plain string value."""
        assert UploadStatus.error("x").model_dump(mode="json")["kind"] == "error"

    def test_status_is_immutable(self) -> None:
        """Statuses are replaced, never edited."""
        status = UploadStatus.success("done")

        with pytest.raises(ValidationError):
            status.message = "changed"


class TestChatEntry:
    """Tests for ChatEntry."""

    def test_entry_is_immutable(self) -> None:
        """Entries cannot be modified after creation."""
        entry = ChatEntry(id=1, question="q", answer="a", timestamp="01:00:00 PM")

        with pytest.raises(ValidationError):
            entry.answer = "other"

    def test_is_error_defaults_to_false(self) -> None:
        """Entries are successful unless flagged."""
        entry = ChatEntry(id=1, question="q", answer="a", timestamp="01:00:00 PM")

        assert entry.is_error is False

    def test_rejects_non_positive_id(self) -> None:
        """IDs start at 1."""
        with pytest.raises(ValidationError):
            ChatEntry(id=0, question="q", answer="a", timestamp="t")


class TestServicePayloads:
    """Tests for /embed and /ask payload models."""

    def test_embed_response_without_success_is_failure(self) -> None:
        """A reply lacking success counts as not successful."""
        result = EmbedResponse.model_validate({"message": "hmm"})

        check.is_false(result.success)
        check.equal(result.message, "hmm")

    def test_embed_response_null_success_is_failure(self) -> None:
        """success: null parses and is not successful."""
        result = EmbedResponse.model_validate({"success": None})

        assert not result.success

    def test_embed_response_stringifies_message(self) -> None:
        """Non-text messages become text; falsy ones are dropped."""
        check.equal(EmbedResponse.model_validate({"message": 42}).message, "42")
        check.is_none(EmbedResponse.model_validate({"message": 0}).message)

    def test_embed_response_ignores_extra_fields(self) -> None:
        """Unknown keys in the reply are tolerated."""
        result = EmbedResponse.model_validate({"success": True, "chunks": 12})

        assert result.success is True

    def test_embed_response_rejects_non_object(self) -> None:
        """A JSON list is not a valid reply."""
        with pytest.raises(ValidationError):
            EmbedResponse.model_validate(["success"])

    def test_ask_request_dump(self) -> None:
        """Request body is a single question field."""
        assert AskRequest(question="What is X?").model_dump() == {"question": "What is X?"}

    def test_ask_response_fields_are_optional(self) -> None:
        """Empty reply parses with both fields unset."""
        result = AskResponse.model_validate({})

        check.is_none(result.answer)
        check.is_none(result.error)

    def test_ask_response_rejects_non_string_answer(self) -> None:
        """Numeric answers are not coerced to text."""
        with pytest.raises(ValidationError):
            AskResponse.model_validate({"answer": 42})
