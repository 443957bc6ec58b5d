"""Upload workflow: validate a selected PDF and send it for embedding.

Handles file validation, the in-flight flag, and conversion of every
outcome into an UploadStatus.
"""

import logging
from collections.abc import Callable

from src.client.errors import ServiceRejection, TransportFailure, UnsupportedFileError
from src.client.knowledge_client import KnowledgeServiceClient, get_knowledge_client
from src.models.schemas import PDF_MEDIA_TYPE, SelectedFile, UploadStatus
from src.state.session import SessionState

logger = logging.getLogger(__name__)

NOT_PDF_MESSAGE = "Please upload a PDF file only."
UPLOAD_FAILED_MESSAGE = "Failed to process the file."
UPLOAD_NETWORK_ERROR_MESSAGE = (
    "Network error. Please ensure the server is running on port 3000."
)


def _validate_media_type(file: SelectedFile) -> SelectedFile:
    """Validate that the file declares the PDF media type.

    Args:
        file: The selected file.

    Returns:
        The validated file.

    Raises:
        UnsupportedFileError: If the declared type is not exactly PDF.
    """
    if file.content_type != PDF_MEDIA_TYPE:
        raise UnsupportedFileError(
            f"{file.name!r} has media type {file.content_type!r}, expected {PDF_MEDIA_TYPE}"
        )
    return file


class UploadController:
    """Drives one upload at a time for a session."""

    def __init__(
        self,
        session: SessionState,
        client: KnowledgeServiceClient | None = None,
        reset_selection: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            session: State updated by each upload attempt.
            client: Knowledge service client. Defaults to the shared one.
            reset_selection: Clears the file picker so the same file can
                             be selected again.
        """
        self._session = session
        self._client = client or get_knowledge_client()
        self._reset_selection = reset_selection

    async def submit_upload(self, file: SelectedFile | None) -> UploadStatus | None:
        """Validate and upload a selected file.

        Args:
            file: The user's selection, or None if the picker was cancelled.

        Returns:
            The resulting UploadStatus, or None when nothing was attempted
            (no file, or an upload already in flight).
        """
        if file is None:
            return None

        session = self._session
        if session.is_uploading:
            logger.debug(f"Upload already in progress, ignoring {file.name}")
            return None

        try:
            _validate_media_type(file)
        except UnsupportedFileError as e:
            logger.warning(f"Rejected upload: {e}")
            session.upload_status = UploadStatus.error(NOT_PDF_MESSAGE)
            self._finish()
            return session.upload_status

        session.is_uploading = True
        session.upload_status = None
        session.notify()

        try:
            await self._client.embed(file)
            session.upload_status = UploadStatus.success(
                f'Successfully processed "{file.name}" and created embeddings.'
            )
        except ServiceRejection as e:
            logger.warning(f"Embedding rejected for {file.name}: {e}")
            session.upload_status = UploadStatus.error(e.message or UPLOAD_FAILED_MESSAGE)
        except TransportFailure as e:
            logger.warning(f"Embedding request failed for {file.name}: {e}")
            session.upload_status = UploadStatus.error(UPLOAD_NETWORK_ERROR_MESSAGE)
        except Exception:
            logger.exception(f"Unexpected error while uploading {file.name}")
            session.upload_status = UploadStatus.error(UPLOAD_NETWORK_ERROR_MESSAGE)
        finally:
            session.is_uploading = False
            self._finish()

        return session.upload_status

    def _finish(self) -> None:
        if self._reset_selection is not None:
            try:
                self._reset_selection()
            except Exception as e:
                logger.warning(f"Failed to reset file selection: {e}")
        self._session.notify()
