"""Controllers for the two assistant workflows.

Responsibilities:
    - Upload: PDF validation, embedding request, status reporting
    - Query: question submission, chat history recording
    - Keyboard: Enter-to-submit decision for the question box

Controllers own no state of their own. They update a SessionState and
convert every failure into user-visible state instead of raising.
"""

from src.controllers.keyboard import KeyPress, is_submit_key
from src.controllers.query import ASK_FAILED_ANSWER, QueryController
from src.controllers.upload import (
    NOT_PDF_MESSAGE,
    UPLOAD_FAILED_MESSAGE,
    UPLOAD_NETWORK_ERROR_MESSAGE,
    UploadController,
)

__all__ = [
    "ASK_FAILED_ANSWER",
    "NOT_PDF_MESSAGE",
    "UPLOAD_FAILED_MESSAGE",
    "UPLOAD_NETWORK_ERROR_MESSAGE",
    "KeyPress",
    "QueryController",
    "UploadController",
    "is_submit_key",
]
