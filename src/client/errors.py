"""Error taxonomy for document upload and question answering."""


class UnsupportedFileError(Exception):
    """Raised when a selected file is not a PDF."""

    pass


class KnowledgeServiceError(Exception):
    """Base class for failures reported by or on the way to the service."""

    pass


class ServiceRejection(KnowledgeServiceError):
    """The service answered but refused the request.

    Attributes:
        message: Explanation supplied by the service, if any.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "Request rejected by the knowledge service")
        self.message = message


class TransportFailure(KnowledgeServiceError):
    """The service was unreachable or replied with something unusable."""

    pass
