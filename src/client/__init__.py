"""Knowledge service client for document embedding and question answering.

Responsibilities:
    - Configuration of the service base URL and request timeout
    - Multipart PDF upload to the embedding endpoint
    - JSON question submission to the query endpoint
    - Mapping of transport and payload problems onto a small error taxonomy

Built on httpx. Keeps the controllers free of any HTTP detail.
"""

from src.client.config import ClientConfig, get_client_config
from src.client.errors import (
    KnowledgeServiceError,
    ServiceRejection,
    TransportFailure,
    UnsupportedFileError,
)
from src.client.knowledge_client import KnowledgeServiceClient, get_knowledge_client

__all__ = [
    "ClientConfig",
    "KnowledgeServiceClient",
    "KnowledgeServiceError",
    "ServiceRejection",
    "TransportFailure",
    "UnsupportedFileError",
    "get_client_config",
    "get_knowledge_client",
]
