"""HTTP client for the knowledge service.

The only module that talks to the network. Everything that can go wrong on
the wire (refused connections, timeouts, error statuses, bodies that are not
JSON or do not match the expected shape) is mapped onto the exceptions in
``src.client.errors`` so the controllers deal with a small, closed set.

Each call opens its own ``httpx.AsyncClient`` and closes it before returning;
there is no connection state to share between the upload and query workflows.
"""

import logging
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from src.client.config import ClientConfig, get_client_config
from src.client.errors import ServiceRejection, TransportFailure
from src.models.schemas import AskRequest, AskResponse, EmbedResponse, SelectedFile

logger = logging.getLogger(__name__)

EMBED_PATH = "/embed"
ASK_PATH = "/ask"


class KnowledgeServiceClient:
    """Async client for the /embed and /ask endpoints."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used to route requests
                       in-process (tests) instead of over the network.
        """
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._config.api_base_url

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._config.api_base_url,
            timeout=self._config.request_timeout,
            transport=self._transport,
        )

    async def _post(self, path: str, **kwargs: Any) -> Any:
        """POST to the service and return the decoded JSON body.

        Raises:
            TransportFailure: On connection errors, timeouts, non-2xx
                responses, or a body that is not valid JSON.
        """
        async with self._http_client() as client:
            try:
                response = await client.post(path, **kwargs)
                response.raise_for_status()
                return response.json()
            except httpx.HTTPStatusError as e:
                raise TransportFailure(
                    f"{path} returned HTTP {e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                raise TransportFailure(f"Connection to {path} failed: {e}") from e
            except ValueError as e:
                raise TransportFailure(f"{path} returned a non-JSON body") from e

    @staticmethod
    def _parse(path: str, model: type[BaseModel], payload: Any) -> Any:
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise TransportFailure(f"{path} returned an unexpected payload") from e

    async def embed(self, file: SelectedFile) -> EmbedResponse:
        """Send a document to the embedding endpoint.

        Args:
            file: The selected document. Sent as multipart field ``file``.

        Returns:
            The parsed reply, with ``success`` set.

        Raises:
            ServiceRejection: The service reported ``success: false``.
            TransportFailure: The request or reply was unusable.
        """
        payload = await self._post(
            EMBED_PATH,
            files={"file": (file.name, file.content, file.content_type)},
        )
        result: EmbedResponse = self._parse(EMBED_PATH, EmbedResponse, payload)

        if not result.success:
            raise ServiceRejection(result.message)

        logger.info(f"Embedded document: {file.name}")
        return result

    async def ask(self, question: str) -> str:
        """Ask the query endpoint a question.

        Args:
            question: The question text, sent unchanged.

        Returns:
            The answer text.

        Raises:
            ServiceRejection: The reply carried an ``error`` field.
            TransportFailure: The request failed, or the reply carried
                neither ``answer`` nor ``error``.
        """
        payload = await self._post(
            ASK_PATH,
            json=AskRequest(question=question).model_dump(),
            headers={"Content-Type": "application/json"},
        )
        result: AskResponse = self._parse(ASK_PATH, AskResponse, payload)

        if result.error:
            raise ServiceRejection(result.error)
        if result.answer is None:
            raise TransportFailure(f"{ASK_PATH} reply has neither answer nor error")

        return result.answer


# Module-level singleton instance
_knowledge_client: KnowledgeServiceClient | None = None


def get_knowledge_client() -> KnowledgeServiceClient:
    """Get or create the global knowledge service client.

    Returns:
        The KnowledgeServiceClient instance.
    """
    global _knowledge_client
    if _knowledge_client is None:
        _knowledge_client = KnowledgeServiceClient()
    return _knowledge_client
