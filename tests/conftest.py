"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - fixed_clock: Deterministic clock for history timestamps
    - session: Fresh SessionState using the fixed clock
    - test_config: Client configuration pointing at an in-process host
    - make_client: Factory for clients backed by httpx.MockTransport
    - knowledge_service_app: FastAPI fake of the /embed and /ask endpoints
    - service_client: Client wired to the fake service via ASGITransport
"""

from collections.abc import Callable
from datetime import datetime

import httpx
import pytest
from fastapi import FastAPI, UploadFile
from httpx import ASGITransport

from src.client.config import ClientConfig
from src.client.knowledge_client import KnowledgeServiceClient
from src.models.schemas import AskRequest, SelectedFile
from src.state.session import ChatHistory, SessionState

FIXED_NOW = datetime(2026, 1, 15, 14, 5, 9)
PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< /Type /Catalog >>\nendobj\n%%EOF"


def create_fake_knowledge_service() -> FastAPI:
    """Build a stand-in for the knowledge service.

    /embed accepts anything starting with the PDF header and remembers the
    filename; /ask answers only once at least one document was embedded.
    """
    app = FastAPI()
    app.state.documents = []

    @app.post("/embed")
    async def embed(file: UploadFile) -> dict[str, bool | str]:
        content = await file.read()
        if not content.startswith(b"%PDF"):
            return {"success": False, "message": "parse failed"}
        app.state.documents.append(file.filename)
        return {"success": True, "message": f"Created embeddings for {file.filename}"}

    @app.post("/ask")
    async def ask(request: AskRequest) -> dict[str, str]:
        if not app.state.documents:
            return {"error": "No documents have been uploaded yet"}
        sources = ", ".join(app.state.documents)
        return {"answer": f"Answer to {request.question!r} from {sources}"}

    return app


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Return a clock frozen at FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def session(fixed_clock: Callable[[], datetime]) -> SessionState:
    """Create an empty session whose history uses the fixed clock."""
    return SessionState(history=ChatHistory(clock=fixed_clock))


@pytest.fixture
def test_config() -> ClientConfig:
    """Client configuration pointing at an in-process test host."""
    return ClientConfig(api_base_url="http://test", request_timeout=5.0)


@pytest.fixture
def make_client(
    test_config: ClientConfig,
) -> Callable[[Callable[[httpx.Request], object]], KnowledgeServiceClient]:
    """Factory building a client whose requests go to ``handler``.

    Returns:
        Callable taking a MockTransport handler (sync or async).
    """

    def factory(handler: Callable[[httpx.Request], object]) -> KnowledgeServiceClient:
        return KnowledgeServiceClient(
            config=test_config, transport=httpx.MockTransport(handler)
        )

    return factory


@pytest.fixture
def pdf_file() -> SelectedFile:
    """A small valid PDF selection named spec.pdf."""
    return SelectedFile(name="spec.pdf", content_type="application/pdf", content=PDF_BYTES)


@pytest.fixture
def knowledge_service_app() -> FastAPI:
    """Fresh fake knowledge service for each test."""
    return create_fake_knowledge_service()


@pytest.fixture
def service_client(
    knowledge_service_app: FastAPI, test_config: ClientConfig
) -> KnowledgeServiceClient:
    """Client routed to the fake service in-process."""
    return KnowledgeServiceClient(
        config=test_config, transport=ASGITransport(app=knowledge_service_app)
    )
