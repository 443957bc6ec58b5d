"""RAG Document Assistant - client for PDF upload and document Q&A.

Combines NiceGUI for the web interface, httpx for talking to the knowledge
service, and Pydantic for data validation.

Components:
    - client: HTTP access to the /embed and /ask endpoints
    - controllers: Upload and question workflows
    - state: Per-page session state and chat history
    - ui: Web interface for uploads and questions
    - models: Session records and request/response schemas
"""

__version__ = "0.1.0"
