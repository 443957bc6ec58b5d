"""Test package for the RAG Document Assistant.

Structure:
    - unit/: Models, config, session state, client and controllers in isolation
    - integration/: Controllers against an in-process fake knowledge service

HTTP is never sent over a real socket: unit tests use httpx.MockTransport,
integration tests route to a FastAPI app via httpx.ASGITransport.
Leverages pytest with pytest-check for soft assertions.
"""
