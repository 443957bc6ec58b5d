"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation of records and payloads
    - client/: Configuration and HTTP error mapping
    - state/: History ordering and session notifications
    - controllers/: Upload, question and keyboard handling

Uses httpx.MockTransport in place of the knowledge service.
"""
