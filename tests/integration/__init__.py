"""Integration tests for the assistant workflows working as a system.

Coverage:
    - PDF upload through multipart encoding to a FastAPI endpoint
    - Question answering through JSON encoding to a FastAPI endpoint
    - Service rejections and unreachable-service handling
    - Upload and question workflows running side by side
"""
