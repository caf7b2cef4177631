"""Pydantic Schemas: response shapes and OpenAPI request bodies.

Invariants:
    - Schemas describe the wire format; models describe persistence
    - Request bodies are documented here but validated by core/validation.py
"""
