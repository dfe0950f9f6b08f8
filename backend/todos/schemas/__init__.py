"""Pydantic Schemas — the Todo wire/storage shape and typed request records.

Invariants:
    - The same Todo model is used for JSON bodies, responses, and stored documents
"""
