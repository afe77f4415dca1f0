"""Pydantic Schemas — response contracts for the JSON endpoints.

Invariants:
    - Field names are snake_case in Python, camelCase on the wire (alias generator)
    - Schemas document and validate output; core builds the payloads
"""
