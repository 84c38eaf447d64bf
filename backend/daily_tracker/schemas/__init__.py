"""Pydantic Schemas: request/response contracts for the HTTP routes.

Invariants:
    - Request fields are all optional at the type level: presence is checked by
      core.required_fields so absence maps to MISSING_FIELDS, not a Pydantic error
    - Type mismatches (e.g. duration "abc") still fail Pydantic validation

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
