"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary; chirp rules (length,
      profanity) live in core/ and are applied by services

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
