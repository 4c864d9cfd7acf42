"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate types at the system boundary; domain rules stay in core/

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
