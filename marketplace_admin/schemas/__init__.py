"""Pydantic Schemas — request validation for API endpoints.

Invariants:
    - Schemas validate shape and ranges at the system boundary
    - Cross-record rules (ownership, hierarchy, pricing, offers) live in core/, not here

Design Decisions:
    - Separate from models: schemas are API contracts, the documents table is persistence
"""
