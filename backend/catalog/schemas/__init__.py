"""Pydantic Schemas — validation for the static collections and API responses.

Invariants:
    - Schemas validate at system boundary (source files, API responses)
    - Domain types from core/ used for enum fields

Design Decisions:
    - Separate from core records: schemas are wire contracts, core records are logic inputs
"""
