"""Pydantic Schemas — validated request bodies and response DTOs for the boundary.

Invariants:
    - Schemas validate at system boundary (caller input, returned data)
    - Wire names are camelCase aliases; Python attributes are snake_case

Design Decisions:
    - Separate from models: schemas are boundary contracts, models are persistence
"""
