"""Core Layer — pure domain logic: roles, claims, policy, pagination, errors.

Invariants:
    - No module in core/ imports from services/, store/, infrastructure/, or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from the imperative shell (stores and services)
"""
