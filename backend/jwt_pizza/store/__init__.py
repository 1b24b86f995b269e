"""Relational Store — CRUD and composite queries over the pizza schema.

Invariants:
    - Every operation opens its own session and releases it on every exit path
    - Multi-row writes run inside DatabaseSessionManager.transaction()

Design Decisions:
    - One store per aggregate (users, franchises, orders) plus the session registry
"""
