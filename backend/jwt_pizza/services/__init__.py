"""Services Layer — policy-gated operations consumed by the transport layer.

Invariants:
    - Every operation requiring identity receives decoded Claims, never a raw token
    - Authorization Policy runs before any store mutation

Design Decisions:
    - One service per area (auth, users, franchises, orders) for locality
"""
