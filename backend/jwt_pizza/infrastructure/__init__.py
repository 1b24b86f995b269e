"""Infrastructure Layer — database sessions, hashing, token signing, logging.

Invariants:
    - Infrastructure never imports from services/ or store/
    - Driver and library failures are mapped to core errors at this layer

Design Decisions:
    - Thin wrappers over third-party libraries so stores depend on Protocols only
"""
