"""Boundary Protocols — contracts between the stores and pluggable infrastructure.

Invariants:
    - Stores depend on these Protocols, never on a concrete hashing or signing library
    - Implementations are provided by the composition root (bootstrap.build_backend)

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any object with the methods
    - Async in PasswordHasher: hashing is deliberately expensive, implementations
      move it off the event loop
"""

from typing import Protocol

from jwt_pizza.core.claims import Claims


class PasswordHasher(Protocol):
    """One-way hash + verify capability."""
    async def hash(self, plaintext: str) -> str: ...
    async def verify(self, plaintext: str, digest: str) -> bool: ...


class CredentialCodec(Protocol):
    """Signs claims into a three-segment credential and decodes it back."""
    def issue(self, claims: Claims) -> str: ...
    def decode(self, credential: str) -> Claims: ...
