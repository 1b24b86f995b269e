"""Credential Store — one-way password digests behind the PasswordHasher protocol.

Invariants:
    - Each hash() call draws a fresh random salt: equal passwords give distinct digests
    - verify() is false for a wrong password and for a digest it cannot identify
    - The CPU-bound work runs in a worker thread; the event loop only suspends
"""

import asyncio
import logging

from passlib.context import CryptContext

logger = logging.getLogger(__name__)


class CredentialStore:
    """bcrypt via passlib, cost factor fixed at construction."""

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds,
        )

    async def hash(self, plaintext: str) -> str:
        return await asyncio.to_thread(self._context.hash, plaintext)

    async def verify(self, plaintext: str, digest: str) -> bool:
        try:
            return await asyncio.to_thread(self._context.verify, plaintext, digest)
        except ValueError:
            logger.warning("Unidentifiable password digest; verification refused")
            return False
