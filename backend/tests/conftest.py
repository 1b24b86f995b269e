"""Root conftest — shared test configuration."""

import os

# Ensure tests never pick up a real database or signing secret
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "test-secret")
