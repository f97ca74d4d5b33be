"""Root conftest: shared test configuration."""

import os

# Settings are read once (lru_cache); pin test values before any app import
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
