"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database or upload directory
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("BLOB_ROOT", "test-uploads")
os.environ.setdefault("LOG_FORMAT", "text")
