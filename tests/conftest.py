"""Root conftest — shared test configuration."""

import os

# Settings are cached on first import; point them at a throwaway database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")
