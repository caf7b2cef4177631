"""Root conftest: shared test configuration."""

import os

# Settings are cached on first import of products_api.main
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("FRONT_URL", "http://front.example.com")
