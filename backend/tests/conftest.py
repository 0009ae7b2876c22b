# tests/conftest.py
"""
Test bootstrap
- Points settings at SQLite and a fixed JWT secret BEFORE the app is imported
- Pulls in db/app/factory fixtures
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from tests.fixtures.db import *         # noqa: F401,F403,E402
from tests.fixtures.app import *        # noqa: F401,F403,E402
from tests.fixtures.factories import *  # noqa: F401,F403,E402
