"""
Test configuration.

Settings are built explicitly by the helpers; these defaults only cover
code paths that call get_settings() directly.
"""

import os

os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
