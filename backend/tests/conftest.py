"""
Test Configuration
==================

Environment shared by every test. Must run before ``device_warranty.config``
is first read, since settings and the engine are built once per process.
"""

import os
import tempfile

os.environ["APP_ENV"] = "testing"
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(
    tempfile.gettempdir(), f"device_warranty_test_{os.getpid()}.db"
)
os.environ["JWT_SECRET_KEY"] = "test-secret"
os.environ["JWT_ALGORITHM"] = "HS256"
