"""
Point the app at a throwaway SQLite file before any test module imports it,
then create the schema once for the whole run.
"""
import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="fittrack-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"

from app.db import Base, engine  # noqa: E402
from app import models  # noqa: E402,F401

Base.metadata.create_all(engine)
