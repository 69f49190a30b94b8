# File: tests/conftest.py

import os
import sys
import logging
import tempfile
import pytest
import sqlalchemy
from sqlalchemy import text
from sqlalchemy_utils import database_exists, create_database

# 1. Add project root to path
sys.path.append(os.getcwd())

# 2. Run the suite against SQLite unless told otherwise
os.environ.setdefault("USE_SQLITE", "true")
os.environ.setdefault("SQLITE_PATH", os.path.join(tempfile.gettempdir(), "test_playhead.db"))

# 3. Import the shared engine (after the environment is set)
from playhead.core.database.connection import engine as TEST_ENGINE


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """
    Runs once per test session.
    Ensures DB exists and creates the tables.
    """
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    if not database_exists(TEST_ENGINE.url):
        create_database(TEST_ENGINE.url)

    # Import all models to ensure they are registered
    from playhead.core.database.base import Base
    import playhead.features.bookmarks.data.sql_models

    Base.metadata.create_all(bind=TEST_ENGINE)

    yield


@pytest.fixture(scope="function", autouse=True)
def clean_db(global_setup):
    """
    Runs before EVERY test.
    Detects DB type and cleans tables appropriately.
    """
    with TEST_ENGINE.connect() as conn:
        trans = conn.begin()

        is_sqlite = "sqlite" in str(TEST_ENGINE.url)

        inspector = sqlalchemy.inspect(TEST_ENGINE)
        table_names = inspector.get_table_names()

        for table in table_names:
            if is_sqlite:
                conn.execute(text(f'DELETE FROM "{table}";'))
            else:
                conn.execute(text(f'TRUNCATE TABLE "{table}" CASCADE;'))

        trans.commit()

    yield
