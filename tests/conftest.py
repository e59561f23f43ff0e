"""
Pytest configuration and fixtures for channel import tests.
"""

import os
import pytest
import openpyxl
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from dotenv import load_dotenv

from backend.models.schema import Base

# Load environment
load_dotenv()

# Test database URL (in-memory SQLite unless overridden)
TEST_DATABASE_URL = os.getenv('TEST_DATABASE_URL', 'sqlite://')

ALEF = 'א'


@pytest.fixture
def engine():
    """Create test database engine with a fresh schema."""
    kwargs = {}
    if TEST_DATABASE_URL.startswith('sqlite'):
        kwargs = {
            'connect_args': {'check_same_thread': False},
            'poolclass': StaticPool
        }
    eng = create_engine(TEST_DATABASE_URL, **kwargs)
    Base.metadata.create_all(eng)
    yield eng
    Base.metadata.drop_all(eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    """Session factory bound to the test engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def session(session_factory):
    """Create a new database session for a test."""
    sess = session_factory()
    yield sess
    sess.close()


@pytest.fixture
def make_workbook(tmp_path):
    """Write rows to the first sheet of a new .xlsx file and return its path."""
    def _make(rows, name='channels.xlsx'):
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.title = 'Channels'
        for row in rows:
            ws.append(list(row))
        path = tmp_path / name
        wb.save(path)
        return str(path)

    return _make


@pytest.fixture
def sample_rows():
    """Rows covering a duplicate channel, a bad label and an empty frequency."""
    return [
        (f'{ALEF}7', 101.5),
        (f'{ALEF}7', 102.0),
        ('bad', 5),
        (f'{ALEF}9', None),
    ]
