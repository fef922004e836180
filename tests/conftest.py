import random
import pytest

from study_assistant.db import init_db

LECTURE_NOTES = """Photosynthesis is defined as the process plants use to convert light into energy.
Chlorophyll absorbs sunlight inside the Chloroplast. The Calvin cycle refers to the light-independent reactions.
Photosynthesis depends on carbon dioxide, water and sunlight. The theory of endosymbiosis explains chloroplast origins.
Cellular respiration reverses photosynthesis and releases energy stored in glucose molecules.
"""


@pytest.fixture
def tmp_db(tmp_path):
    """Provide a temporary SQLite database path for tests."""
    db_path = str(tmp_path / "test_assistant.db")
    return db_path


@pytest.fixture
def ready_db(tmp_db):
    init_db(tmp_db)
    return tmp_db


@pytest.fixture
def notes_file(tmp_path):
    f = tmp_path / "lecture1.txt"
    f.write_text(LECTURE_NOTES)
    return str(f)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def lecture_notes():
    return LECTURE_NOTES
