"""Database initialization and connection management."""
import sqlite3
from pathlib import Path

DEFAULT_DB_PATH = str(Path.home() / ".study_assistant" / "assistant.db")

SCHEMA = """
CREATE TABLE IF NOT EXISTS study_progress (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id TEXT NOT NULL,
    course_code TEXT NOT NULL,
    mcqs_completed INTEGER DEFAULT 0,
    total_mcqs INTEGER DEFAULT 0,
    accuracy_rate INTEGER DEFAULT 0,
    lectures_studied INTEGER DEFAULT 0,
    last_study_session TEXT,
    study_sessions INTEGER DEFAULT 0,
    total_study_time INTEGER DEFAULT 0,
    UNIQUE(user_id, course_code)
);

CREATE TABLE IF NOT EXISTS user_settings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    key TEXT NOT NULL UNIQUE,
    value TEXT
);
"""


def get_connection(db_path: str = DEFAULT_DB_PATH) -> sqlite3.Connection:
    """Return a SQLite connection with row factory enabled."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(db_path: str = DEFAULT_DB_PATH) -> None:
    """Initialize the database, creating all tables if they don't exist."""
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = get_connection(db_path)
    conn.executescript(SCHEMA)
    conn.commit()
    conn.close()
