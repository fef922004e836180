"""Persisted user settings: who is studying and which course is selected."""
from study_assistant.db import get_connection

USER_ID_KEY = "user_id"
COURSE_CODE_KEY = "course_code"

DEFAULT_USER_ID = "student"
DEFAULT_COURSE_CODE = "GENERAL"


def get_setting(db_path: str, key: str, default: str = None) -> str | None:
    conn = get_connection(db_path)
    row = conn.execute("SELECT value FROM user_settings WHERE key = ?", (key,)).fetchone()
    conn.close()
    return row["value"] if row else default


def set_setting(db_path: str, key: str, value: str) -> None:
    """Insert or overwrite a single key."""
    conn = get_connection(db_path)
    conn.execute(
        "INSERT INTO user_settings (key, value) VALUES (?, ?) ON CONFLICT(key) DO UPDATE SET value=excluded.value",
        (key, value),
    )
    conn.commit()
    conn.close()


def get_user_id(db_path: str) -> str:
    return get_setting(db_path, USER_ID_KEY, DEFAULT_USER_ID)


def get_course_code(db_path: str) -> str:
    return get_setting(db_path, COURSE_CODE_KEY, DEFAULT_COURSE_CODE)


def select_course(db_path: str, user_id: str, course_code: str) -> tuple[str, str]:
    """Remember the current user and course; course codes are stored upper-case."""
    course_code = course_code.strip().upper()
    set_setting(db_path, USER_ID_KEY, user_id.strip())
    set_setting(db_path, COURSE_CODE_KEY, course_code)
    return user_id.strip(), course_code
