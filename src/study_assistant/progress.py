"""Per-user, per-course study progress summary and its keyed store."""
from datetime import datetime, timezone

from study_assistant.db import get_connection
from study_assistant.models import StudyProgress

SESSION_MINUTES = 30

_COLUMNS = (
    "mcqs_completed", "total_mcqs", "accuracy_rate", "lectures_studied",
    "last_study_session", "study_sessions", "total_study_time",
)


def load_progress(db_path: str, user_id: str, course_code: str) -> StudyProgress:
    """Stored summary for (user, course), or a zeroed one if none exists."""
    conn = get_connection(db_path)
    row = conn.execute(
        "SELECT * FROM study_progress WHERE user_id = ? AND course_code = ?",
        (user_id, course_code),
    ).fetchone()
    conn.close()
    if row is None:
        return StudyProgress(user_id=user_id, course_code=course_code)
    return StudyProgress(user_id=user_id, course_code=course_code, **{c: row[c] for c in _COLUMNS})


def save_progress(db_path: str, progress: StudyProgress) -> None:
    """Upsert keyed on (user_id, course_code); last writer wins."""
    values = [getattr(progress, c) for c in _COLUMNS]
    assignments = ", ".join(f"{c}=excluded.{c}" for c in _COLUMNS)
    conn = get_connection(db_path)
    conn.execute(
        f"""INSERT INTO study_progress (user_id, course_code, {", ".join(_COLUMNS)})
        VALUES (?, ?, {", ".join("?" for _ in _COLUMNS)})
        ON CONFLICT(user_id, course_code) DO UPDATE SET {assignments}""",
        (progress.user_id, progress.course_code, *values),
    )
    conn.commit()
    conn.close()


def record_generation(progress: StudyProgress, question_count: int) -> StudyProgress:
    """A new lecture was turned into a quiz."""
    progress.total_mcqs = question_count
    progress.lectures_studied += 1
    return progress


def record_submission(progress: StudyProgress, question_count: int, accuracy: int,
                      now: datetime | None = None) -> StudyProgress:
    """Fold a scored quiz attempt into the summary."""
    progress.mcqs_completed += question_count
    progress.accuracy_rate = accuracy
    progress.last_study_session = (now or datetime.now(timezone.utc)).isoformat()
    progress.study_sessions += 1
    progress.total_study_time += SESSION_MINUTES
    return progress
