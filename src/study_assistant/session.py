"""Interactive quiz session lifecycle: upload, generate, answer, submit, reset."""
import logging
import math
import sqlite3
from enum import Enum

from study_assistant.importer import is_accepted, read_document
from study_assistant.models import QuestionReview, QuizResult, QuizSession, StudyProgress
from study_assistant.progress import load_progress, record_generation, record_submission, save_progress
from study_assistant.quiz import OPTION_COUNT, QUESTION_COUNT, generate_quiz

logger = logging.getLogger(__name__)

WRONG_FILE_TYPE_MESSAGE = "Please upload a .txt file only"
NO_FILE_MESSAGE = "Please upload a text file first"


class SessionState(Enum):
    IDLE = "idle"
    READY = "ready"
    GENERATING = "generating"
    ACTIVE = "active"
    SUBMITTED = "submitted"


class QuizStateError(ValueError):
    """An operation was attempted in a state that does not allow it."""


def calc_accuracy(correct: int, total: int) -> int:
    """Percentage rounded half up."""
    if total == 0:
        return 0
    return math.floor(100 * correct / total + 0.5)


class QuizController:
    """Owns one quiz session for a (user, course) pair.

    ``notify`` receives user-facing messages (wrong file type and so on);
    ``rng`` is passed through to question generation.
    """

    def __init__(self, db_path: str, user_id: str, course_code: str, rng=None, notify=None):
        self.db_path = db_path
        self.user_id = user_id
        self.course_code = course_code
        self.rng = rng
        self.notify = notify or (lambda message: None)
        self.state = SessionState.IDLE
        self.document = None
        self.session = QuizSession()
        self.progress = self._load_progress()

    def _load_progress(self):
        try:
            return load_progress(self.db_path, self.user_id, self.course_code)
        except sqlite3.Error:
            logger.warning("No existing progress found for %s/%s", self.user_id, self.course_code)
            return StudyProgress(user_id=self.user_id, course_code=self.course_code)

    @property
    def questions(self):
        return self.session.questions

    @property
    def answers(self):
        return self.session.answers

    @property
    def answered_count(self) -> int:
        return len(self.session.answers)

    @property
    def can_submit(self) -> bool:
        return (
            self.state == SessionState.ACTIVE
            and bool(self.session.questions)
            and self.answered_count == len(self.session.questions)
        )

    @property
    def current_question(self):
        if not self.session.questions:
            return None
        return self.session.questions[self.session.current_index]

    def next_question(self):
        if self.session.current_index < len(self.session.questions) - 1:
            self.session.current_index += 1
        return self.current_question

    def previous_question(self):
        if self.session.current_index > 0:
            self.session.current_index -= 1
        return self.current_question

    def handle_file_upload(self, file_path: str) -> bool:
        if not is_accepted(file_path):
            logger.warning("Rejected upload %s: not a plain-text file", file_path)
            self.notify(WRONG_FILE_TYPE_MESSAGE)
            return False
        try:
            document = read_document(file_path)
        except OSError as e:
            logger.warning("Could not read %s: %s", file_path, e)
            self.notify(f"Could not read {file_path}")
            return False
        self.document = document
        if self.state == SessionState.IDLE:
            self.state = SessionState.READY
        logger.info("Loaded %s (%d bytes)", document.name, document.byte_length)
        return True

    def generate(self) -> list:
        if self.state == SessionState.GENERATING:
            raise QuizStateError("Quiz generation already in progress")
        if self.document is None:
            self.notify(NO_FILE_MESSAGE)
            return []
        previous_state = self.state
        self.state = SessionState.GENERATING
        try:
            questions = generate_quiz(self.document.text, self.rng, QUESTION_COUNT)
        finally:
            self.state = previous_state
        self.session = QuizSession(questions=questions)
        record_generation(self.progress, len(questions))
        self.state = SessionState.ACTIVE
        logger.info("Generated %d questions from %s", len(questions), self.document.name)
        return questions

    def select_answer(self, question_id: int, option_index: int) -> None:
        if self.state != SessionState.ACTIVE:
            raise QuizStateError(f"Cannot answer in state {self.state.value}")
        if question_id not in {q.id for q in self.session.questions}:
            raise QuizStateError(f"Unknown question id {question_id}")
        if not 0 <= option_index < OPTION_COUNT:
            raise QuizStateError(f"Option index {option_index} out of range")
        self.session.answers[question_id] = option_index

    def score(self) -> QuizResult:
        questions = self.session.questions
        reviews = [QuestionReview(q, self.session.answers[q.id]) for q in questions if q.id in self.session.answers]
        correct = sum(1 for r in reviews if r.is_correct)
        return QuizResult(
            correct_count=correct,
            total=len(questions),
            accuracy=calc_accuracy(correct, len(questions)),
            reviews=reviews,
        )

    def submit(self) -> QuizResult:
        if not self.can_submit:
            raise QuizStateError(
                f"Answer all questions before submitting ({self.answered_count}/{len(self.session.questions)})"
            )
        result = self.score()
        self.session.completed = True
        self.state = SessionState.SUBMITTED
        record_submission(self.progress, result.total, result.accuracy)
        try:
            save_progress(self.db_path, self.progress)
        except sqlite3.Error:
            logger.exception("Error saving progress for %s/%s", self.user_id, self.course_code)
        return result

    def reset(self) -> None:
        self.document = None
        self.session = QuizSession()
        self.state = SessionState.IDLE
