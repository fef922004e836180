"""Data classes for the study assistant domain model."""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RawDocument:
    name: str
    text: str
    mime_type: str = "text/plain"

    @property
    def byte_length(self) -> int:
        return len(self.text.encode("utf-8"))


@dataclass(frozen=True)
class ConceptPool:
    topics: tuple = ()
    keywords: tuple = ()
    concepts: tuple = ()

    def concepts_in_priority_order(self) -> list[str]:
        """Topics, then keywords, then concepts; longer than 3 chars, first occurrence wins."""
        seen = set()
        ordered = []
        for candidate in (*self.topics, *self.keywords, *self.concepts):
            if candidate and len(candidate) > 3 and candidate not in seen:
                seen.add(candidate)
                ordered.append(candidate)
        return ordered


@dataclass
class Question:
    id: int
    question: str
    options: list[str]
    correct_index: int
    template_type: str = "purpose"
    concept: str = ""

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]


@dataclass
class QuizSession:
    questions: list[Question] = field(default_factory=list)
    answers: dict[int, int] = field(default_factory=dict)
    current_index: int = 0
    completed: bool = False


@dataclass
class QuestionReview:
    question: Question
    selected_index: int

    @property
    def is_correct(self) -> bool:
        return self.selected_index == self.question.correct_index

    @property
    def selected_option(self) -> str:
        return self.question.options[self.selected_index]


@dataclass
class QuizResult:
    correct_count: int
    total: int
    accuracy: int
    reviews: list[QuestionReview] = field(default_factory=list)


@dataclass
class StudyProgress:
    user_id: str
    course_code: str
    mcqs_completed: int = 0
    total_mcqs: int = 0
    accuracy_rate: int = 0
    lectures_studied: int = 0
    last_study_session: Optional[str] = None
    study_sessions: int = 0
    total_study_time: int = 0  # minutes

    def to_record(self) -> dict:
        """Shape used for the keyed upsert into the progress store."""
        return {
            "user_id": self.user_id,
            "course_code": self.course_code,
            "mcqsCompleted": self.mcqs_completed,
            "totalMcqs": self.total_mcqs,
            "accuracyRate": self.accuracy_rate,
            "lecturesStudied": self.lectures_studied,
            "lastStudySession": self.last_study_session,
            "studySessions": self.study_sessions,
            "totalStudyTime": self.total_study_time,
        }
