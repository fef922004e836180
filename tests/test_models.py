# tests/test_models.py
from study_assistant.models import ConceptPool, Question, QuestionReview, RawDocument, StudyProgress


def test_raw_document_byte_length():
    doc = RawDocument(name="notes.txt", text="café")
    assert doc.byte_length == 5


def test_concept_pool_priority_order_dedupes_and_filters():
    pool = ConceptPool(topics=("Energy", "Ion"), keywords=("Energy", "Krebs"), concepts=("ATP synthase",))
    assert pool.concepts_in_priority_order() == ["Energy", "Krebs", "ATP synthase"]


def test_empty_concept_pool():
    assert ConceptPool().concepts_in_priority_order() == []


def test_question_correct_option():
    q = Question(id=1, question="Q?", options=["a", "b", "c", "d"], correct_index=2)
    assert q.correct_option == "c"


def test_question_review():
    q = Question(id=1, question="Q?", options=["a", "b", "c", "d"], correct_index=2)
    assert QuestionReview(q, 2).is_correct
    review = QuestionReview(q, 0)
    assert not review.is_correct
    assert review.selected_option == "a"


def test_study_progress_record_shape():
    record = StudyProgress("u1", "CS101", mcqs_completed=10).to_record()
    assert record == {
        "user_id": "u1",
        "course_code": "CS101",
        "mcqsCompleted": 10,
        "totalMcqs": 0,
        "accuracyRate": 0,
        "lecturesStudied": 0,
        "lastStudySession": None,
        "studySessions": 0,
        "totalStudyTime": 0,
    }
