"""End-to-end: notes file to persisted progress."""
from study_assistant.banks import CORRECT_OPTIONS
from study_assistant.db import init_db
from study_assistant.progress import load_progress
from study_assistant.session import QuizController, SessionState


def test_full_quiz_flow(tmp_db, notes_file, rng):
    init_db(tmp_db)
    controller = QuizController(tmp_db, "student-1", "BIO101", rng=rng)

    assert controller.handle_file_upload(notes_file)
    questions = controller.generate()
    assert len(questions) == 10
    for q in questions:
        allowed = {p.format(concept=q.concept) for p in CORRECT_OPTIONS[q.template_type]}
        assert q.correct_option in allowed

    for q in questions[:7]:
        controller.select_answer(q.id, q.correct_index)
    for q in questions[7:]:
        controller.select_answer(q.id, (q.correct_index + 2) % 4)
    result = controller.submit()
    assert result.accuracy == 70

    controller.reset()
    assert controller.state == SessionState.IDLE

    stored = load_progress(tmp_db, "student-1", "BIO101")
    assert stored.accuracy_rate == 70
    assert stored.mcqs_completed == 10
    assert stored.to_record()["accuracyRate"] == 70
