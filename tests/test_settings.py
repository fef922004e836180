# tests/test_settings.py
from study_assistant.settings import (
    get_setting, set_setting, get_user_id, get_course_code, select_course,
    DEFAULT_USER_ID, DEFAULT_COURSE_CODE,
)


def test_get_setting_default(ready_db):
    assert get_setting(ready_db, "missing") is None
    assert get_setting(ready_db, "missing", "x") == "x"


def test_set_setting_overwrites(ready_db):
    set_setting(ready_db, "course_code", "CS101")
    set_setting(ready_db, "course_code", "MTH202")
    assert get_course_code(ready_db) == "MTH202"


def test_user_and_course_defaults(ready_db):
    assert get_user_id(ready_db) == DEFAULT_USER_ID
    assert get_course_code(ready_db) == DEFAULT_COURSE_CODE


def test_select_course_normalizes_and_persists(ready_db):
    assert select_course(ready_db, " u7 ", " cs101 ") == ("u7", "CS101")
    assert get_user_id(ready_db) == "u7"
    assert get_course_code(ready_db) == "CS101"
