import uuid

import pytest

from userlookup.db.sample_data import SAMPLE_USERS
from userlookup.models.schemas import UserRecord
from userlookup.services.filtering import (
    FILTERS_ERROR,
    NAME_GRADE_ERROR,
    UserCriteria,
    filter_users,
    parse_filters,
    parse_name_grade,
    parse_user_id,
)

JOHN = uuid.UUID("3e3dd4ae-3c37-40c6-aa64-7061f284ce28")
JANE = uuid.UUID("fc5e3b5e-4c0c-4d5f-8e0a-6e2a9b7a1d21")
ALEX = uuid.UUID("8d1f0b62-9a3b-4b4c-9d6e-2f5a7c3e1b40")


def _ids(users: list[UserRecord]) -> list[uuid.UUID]:
    return [u.id for u in users]


def test_parse_user_id_accepts_hyphenated_uuid() -> None:
    assert parse_user_id(str(JOHN)) == JOHN


@pytest.mark.parametrize("raw", ["", "not-a-uuid", "3e3dd4ae-3c37-40c6-aa64", "zzzzzzzz-3c37-40c6-aa64-7061f284ce28"])
def test_parse_user_id_rejects_malformed_values(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_user_id(raw)


def test_parse_name_grade_splits_on_underscore() -> None:
    assert parse_name_grade("Doe_1") == ("Doe", 1)
    assert parse_name_grade("_3") == ("", 3)
    assert parse_name_grade("Doe_-2") == ("Doe", -2)


@pytest.mark.parametrize("raw", ["Doe", "Doe_", "Doe_x", "a_b_1", "Doe_ 1", "Doe_40000"])
def test_parse_name_grade_rejects_malformed_segments(raw: str) -> None:
    with pytest.raises(ValueError, match=NAME_GRADE_ERROR):
        parse_name_grade(raw)


def test_filter_by_name_substring_and_grade() -> None:
    users = filter_users(SAMPLE_USERS.values(), UserCriteria(name="Doe", grade=1))
    assert _ids(users) == [JOHN, JANE]

    assert _ids(filter_users(SAMPLE_USERS.values(), UserCriteria(name="", grade=2))) == [ALEX]
    assert filter_users(SAMPLE_USERS.values(), UserCriteria(name="Doe", grade=2)) == []


def test_optional_criteria_narrow_to_exact_matches() -> None:
    values = SAMPLE_USERS.values()
    assert _ids(filter_users(values, UserCriteria(name="Doe", grade=1, age=19))) == [JANE]
    assert _ids(filter_users(values, UserCriteria(name="Doe", grade=1, active=True))) == [JOHN]
    assert _ids(filter_users(values, UserCriteria(name="Doe", grade=1, age=18, active=True))) == [JOHN]
    assert filter_users(values, UserCriteria(name="Doe", grade=1, age=19, active=True)) == []


def test_name_match_is_case_sensitive_substring() -> None:
    assert filter_users(SAMPLE_USERS.values(), UserCriteria(name="doe", grade=1)) == []
    assert _ids(filter_users(SAMPLE_USERS.values(), UserCriteria(name="n D", grade=1))) == [JOHN]


def test_render_formats_user_record() -> None:
    user = SAMPLE_USERS[JOHN]
    assert user.render() == (
        'User { uuid: 3e3dd4ae-3c37-40c6-aa64-7061f284ce28, name: "John Doe", age: 18, grade: 1, active: true }'
    )


def test_parse_filters_accepts_absent_and_valid_values() -> None:
    assert parse_filters(None, None) == (None, None)
    assert parse_filters("19", None) == (19, None)
    assert parse_filters(None, "on") == (None, True)
    assert parse_filters("+18", "False") == (18, False)


@pytest.mark.parametrize(("age", "active"), [("abc", None), ("40000", None), ("", None), (None, "maybe"), ("18", "")])
def test_parse_filters_rejects_malformed_values(age, active) -> None:
    with pytest.raises(ValueError, match=FILTERS_ERROR):
        parse_filters(age, active)


def test_render_escapes_names_like_debug_output() -> None:
    user = SAMPLE_USERS[JOHN].model_copy(update={"name": 'Jo "J"\n\x01\\é'})
    assert 'name: "Jo \\"J\\"\\n\\u{1}\\\\é"' in user.render()
