from types import SimpleNamespace

import pytest

from travelapp.services.choice_translator import (
    ACTIVITIES,
    CATEGORIES,
    TRIP_TYPES,
    UNSPECIFIED,
    translate_answer,
    translate_choice,
)


def test_known_codes_translate():
    assert translate_choice(1, "trip") == TRIP_TYPES[1]
    assert translate_choice("2", "trip") == TRIP_TYPES[2]
    assert translate_choice(5, "activity") == UNSPECIFIED  # not a list


@pytest.mark.parametrize("category", CATEGORIES)
@pytest.mark.parametrize("code", [0, -1, 99, "x", None])
def test_out_of_range_codes_give_sentinel(category, code):
    value = [code] if category == "activity" else code
    assert translate_choice(value, category) == UNSPECIFIED


def test_unknown_category_returns_raw_value():
    assert translate_choice(3, "colour") == 3
    assert translate_choice("abc", "") == "abc"


def test_activities_joined_in_order():
    text = translate_choice([2, 1], "activity")
    assert text == f"{ACTIVITIES[2][1]}, {ACTIVITIES[1][1]}"


def test_activity_set_is_sorted():
    assert translate_choice({2, 1}, "activity") == translate_choice([1, 2], "activity")


def test_activity_unknown_code_in_list():
    assert translate_choice([1, 42], "activity") == f"{ACTIVITIES[1][1]}, {UNSPECIFIED}"


@pytest.mark.parametrize("value", ["1,2", 1, None, {"a": 1}, []])
def test_activity_not_a_proper_set(value):
    assert translate_choice(value, "activity") == UNSPECIFIED


def test_translate_answer_appends_custom_activity():
    answer = SimpleNamespace(
        trip_id=1, distance_id=1, value_id=1, location_interest_id=1,
        activity_id=[1], emotional_id=3, custom_activity=" ดูดาว ",
    )
    choices = translate_answer(answer)
    assert choices.activities == f"{ACTIVITIES[1][1]}, ดูดาว"
    assert choices.trip == TRIP_TYPES[1]


def test_translate_answer_custom_activity_only():
    answer = SimpleNamespace(
        trip_id=9, distance_id=1, value_id=1, location_interest_id=1,
        activity_id=[], emotional_id=3, custom_activity="ดูดาว",
    )
    choices = translate_answer(answer)
    assert choices.activities == "ดูดาว"
    assert choices.trip == UNSPECIFIED
