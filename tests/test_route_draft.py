"""
Tests for the route draft form state.

Run with: python -m pytest tests/test_route_draft.py
"""

import math

import pytest

from logic.route_draft import RouteDraft, coerce_number, is_valid_passenger_count


def test_default_draft():
    draft = RouteDraft()
    assert draft.to_dict() == {
        "start_point": "",
        "destination": "",
        "date": "",
        "time": "",
        "passengers": 1,
    }


@pytest.mark.parametrize(
    "name, attr",
    [
        ("startPoint", "start_point"),
        ("destination", "destination"),
        ("date", "date"),
        ("time", "time"),
    ],
)
def test_update_changes_only_one_field(name, attr):
    draft = RouteDraft("Home", "Work", "2026-10-16", "08:30", 2)
    updated = draft.update(name, "changed")

    before = draft.to_dict()
    after = updated.to_dict()
    assert after[attr] == "changed"
    for key in before:
        if key != attr:
            assert after[key] == before[key]

    # Original draft is untouched
    assert draft.to_dict() == before


def test_snake_case_name_accepted():
    assert RouteDraft().update("start_point", "Station").start_point == "Station"


def test_unknown_field_raises():
    with pytest.raises(KeyError):
        RouteDraft().update("driver", "Bob")


def test_passengers_coerced_to_number():
    draft = RouteDraft().update("passengers", "3")
    assert draft.passengers == 3
    assert is_valid_passenger_count(draft.passengers)


def test_non_numeric_passengers_is_nan():
    draft = RouteDraft().update("passengers", "three")
    assert math.isnan(draft.passengers)
    assert not is_valid_passenger_count(draft.passengers)

    # Deterministic: the same input always yields an equal draft
    assert draft == RouteDraft().update("passengers", "three")


def test_cleared_passengers_is_zero():
    assert RouteDraft().update("passengers", "").passengers == 0


class TestCoerceNumber:
    def test_blank(self):
        assert coerce_number("") == 0
        assert coerce_number("   ") == 0

    def test_decimals(self):
        assert coerce_number(" 42 ") == 42
        assert coerce_number("2.5") == 2.5
        assert coerce_number(".5") == 0.5
        assert coerce_number("-7") == -7
        assert coerce_number("1e3") == 1000

    def test_radix_literals(self):
        assert coerce_number("0x10") == 16
        assert coerce_number("0b101") == 5
        assert coerce_number("0o17") == 15

    def test_infinity(self):
        assert coerce_number("Infinity") == math.inf
        assert coerce_number("-Infinity") == -math.inf

    @pytest.mark.parametrize(
        "text",
        ["abc", "1,000", "1_000", "inf", "nan", "12px", "--1", ".", "١٢", "１２", "1e٣"],
    )
    def test_garbage_is_nan(self, text):
        assert math.isnan(coerce_number(text))

    def test_numbers_pass_through(self):
        assert coerce_number(4) == 4
        assert coerce_number(1.5) == 1.5
