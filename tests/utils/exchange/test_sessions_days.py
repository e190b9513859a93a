"""Unit tests for the SessionsDays class which validates and handles trading day flags.

This module verifies input validation, the Sunday-first weekday indexing used by the
session engine, and JSON serialization and iteration order.
"""

import pytest  # type: ignore

from src.utils.exchange.sessions_days import SessionsDays

VALID_DAYS = {
    "sunday": False,
    "monday": True,
    "tuesday": False,
    "wednesday": True,
    "thursday": False,
    "friday": True,
    "saturday": False,
}

weekdays = [
    "sunday",
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
]


def test_is_trading_day_uses_sunday_first_indices():
    """Index 0 is Sunday and index 6 is Saturday."""
    days = SessionsDays(VALID_DAYS, weekdays)
    expected = [False, True, False, True, False, True, False]
    for idx, flag in enumerate(expected):
        if days.is_trading_day(idx) is not flag:
            raise AssertionError(f"Unexpected flag for weekday {idx}")


def test_trading_days_and_open_days():
    """Enabled days are exposed both as indices and as names."""
    days = SessionsDays(VALID_DAYS, weekdays)
    if days.trading_days() != frozenset({1, 3, 5}):
        raise AssertionError(f"Unexpected trading days: {days.trading_days()}")
    if days.open_days() != ["monday", "wednesday", "friday"]:
        raise AssertionError(f"Unexpected open days: {days.open_days()}")


def test_keys_are_case_insensitive():
    """Capitalized day names are accepted."""
    days = SessionsDays({k.capitalize(): v for k, v in VALID_DAYS.items()}, weekdays)
    if not days.is_trading_day(1):
        raise AssertionError("Expected monday to be a trading day")


def test_invalid_type_for_days():
    """Non-dictionary input is rejected."""
    with pytest.raises(TypeError, match=r"`days` must be `Dict\[str, bool\]"):
        SessionsDays("invalid", weekdays)  # type: ignore


def test_missing_keys():
    """Missing weekday keys are rejected."""
    bad_days = VALID_DAYS.copy()
    del bad_days["friday"]
    with pytest.raises(ValueError, match=r"Missing keys in `days`: friday"):
        SessionsDays(bad_days, weekdays)


def test_unexpected_keys():
    """Unknown keys are rejected."""
    bad_days = VALID_DAYS.copy()
    bad_days["holiday"] = True
    with pytest.raises(ValueError, match=r"Unexpected key in `days`"):
        SessionsDays(bad_days, weekdays)


def test_invalid_value_type():
    """Non-boolean flags are rejected."""
    bad_days = VALID_DAYS.copy()
    bad_days["monday"] = "yes"  # type: ignore
    with pytest.raises(TypeError, match=r"Value for 'monday' must be bool"):
        SessionsDays(bad_days, weekdays)


def test_no_trading_day_rejected():
    """A schedule must trade on at least one day."""
    with pytest.raises(ValueError, match="At least one trading day"):
        SessionsDays({day: False for day in weekdays}, weekdays)


def test_weekday_index_out_of_range():
    """Weekday indices outside 0..6 are rejected."""
    days = SessionsDays(VALID_DAYS, weekdays)
    with pytest.raises(ValueError, match="`weekday` must be an integer in 0..6"):
        days.is_trading_day(7)


def test_to_json_and_iteration_order():
    """Serialization and iteration follow the Sunday-first order."""
    days = SessionsDays(VALID_DAYS, weekdays)
    if list(days.to_json().keys()) != weekdays:
        raise AssertionError("Expected JSON keys in weekday order")
    if list(days) != [VALID_DAYS[d] for d in weekdays]:
        raise AssertionError("Expected iteration in weekday order")
