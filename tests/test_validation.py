import pytest

from bridgescorecard.exceptions import (
    InvalidBoardCountException,
    InvalidSideException,
    InvalidTournamentNameException,
)
from bridgescorecard.models import Direction
from bridgescorecard.utils.validation import (
    validate_board_count,
    validate_board_count_strict,
    validate_side,
    validate_side_strict,
    validate_tournament_name,
    validate_tournament_name_strict,
)


def test_tournament_name_is_stripped():
    result = validate_tournament_name("  Club night  ")
    assert result
    assert result.sanitized_value == "Club night"


@pytest.mark.parametrize("name", ["", "   ", None, 42])
def test_blank_tournament_name(name):
    result = validate_tournament_name(name)
    assert not result
    assert result.error_message == "Please enter a tournament name"
    with pytest.raises(InvalidTournamentNameException):
        validate_tournament_name_strict(name)


@pytest.mark.parametrize("value, expected", [(1, 1), (16, 16), ("24", 24), (" 8 ", 8)])
def test_valid_board_counts(value, expected):
    assert validate_board_count(value).sanitized_value == expected
    assert validate_board_count_strict(value) == expected


@pytest.mark.parametrize("value", [0, -3, "0", "abc", "2.5", 2.5, True, None, ""])
def test_invalid_board_counts(value):
    assert not validate_board_count(value)
    with pytest.raises(InvalidBoardCountException):
        validate_board_count_strict(value)


def test_sides():
    assert validate_side("N-S").sanitized_value is Direction.NS
    assert validate_side_strict(Direction.EW) is Direction.EW
    assert not validate_side("NS")
    with pytest.raises(InvalidSideException):
        validate_side_strict("north")


def test_validation_result_repr():
    assert "VALID" in repr(validate_side("E-W"))
    assert "INVALID" in repr(validate_side("x"))
