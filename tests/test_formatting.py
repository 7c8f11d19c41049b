import pytest

from bridgescorecard.utils.formatting import (
    format_contract,
    format_contract_result,
    get_score_color,
    get_suit_color,
    get_suit_symbol,
    get_tricks_options,
)


def test_suit_symbols():
    assert get_suit_symbol("Clubs") == "♣"
    assert get_suit_symbol("Diamonds") == "♦"
    assert get_suit_symbol("Hearts") == "♥"
    assert get_suit_symbol("Spades") == "♠"
    assert get_suit_symbol("NoTrump") == "NT"


def test_suit_colors():
    assert get_suit_color("Hearts") == "red"
    assert get_suit_color("Diamonds") == "red"
    assert get_suit_color("Clubs") == "black"
    assert get_suit_color("Spades") == "black"
    assert get_suit_color("NoTrump") == "blue"


def test_format_contract():
    assert format_contract(4, "Spades") == "4♠"
    assert format_contract(3, "NoTrump", doubled=True) == "3NTX"
    assert format_contract(6, "Hearts", doubled=True, redoubled=True) == "6♥XX"
    assert format_contract(1, "Clubs", redoubled=True) == "1♣XX"


@pytest.mark.parametrize(
    "level, result, tricks, text",
    [
        (4, "Made", 10, "="),
        (4, "Made", 12, "+2"),
        (3, "Down", 1, "-1"),
        (7, "Down", 4, "-4"),
    ],
)
def test_format_contract_result(level, result, tricks, text):
    assert format_contract_result(level, result, tricks) == text


def test_score_color_without_side_uses_sign():
    assert get_score_color(None) == "gray"
    assert get_score_color(420) == "green"
    assert get_score_color(-50) == "red"
    assert get_score_color(0) == "gray"


def test_score_color_from_recording_side():
    # Declarer on our side
    assert get_score_color(420, "N", "N-S") == "green"
    assert get_score_color(-100, "S", "N-S") == "red"
    # Declarer on the other side
    assert get_score_color(420, "E", "N-S") == "red"
    assert get_score_color(-100, "W", "N-S") == "green"
    assert get_score_color(-100, "N", "E-W") == "green"


def test_tricks_options():
    assert get_tricks_options(None, "Made") == []
    assert get_tricks_options(3, None) == []
    assert get_tricks_options(4, "Made") == [10, 11, 12, 13]
    assert get_tricks_options(7, "Made") == [13]
    assert get_tricks_options(1, "Down") == [1, 2, 3, 4, 5, 6, 7]
