"""Text helpers for showing boards, contracts and scores.

These are pure functions returning strings and colour names; drawing them is
left to whatever front end consumes the store.
"""

# Bridge Scorecard
# Copyright (C) 2025  Bridge Scorecard developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import List, Optional, Union

from bridgescorecard.constants import (
    BOOK_TRICKS,
    DOUBLED_MARK,
    REDOUBLED_MARK,
    SUIT_COLOURS,
    SUIT_SYMBOLS,
    TOTAL_TRICKS,
)
from bridgescorecard.models.enums import Direction, Result, Seat, Suit
from bridgescorecard.type_hints import ScoreColour, SuitColour


def get_suit_symbol(suit: Union[Suit, str]) -> str:
    """Card symbol for a suit, or "NT" for no-trump."""
    return SUIT_SYMBOLS.get(Suit(suit).value, "")


def get_suit_color(suit: Union[Suit, str]) -> SuitColour:
    """Red for hearts and diamonds, black for clubs and spades, blue for NT."""
    return SUIT_COLOURS.get(Suit(suit).value, "black")


def format_contract(
    level: int, suit: Union[Suit, str], doubled: bool = False, redoubled: bool = False
) -> str:
    """Short form of a contract, e.g. ``4♠``, ``3NTX`` or ``6♥XX``."""
    if redoubled:
        mark = REDOUBLED_MARK
    elif doubled:
        mark = DOUBLED_MARK
    else:
        mark = ""
    return f"{level}{get_suit_symbol(suit)}{mark}"


def format_contract_result(level: int, result: Union[Result, str], tricks: int) -> str:
    """Result relative to the contract: ``=``, ``+2`` or ``-1``."""
    if Result(result) == Result.MADE:
        overtricks = tricks - (level + BOOK_TRICKS)
        if overtricks > 0:
            return f"+{overtricks}"
        return "="
    return f"-{tricks}"


def get_score_color(
    score: Optional[int],
    declarer: Optional[Union[Seat, str]] = None,
    your_side: Optional[Union[Direction, str]] = None,
) -> ScoreColour:
    """Colour of a score from the recording player's point of view.

    Scores are always for the declaring side. When the recording player's
    side is known, a plus score for their side or a minus score for the
    opponents is green; anything else is red. Without a side the sign decides.
    """
    if score is None:
        return "gray"

    if your_side and declarer:
        declarer_on_your_side = Seat(declarer).side == Direction(your_side)
        if (score > 0 and declarer_on_your_side) or (
            score < 0 and not declarer_on_your_side
        ):
            return "green"
        return "red"

    if score > 0:
        return "green"
    if score < 0:
        return "red"
    return "gray"


def get_tricks_options(
    level: Optional[int], result: Optional[Union[Result, str]]
) -> List[int]:
    """Tricks values a contract entry form should offer.

    Made: total tricks from level + 6 up to 13. Down: undertricks from 1 up
    to level + 6. Empty until both level and result are chosen.
    """
    if not level or not result:
        return []
    contract_tricks = level + BOOK_TRICKS
    if Result(result) == Result.MADE:
        return list(range(contract_tricks, TOTAL_TRICKS + 1))
    return list(range(1, contract_tricks + 1))
