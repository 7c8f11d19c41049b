"""Board vulnerability.

Vulnerability follows the standard duplicate pattern, repeating every 16
boards regardless of how many boards a tournament has:

- None: boards 1, 8, 11, 14
- N-S only: boards 2, 5, 12, 15
- E-W only: boards 3, 6, 9, 16
- Both: boards 4, 7, 10, 13
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

from typing import Dict, NamedTuple, Union

from bridgescorecard.constants import VULNERABILITY_CYCLE
from bridgescorecard.models.enums import Direction, Seat
from bridgescorecard.type_hints import VulnerabilityText


class Vulnerability(NamedTuple):
    """Vulnerability of both partnerships on one board."""

    ns: bool
    ew: bool

    def for_side(self, side: Union[Direction, str]) -> bool:
        """Whether the given partnership is vulnerable."""
        if Direction(side) == Direction.NS:
            return self.ns
        return self.ew

    @property
    def text(self) -> VulnerabilityText:
        if self.ns and self.ew:
            return "Both"
        if self.ns:
            return "N-S"
        if self.ew:
            return "E-W"
        return "None"


NONE_VULNERABLE = Vulnerability(ns=False, ew=False)
NS_VULNERABLE = Vulnerability(ns=True, ew=False)
EW_VULNERABLE = Vulnerability(ns=False, ew=True)
BOTH_VULNERABLE = Vulnerability(ns=True, ew=True)

VULNERABILITY_TABLE: Dict[int, Vulnerability] = {
    **dict.fromkeys((1, 8, 11, 14), NONE_VULNERABLE),
    **dict.fromkeys((2, 5, 12, 15), NS_VULNERABLE),
    **dict.fromkeys((3, 6, 9, 16), EW_VULNERABLE),
    **dict.fromkeys((4, 7, 10, 13), BOTH_VULNERABLE),
}


def normalize_board_number(board_number: int) -> int:
    """Position of the board within the 16-board vulnerability cycle (1-16)."""
    return ((board_number - 1) % VULNERABILITY_CYCLE) + 1


def get_vulnerability(board_number: int) -> Vulnerability:
    """Vulnerability of both partnerships on a board."""
    return VULNERABILITY_TABLE[normalize_board_number(board_number)]


def get_vulnerability_text(board_number: int) -> VulnerabilityText:
    """Display form of a board's vulnerability: None, N-S, E-W or Both."""
    return get_vulnerability(board_number).text


def is_declarer_vulnerable(board_number: int, declarer: Union[Seat, str]) -> bool:
    """Whether the declarer's partnership is vulnerable on a board."""
    return get_vulnerability(board_number).for_side(Seat(declarer).side)
