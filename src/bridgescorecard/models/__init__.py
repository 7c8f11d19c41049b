"""Data models for Bridge Scorecard."""

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

from bridgescorecard.models.enums import Direction, Result, Seat, Suit
from bridgescorecard.models.contract import Contract, Down, Made, Outcome
from bridgescorecard.models.board import Board
from bridgescorecard.models.tournament import Tournament

__all__ = [
    "Suit",
    "Direction",
    "Seat",
    "Result",
    "Contract",
    "Made",
    "Down",
    "Outcome",
    "Board",
    "Tournament",
]
