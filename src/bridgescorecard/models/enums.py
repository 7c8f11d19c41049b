"""Enumerations shared by the scoring engine and the tournament models."""

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

from enum import Enum


class Suit(str, Enum):
    """Denomination of a contract."""

    CLUBS = "Clubs"
    DIAMONDS = "Diamonds"
    HEARTS = "Hearts"
    SPADES = "Spades"
    NOTRUMP = "NoTrump"

    @property
    def is_minor(self) -> bool:
        return self in (Suit.CLUBS, Suit.DIAMONDS)

    @property
    def is_major(self) -> bool:
        return self in (Suit.HEARTS, Suit.SPADES)


class Direction(str, Enum):
    """A partnership, not an individual seat."""

    NS = "N-S"
    EW = "E-W"


class Seat(str, Enum):
    """Compass seat of the declarer."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @property
    def side(self) -> Direction:
        """Partnership this seat belongs to."""
        if self in (Seat.NORTH, Seat.SOUTH):
            return Direction.NS
        return Direction.EW


class Result(str, Enum):
    """Whether the declarer made the contract or went down."""

    MADE = "Made"
    DOWN = "Down"
