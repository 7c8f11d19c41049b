"""Bridge Scorecard - duplicate bridge scoring and tournament records.

This package provides the scoring engine for duplicate contract bridge and a
store that keeps a player's tournaments, boards and results.
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

__version__ = "1.0.0"

from bridgescorecard.controllers.tournament import TournamentStore
from bridgescorecard.models import (
    Board,
    Contract,
    Direction,
    Down,
    Made,
    Result,
    Seat,
    Suit,
    Tournament,
)
from bridgescorecard.scoring import (
    calculate_score,
    get_vulnerability,
    get_vulnerability_text,
    is_declarer_vulnerable,
)

__all__ = [
    "TournamentStore",
    "Tournament",
    "Board",
    "Contract",
    "Made",
    "Down",
    "Suit",
    "Direction",
    "Seat",
    "Result",
    "calculate_score",
    "get_vulnerability",
    "get_vulnerability_text",
    "is_declarer_vulnerable",
]
