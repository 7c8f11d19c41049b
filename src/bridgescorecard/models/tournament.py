"""Tournament data class - a named, dated set of boards."""

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

import copy
import time
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional

from dateutil import parser as date_parser

from bridgescorecard.constants import DATE_FORMAT
from bridgescorecard.models.board import Board


def new_tournament_id() -> str:
    """Time-based id: milliseconds since the epoch, as a string."""
    return str(int(time.time() * 1000))


@dataclass
class Tournament:
    """A tournament and all of its boards.

    Attributes
    ----------
    id : str
        Unique id assigned at creation.
    name : str
        Tournament name.
    date : datetime.date
        Creation date. Not editable.
    number_of_boards : int
        Number of boards played.
    boards : list of Board
        Boards in order, ids 1..number_of_boards.
    """

    id: str
    name: str
    date: date
    number_of_boards: int
    boards: List[Board] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        name: str,
        number_of_boards: int,
        tournament_id: Optional[str] = None,
        created: Optional[date] = None,
    ) -> "Tournament":
        """Build a new tournament with empty boards numbered 1..number_of_boards."""
        return cls(
            id=tournament_id or new_tournament_id(),
            name=name,
            date=created or date.today(),
            number_of_boards=number_of_boards,
            boards=[Board(id=i) for i in range(1, number_of_boards + 1)],
        )

    def get_board(self, board_id: int) -> Optional[Board]:
        """Get a board by its number, or None if there is no such board."""
        if 1 <= board_id <= len(self.boards):
            board = self.boards[board_id - 1]
            if board.id == board_id:
                return board
        return next((b for b in self.boards if b.id == board_id), None)

    @property
    def completed_boards(self) -> int:
        """Number of boards with a recorded result."""
        return sum(1 for b in self.boards if b.has_result)

    def copy(self) -> "Tournament":
        """Independent deep copy, safe to hand out as a snapshot."""
        return copy.deepcopy(self)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "date": self.date.strftime(DATE_FORMAT),
            "boards": [b.to_dict() for b in self.boards],
            "numberOfBoards": self.number_of_boards,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Tournament":
        """Deserialize tournament from dictionary.

        Raises:
            KeyError: If a required key is missing
            ValueError: If the date is unreadable or the boards are not
                numbered 1..numberOfBoards in order
        """
        boards = [Board.from_dict(b) for b in data.get("boards", [])]
        number_of_boards = data.get("numberOfBoards", len(boards))
        if [b.id for b in boards] != list(range(1, number_of_boards + 1)):
            raise ValueError(
                f"Tournament {data.get('id')!r}: boards must be numbered "
                f"1..{number_of_boards} in order"
            )

        return cls(
            id=str(data["id"]),
            name=data["name"],
            date=date_parser.isoparse(str(data["date"])).date(),
            number_of_boards=number_of_boards,
            boards=boards,
        )
