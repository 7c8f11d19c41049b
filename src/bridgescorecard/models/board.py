"""Data model for a single board of a tournament."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from bridgescorecard.models.contract import Contract
from bridgescorecard.models.enums import Direction
from bridgescorecard.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class Board:
    """One dealt hand of a tournament.

    Attributes
    ----------
    id : int
        Board number, 1-based position within the tournament.
    contract : Contract or None
        Recorded contract, once one has been saved.
    score : int or None
        Signed score of the contract for the declaring side. Present exactly
        when a complete contract is present.
    your_side : Direction or None
        Partnership the recording player sat in. Only used to colour scores.
    """

    id: int
    contract: Optional[Contract] = None
    score: Optional[int] = None
    your_side: Optional[Direction] = None

    @property
    def has_result(self) -> bool:
        return self.contract is not None and self.score is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize board to dictionary, leaving out unset fields."""
        data: Dict[str, Any] = {"id": self.id}
        if self.contract is not None:
            data["contract"] = self.contract.to_dict()
        if self.score is not None:
            data["score"] = self.score
        if self.your_side is not None:
            data["yourSide"] = self.your_side.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Board":
        """Deserialize board from dictionary.

        A stored contract that is not complete, or that has no score, is
        dropped together with its score.
        """
        board_id = data["id"]
        contract = None
        score = data.get("score")
        if data.get("contract") is not None:
            contract = Contract.from_dict(data["contract"])

        if contract is None or not contract.is_complete or score is None:
            if contract is not None or score is not None:
                logger.warning(f"Discarding unfinished result on board {board_id}")
            contract = None
            score = None

        your_side = data.get("yourSide")
        return cls(
            id=board_id,
            contract=contract,
            score=score,
            your_side=Direction(your_side) if your_side else None,
        )
