"""Contract data class and its trick outcome."""

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

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional, Union

from bridgescorecard.constants import BOOK_TRICKS, MAX_LEVEL, MIN_LEVEL, TOTAL_TRICKS
from bridgescorecard.exceptions import (
    IncompleteContractException,
    InvalidContractException,
)
from bridgescorecard.models.enums import Direction, Result, Seat, Suit


@dataclass(frozen=True)
class Made:
    """Contract fulfilled; ``total_tricks`` counts every trick declarer took."""

    total_tricks: int


@dataclass(frozen=True)
class Down:
    """Contract defeated by ``undertricks`` tricks."""

    undertricks: int


Outcome = Union[Made, Down]

REQUIRED_FIELDS = ("level", "suit", "declarer", "result", "tricks")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Contract:
    """The final contract of a board and how it was played.

    Attributes
    ----------
    level : int
        Number of tricks bid beyond six (1-7).
    suit : Suit
        Denomination of the contract.
    doubled : bool
        Whether the contract was doubled.
    redoubled : bool
        Whether the contract was redoubled. A redoubled contract is always
        doubled as well.
    declarer : Seat
        Compass seat of the declarer.
    result : Result
        Made or Down.
    tricks : int
        If Made, the total tricks taken (level + 6 or more). If Down, the
        number of undertricks.
    vulnerable : bool
        Vulnerability of the declaring side. Derived from the board number
        and the declarer whenever the contract is saved to a board.

    Any of level, suit, declarer, result and tricks may be ``None`` while a
    contract is still being entered; such a contract is not complete and can
    be neither scored nor saved.
    """

    level: Optional[int] = None
    suit: Optional[Suit] = None
    doubled: bool = False
    redoubled: bool = False
    declarer: Optional[Seat] = None
    result: Optional[Result] = None
    tricks: Optional[int] = None
    vulnerable: bool = False

    def __post_init__(self) -> None:
        try:
            if self.suit is not None:
                self.suit = Suit(self.suit)
            if self.declarer is not None:
                self.declarer = Seat(self.declarer)
            if self.result is not None:
                self.result = Result(self.result)
        except ValueError as e:
            raise InvalidContractException(str(e)) from e
        self.doubled = bool(self.doubled) or bool(self.redoubled)
        self.redoubled = bool(self.redoubled)
        self.vulnerable = bool(self.vulnerable)

    # ========== Completeness ==========

    @property
    def missing_fields(self) -> List[str]:
        """Names of the fields still needed before the contract is complete."""
        return [name for name in REQUIRED_FIELDS if getattr(self, name) is None]

    @property
    def is_complete(self) -> bool:
        return not self.missing_fields

    def validate(self) -> None:
        """Check the contract is complete and its numbers are in range.

        Raises:
            IncompleteContractException: If a required field is missing
            InvalidContractException: If level or tricks are out of range
        """
        missing = self.missing_fields
        if missing:
            raise IncompleteContractException(
                f"Contract is missing: {', '.join(missing)}"
            )

        if not _is_int(self.level) or not MIN_LEVEL <= self.level <= MAX_LEVEL:
            raise InvalidContractException(
                f"Contract level must be between {MIN_LEVEL} and {MAX_LEVEL}, "
                f"got {self.level!r}"
            )
        if not _is_int(self.tricks):
            raise InvalidContractException(
                f"Tricks must be a whole number, got {self.tricks!r}"
            )

        required = self.level + BOOK_TRICKS
        if self.result == Result.MADE:
            if not required <= self.tricks <= TOTAL_TRICKS:
                raise InvalidContractException(
                    f"A made {self.level}-level contract takes between "
                    f"{required} and {TOTAL_TRICKS} tricks, got {self.tricks}"
                )
        elif not 1 <= self.tricks <= required:
            raise InvalidContractException(
                f"A defeated {self.level}-level contract is down between 1 and "
                f"{required} tricks, got {self.tricks}"
            )

    # ========== Derived values ==========

    @property
    def outcome(self) -> Outcome:
        """The tricks field read according to the result.

        Raises:
            IncompleteContractException: If the contract is not complete
            InvalidContractException: If the contract is out of range
        """
        self.validate()
        if self.result == Result.MADE:
            return Made(total_tricks=self.tricks)
        return Down(undertricks=self.tricks)

    @property
    def declaring_side(self) -> Optional[Direction]:
        """Partnership of the declarer, if the declarer is known."""
        if self.declarer is None:
            return None
        return self.declarer.side

    def with_vulnerability(self, vulnerable: bool) -> "Contract":
        """Return a copy carrying the given vulnerability."""
        return replace(self, vulnerable=vulnerable)

    # ========== Serialization ==========

    def to_dict(self) -> Dict[str, Any]:
        """Serialize contract to dictionary."""
        return {
            "level": self.level,
            "suit": self.suit.value if self.suit is not None else None,
            "doubled": self.doubled,
            "redoubled": self.redoubled,
            "declarer": self.declarer.value if self.declarer is not None else None,
            "result": self.result.value if self.result is not None else None,
            "tricks": self.tricks,
            "vulnerable": self.vulnerable,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Contract":
        """Deserialize contract from dictionary."""
        return cls(
            level=data.get("level"),
            suit=data.get("suit"),
            doubled=data.get("doubled", False),
            redoubled=data.get("redoubled", False),
            declarer=data.get("declarer"),
            result=data.get("result"),
            tricks=data.get("tricks"),
            vulnerable=data.get("vulnerable", False),
        )
