"""Duplicate bridge contract scoring.

Computes the raw trick-point score of a played contract from the declaring
side's point of view: positive when the contract is made, negative when it
goes down. No matchpoints or IMPs.
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

from bridgescorecard.constants import (
    BOOK_TRICKS,
    DOUBLED_INSULT_BONUS,
    DOUBLED_MULTIPLIER,
    DOUBLED_NOT_VULNERABLE_AFTER_THIRD,
    DOUBLED_NOT_VULNERABLE_FIRST,
    DOUBLED_NOT_VULNERABLE_SECOND_THIRD,
    DOUBLED_NOT_VULNERABLE_THREE_DOWN,
    DOUBLED_OVERTRICK,
    DOUBLED_VULNERABLE_FIRST,
    DOUBLED_VULNERABLE_SUBSEQUENT,
    GAME_BONUS,
    GAME_THRESHOLD,
    GRAND_SLAM_BONUS,
    GRAND_SLAM_LEVEL,
    MAJOR_TRICK_VALUE,
    MINOR_TRICK_VALUE,
    NOTRUMP_FIRST_TRICK_VALUE,
    NOTRUMP_TRICK_VALUE,
    PART_SCORE_BONUS,
    REDOUBLED_INSULT_BONUS,
    REDOUBLED_MULTIPLIER,
    REDOUBLED_NOT_VULNERABLE_FIRST,
    REDOUBLED_NOT_VULNERABLE_SUBSEQUENT,
    REDOUBLED_OVERTRICK,
    REDOUBLED_VULNERABLE_FIRST,
    REDOUBLED_VULNERABLE_SUBSEQUENT,
    SMALL_SLAM_BONUS,
    SMALL_SLAM_LEVEL,
    UNDOUBLED_UNDERTRICK,
)
from bridgescorecard.models.contract import Contract, Made
from bridgescorecard.models.enums import Suit


def trick_points(level: int, suit: Suit) -> int:
    """Undoubled points for the tricks bid and made."""
    if suit == Suit.NOTRUMP:
        return NOTRUMP_FIRST_TRICK_VALUE + (level - 1) * NOTRUMP_TRICK_VALUE
    if Suit(suit).is_minor:
        return level * MINOR_TRICK_VALUE
    return level * MAJOR_TRICK_VALUE


def undoubled_overtrick_value(suit: Suit) -> int:
    if Suit(suit).is_minor:
        return MINOR_TRICK_VALUE
    return MAJOR_TRICK_VALUE


def made_score(contract: Contract, total_tricks: int) -> int:
    """Score for a made contract. Always positive."""
    vul = int(contract.vulnerable)
    level = contract.level

    score = trick_points(level, contract.suit)

    # Doubling multiplies the trick points only
    if contract.redoubled:
        score *= REDOUBLED_MULTIPLIER
    elif contract.doubled:
        score *= DOUBLED_MULTIPLIER

    if score >= GAME_THRESHOLD:
        score += GAME_BONUS[vul]
    else:
        score += PART_SCORE_BONUS

    # Slam bonuses come on top of the game bonus
    if level == SMALL_SLAM_LEVEL:
        score += SMALL_SLAM_BONUS[vul]
    elif level == GRAND_SLAM_LEVEL:
        score += GRAND_SLAM_BONUS[vul]

    overtricks = total_tricks - (level + BOOK_TRICKS)
    if overtricks > 0:
        if contract.redoubled:
            score += REDOUBLED_OVERTRICK[vul] * overtricks
        elif contract.doubled:
            score += DOUBLED_OVERTRICK[vul] * overtricks
        else:
            score += undoubled_overtrick_value(contract.suit) * overtricks

    # Redoubled replaces the doubled bonus, it does not add to it
    if contract.redoubled:
        score += REDOUBLED_INSULT_BONUS
    elif contract.doubled:
        score += DOUBLED_INSULT_BONUS

    return score


def undertrick_penalty(
    undertricks: int, doubled: bool, redoubled: bool, vulnerable: bool
) -> int:
    """Points lost by the declaring side, as a positive number."""
    if redoubled:
        if vulnerable:
            return REDOUBLED_VULNERABLE_FIRST + (
                undertricks - 1
            ) * REDOUBLED_VULNERABLE_SUBSEQUENT
        return REDOUBLED_NOT_VULNERABLE_FIRST + max(
            0, undertricks - 1
        ) * REDOUBLED_NOT_VULNERABLE_SUBSEQUENT

    if doubled:
        if vulnerable:
            return DOUBLED_VULNERABLE_FIRST + (
                undertricks - 1
            ) * DOUBLED_VULNERABLE_SUBSEQUENT
        # Non-vulnerable doubled: 100, then 200 each to 3 down, then 300 each
        if undertricks == 1:
            return DOUBLED_NOT_VULNERABLE_FIRST
        if undertricks <= 3:
            return DOUBLED_NOT_VULNERABLE_FIRST + (
                undertricks - 1
            ) * DOUBLED_NOT_VULNERABLE_SECOND_THIRD
        return DOUBLED_NOT_VULNERABLE_THREE_DOWN + (
            undertricks - 3
        ) * DOUBLED_NOT_VULNERABLE_AFTER_THIRD

    return undertricks * UNDOUBLED_UNDERTRICK[int(vulnerable)]


def calculate_score(contract: Contract) -> int:
    """Score a complete contract for the declaring side.

    The contract's ``vulnerable`` flag is used as given; resolve it from the
    board first (see ``is_declarer_vulnerable``).

    Args:
        contract: A complete contract

    Returns:
        Signed score, positive when made and negative when down

    Raises:
        IncompleteContractException: If the contract is not complete
        InvalidContractException: If level or tricks are out of range
    """
    outcome = contract.outcome
    if isinstance(outcome, Made):
        return made_score(contract, outcome.total_tricks)
    return -undertrick_penalty(
        outcome.undertricks,
        doubled=contract.doubled,
        redoubled=contract.redoubled,
        vulnerable=contract.vulnerable,
    )
