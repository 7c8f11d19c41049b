"""Validation utilities for Bridge Scorecard.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Any, Optional

from bridgescorecard.exceptions import (
    InvalidBoardCountException,
    InvalidSideException,
    InvalidTournamentNameException,
)
from bridgescorecard.models.enums import Direction


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Tournament Name Validation ==========


def validate_tournament_name(name: Optional[str]) -> ValidationResult:
    """Validate a tournament name.

    Surrounding whitespace is stripped; a blank name is invalid.

    Example:
        >>> result = validate_tournament_name("  Club night ")
        >>> result.sanitized_value
        'Club night'
    """
    if not isinstance(name, str) or not name.strip():
        return ValidationResult(
            is_valid=False,
            error_message="Please enter a tournament name",
        )
    return ValidationResult(is_valid=True, sanitized_value=name.strip())


def validate_tournament_name_strict(name: Optional[str]) -> str:
    """Validate a tournament name and raise exception if invalid.

    Raises:
        InvalidTournamentNameException: If the name is empty
    """
    result = validate_tournament_name(name)
    if not result.is_valid:
        raise InvalidTournamentNameException(result.error_message)
    return result.sanitized_value


# ========== Board Count Validation ==========


def validate_board_count(value: Any) -> ValidationResult:
    """Validate the number of boards for a new tournament.

    Accepts positive integers and strings holding one (as typed into a form).
    Booleans and fractional numbers are rejected.
    """
    if isinstance(value, bool):
        count = None
    elif isinstance(value, int):
        count = value
    elif isinstance(value, str) and value.strip().isdigit():
        count = int(value.strip())
    else:
        count = None

    if count is None or count < 1:
        return ValidationResult(
            is_valid=False,
            error_message=f"Please enter a valid number of boards: {value!r}",
        )
    return ValidationResult(is_valid=True, sanitized_value=count)


def validate_board_count_strict(value: Any) -> int:
    """Validate a board count and raise exception if invalid.

    Raises:
        InvalidBoardCountException: If the value is not a positive integer
    """
    result = validate_board_count(value)
    if not result.is_valid:
        raise InvalidBoardCountException(result.error_message)
    return result.sanitized_value


# ========== Side Validation ==========


def validate_side(value: Any) -> ValidationResult:
    """Validate a partnership direction ("N-S" or "E-W")."""
    try:
        side = Direction(value)
    except ValueError:
        return ValidationResult(
            is_valid=False,
            error_message=f"Invalid side: {value!r} (expected 'N-S' or 'E-W')",
        )
    return ValidationResult(is_valid=True, sanitized_value=side)


def validate_side_strict(value: Any) -> Direction:
    """Validate a side and raise exception if invalid.

    Raises:
        InvalidSideException: If the value is not a known direction
    """
    result = validate_side(value)
    if not result.is_valid:
        raise InvalidSideException(result.error_message)
    return result.sanitized_value
