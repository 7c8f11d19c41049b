"""Exceptions for use in Bridge Scorecard"""

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


# ========== Base Application Exception ==========


class BridgeScorecardException(Exception):
    """Base exception for all Bridge Scorecard errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Validation Exceptions ==========


class ValidationException(BridgeScorecardException):
    """Base exception for user input validation errors."""

    pass


class InvalidTournamentNameException(ValidationException):
    """Raised when a tournament name is empty or blank."""

    pass


class InvalidBoardCountException(ValidationException):
    """Raised when the number of boards is not a positive integer."""

    pass


class InvalidSideException(ValidationException):
    """Raised when a value is not one of the two partnership directions."""

    pass


# ========== Contract Exceptions ==========


class ContractException(BridgeScorecardException):
    """Base exception for contract-related errors."""

    pass


class IncompleteContractException(ContractException):
    """Raised when a contract is missing level, suit, declarer, result or tricks."""

    pass


class InvalidContractException(ContractException):
    """Raised when a complete contract holds out-of-range values."""

    pass


# ========== Tournament Exceptions ==========


class TournamentException(BridgeScorecardException):
    """Base exception for tournament-related errors."""

    pass


class NoTournamentSelectedException(TournamentException):
    """Raised when an operation needs a current tournament and none is selected."""

    pass


class BoardNotFoundException(TournamentException):
    """Raised when a requested board does not exist in the tournament."""

    pass


# ========== Storage Exceptions ==========


class StorageException(BridgeScorecardException):
    """Base exception for durable storage errors."""

    pass


class StorageLoadException(StorageException):
    """Raised when persisted state cannot be read."""

    pass


class StorageSaveException(StorageException):
    """Raised when state cannot be written to durable storage."""

    pass
