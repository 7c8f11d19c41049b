"""Tournament store - owns every tournament and the current selection.

The store is the single source of truth for tournament state. All mutations
finish against the in-memory model first; persistence is then queued on a
background writer and never blocks or fails the caller. Front ends observe
changes through Qt signals instead of reading shared globals.
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

import json
import threading
from typing import Any, Dict, List, Mapping, Optional, Union

from PyQt6 import QtCore
from PyQt6.QtCore import pyqtSignal

from bridgescorecard.constants import (
    STORAGE_KEY_CURRENT_TOURNAMENT_ID,
    STORAGE_KEY_LAST_USED_YOUR_SIDE,
    STORAGE_KEY_TOURNAMENTS,
)
from bridgescorecard.exceptions import (
    BoardNotFoundException,
    BridgeScorecardException,
    NoTournamentSelectedException,
    StorageException,
)
from bridgescorecard.models import Board, Contract, Direction, Tournament
from bridgescorecard.models.tournament import new_tournament_id
from bridgescorecard.scoring import calculate_score, is_declarer_vulnerable
from bridgescorecard.storage import BackgroundWriter, KeyValueStorage, default_storage
from bridgescorecard.utils import setup_logger
from bridgescorecard.utils.validation import (
    validate_board_count_strict,
    validate_side_strict,
    validate_tournament_name_strict,
)

logger = setup_logger(__name__)

DEFAULT_YOUR_SIDE = Direction.NS


class TournamentStore(QtCore.QObject):
    """Holds the tournament collection, the current tournament and the
    last used side, and keeps them in sync with durable storage.

    The current tournament is tracked by id and always read out of the
    collection, so the two can never disagree. Everything handed out is a
    copy; change state only through the operations below.

    Signals
    -------
    tournaments_changed()
        The collection changed (create, delete, board saved, load).
    current_tournament_changed(object)
        The current tournament changed or was edited. Carries a snapshot of
        the new current tournament, or None.
    last_used_your_side_changed(str)
        The remembered side changed. Carries "N-S" or "E-W".
    board_saved(int)
        A board of the current tournament was saved. Carries the board id.
    """

    tournaments_changed = pyqtSignal()
    current_tournament_changed = pyqtSignal(object)
    last_used_your_side_changed = pyqtSignal(str)
    board_saved = pyqtSignal(int)

    def __init__(
        self,
        storage: Optional[KeyValueStorage] = None,
        background: bool = True,
        parent: Optional[QtCore.QObject] = None,
    ) -> None:
        """Create an empty store. Call ``load()`` to restore saved state.

        Args
        ----
        storage: Durable storage; Qt user settings when omitted
        background: Persist on a worker thread instead of inline
        parent: Optional Qt parent object
        """
        super().__init__(parent)
        self.storage = storage if storage is not None else default_storage()
        self._writer = BackgroundWriter(self.storage, background=background)
        self._lock = threading.RLock()

        self._tournaments: List[Tournament] = []
        self._current_id: Optional[str] = None
        self._last_used_your_side: Direction = DEFAULT_YOUR_SIDE

    # ========== Read-only state ==========

    @property
    def tournaments(self) -> List[Tournament]:
        """Snapshot of every tournament, in creation order."""
        with self._lock:
            return [t.copy() for t in self._tournaments]

    @property
    def current_tournament(self) -> Optional[Tournament]:
        """Snapshot of the current tournament, or None."""
        with self._lock:
            current = self._current()
            return current.copy() if current is not None else None

    @property
    def current_tournament_id(self) -> Optional[str]:
        with self._lock:
            return self._current_id

    @property
    def last_used_your_side(self) -> Direction:
        """Side to pre-fill when the next board is entered."""
        with self._lock:
            return self._last_used_your_side

    def get_tournament(self, tournament_id: str) -> Optional[Tournament]:
        """Snapshot of a tournament by id, or None if not found."""
        with self._lock:
            tournament = self._find(tournament_id)
            return tournament.copy() if tournament is not None else None

    # ========== Tournament Management ==========

    def create_tournament(self, name: str, number_of_boards: int) -> Tournament:
        """Create a tournament with empty boards and make it current.

        Args:
            name: Tournament name (surrounding whitespace is stripped)
            number_of_boards: Number of boards, a positive integer

        Returns:
            Snapshot of the new tournament

        Raises:
            InvalidTournamentNameException: If the name is blank
            InvalidBoardCountException: If the board count is not positive
        """
        name = validate_tournament_name_strict(name)
        number_of_boards = validate_board_count_strict(number_of_boards)

        with self._lock:
            tournament = Tournament.create(
                name, number_of_boards, tournament_id=self._allocate_id()
            )
            self._tournaments.append(tournament)
            self._current_id = tournament.id
            self._persist_tournaments()
            self._persist_current_id()
            snapshot = tournament.copy()

        logger.info(
            f"Created tournament: {snapshot.name} ({snapshot.id}), "
            f"{snapshot.number_of_boards} boards"
        )
        self.tournaments_changed.emit()
        self.current_tournament_changed.emit(snapshot.copy())
        return snapshot

    def select_tournament(self, tournament_id: str) -> bool:
        """Make a tournament current.

        Returns:
            True if selected, False if no tournament has that id
        """
        with self._lock:
            tournament = self._find(tournament_id)
            if tournament is None:
                logger.warning(f"Cannot select tournament {tournament_id}: not found")
                return False
            self._current_id = tournament.id
            self._persist_current_id()
            snapshot = tournament.copy()

        logger.info(f"Selected tournament: {snapshot.name} ({snapshot.id})")
        self.current_tournament_changed.emit(snapshot)
        return True

    def delete_tournament(self, tournament_id: str) -> bool:
        """Delete a tournament.

        Deleting the current tournament makes the first remaining one
        current, or leaves no current tournament if none remain.

        Returns:
            True if deleted, False if no tournament has that id
        """
        with self._lock:
            tournament = self._find(tournament_id)
            if tournament is None:
                logger.warning(f"Cannot delete tournament {tournament_id}: not found")
                return False

            self._tournaments.remove(tournament)
            was_current = self._current_id == tournament.id
            if was_current:
                self._current_id = (
                    self._tournaments[0].id if self._tournaments else None
                )
                self._persist_current_id()
            self._persist_tournaments()
            current = self._current()
            snapshot = current.copy() if current is not None else None

        logger.info(f"Deleted tournament: {tournament.name} ({tournament.id})")
        self.tournaments_changed.emit()
        if was_current:
            self.current_tournament_changed.emit(snapshot)
        return True

    # ========== Board Management ==========

    def save_board_data(
        self,
        board_id: int,
        contract: Optional[Union[Contract, Mapping[str, Any]]] = None,
        your_side: Optional[Union[Direction, str]] = None,
    ) -> Board:
        """Record a contract and/or the recording player's side on a board.

        The contract's vulnerability is resolved from the board number and
        the declarer, then the contract is scored. Contract and side are
        written independently; leaving one out keeps its stored value.

        Args:
            board_id: Board number within the current tournament
            contract: A complete contract, or its dictionary form
            your_side: "N-S" or "E-W"

        Returns:
            Snapshot of the updated board

        Raises:
            NoTournamentSelectedException: If there is no current tournament
            BoardNotFoundException: If the board does not exist
            IncompleteContractException: If the contract is missing fields
            InvalidContractException: If the contract is out of range
            InvalidSideException: If your_side is not a known side
        """
        with self._lock:
            tournament = self._current()
            if tournament is None:
                raise NoTournamentSelectedException(
                    "No tournament selected. Create or select a tournament first."
                )
            board = tournament.get_board(board_id)
            if board is None:
                raise BoardNotFoundException(
                    f"Board {board_id} not found in tournament {tournament.name}"
                )

            # Check everything before touching the board
            side = validate_side_strict(your_side) if your_side is not None else None
            scored = None
            if contract is not None:
                if not isinstance(contract, Contract):
                    contract = Contract.from_dict(dict(contract))
                contract.validate()
                resolved = contract.with_vulnerability(
                    is_declarer_vulnerable(board.id, contract.declarer)
                )
                scored = (resolved, calculate_score(resolved))

            if scored is not None:
                board.contract, board.score = scored
            if side is not None:
                board.your_side = side

            self._persist_tournaments()
            tournament_snapshot = tournament.copy()
            board_snapshot = tournament_snapshot.get_board(board.id)

        logger.info(
            f"Saved board {board_id} of {tournament_snapshot.name}: "
            f"score={board_snapshot.score}, side={board_snapshot.your_side}"
        )
        self.board_saved.emit(board_id)
        self.tournaments_changed.emit()
        self.current_tournament_changed.emit(tournament_snapshot.copy())
        return board_snapshot

    def calculate_score(self, contract: Contract) -> int:
        """Score a complete contract using its own vulnerability flag."""
        return calculate_score(contract)

    def update_last_used_your_side(self, side: Union[Direction, str]) -> None:
        """Remember the side to pre-fill on the next board.

        Raises:
            InvalidSideException: If side is not "N-S" or "E-W"
        """
        side = validate_side_strict(side)
        with self._lock:
            self._last_used_your_side = side
            self._writer.write(STORAGE_KEY_LAST_USED_YOUR_SIDE, side.value)

        logger.debug(f"Last used side set to {side.value}")
        self.last_used_your_side_changed.emit(side.value)

    # ========== Lifecycle ==========

    def load(self) -> None:
        """Restore state from storage, replacing what the store holds.

        Missing or unreadable data is treated as no saved state; malformed
        tournaments are skipped. Never raises for storage problems.
        """
        raw_tournaments = self._read(STORAGE_KEY_TOURNAMENTS)
        raw_current_id = self._read(STORAGE_KEY_CURRENT_TOURNAMENT_ID)
        raw_side = self._read(STORAGE_KEY_LAST_USED_YOUR_SIDE)

        tournaments = self._parse_tournaments(raw_tournaments)
        current_id = self._parse_current_id(raw_current_id)
        side = DEFAULT_YOUR_SIDE
        if raw_side:
            try:
                side = Direction(raw_side)
            except ValueError:
                logger.warning(f"Ignoring stored side {raw_side!r}")

        with self._lock:
            self._tournaments = tournaments
            self._current_id = (
                current_id
                if current_id is not None and self._find(current_id) is not None
                else None
            )
            self._last_used_your_side = side
            current = self._current()
            snapshot = current.copy() if current is not None else None

        logger.info(
            f"Loaded {len(tournaments)} tournament(s), current: "
            f"{snapshot.name if snapshot else 'None'}"
        )
        self.tournaments_changed.emit()
        self.current_tournament_changed.emit(snapshot)
        self.last_used_your_side_changed.emit(side.value)

    def save(self) -> None:
        """Queue a write of the full state."""
        with self._lock:
            self._persist_tournaments()
            self._persist_current_id()
            self._writer.write(
                STORAGE_KEY_LAST_USED_YOUR_SIDE, self._last_used_your_side.value
            )

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for queued writes to reach storage."""
        return self._writer.flush(timeout)

    def close(self) -> None:
        """Finish queued writes and release the writer thread."""
        self._writer.close()

    # ========== Internals ==========

    def _find(self, tournament_id: Optional[str]) -> Optional[Tournament]:
        if tournament_id is None:
            return None
        return next(
            (t for t in self._tournaments if t.id == str(tournament_id)), None
        )

    def _current(self) -> Optional[Tournament]:
        return self._find(self._current_id)

    def _allocate_id(self) -> str:
        """Time-based id, bumped past any id already in use."""
        existing = {t.id for t in self._tournaments}
        candidate = int(new_tournament_id())
        while str(candidate) in existing:
            candidate += 1
        return str(candidate)

    def _persist_tournaments(self) -> None:
        payload = json.dumps([t.to_dict() for t in self._tournaments])
        self._writer.write(STORAGE_KEY_TOURNAMENTS, payload)

    def _persist_current_id(self) -> None:
        self._writer.write(STORAGE_KEY_CURRENT_TOURNAMENT_ID, self._current_id)

    def _read(self, key: str) -> Optional[str]:
        try:
            return self.storage.get_item(key)
        except StorageException:
            logger.exception(f"Could not read {key!r} from storage")
            return None

    def _parse_tournaments(self, raw: Optional[str]) -> List[Tournament]:
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning("Stored tournaments are not valid JSON, starting empty")
            return []
        if not isinstance(data, list):
            logger.warning("Stored tournaments are not a list, starting empty")
            return []

        tournaments: List[Tournament] = []
        seen = set()
        for entry in data:
            try:
                tournament = Tournament.from_dict(entry)
            except (
                KeyError,
                TypeError,
                ValueError,
                AttributeError,
                BridgeScorecardException,
            ) as e:
                logger.warning(f"Skipping malformed stored tournament: {e}")
                continue
            if tournament.id in seen:
                logger.warning(f"Skipping duplicate tournament id {tournament.id}")
                continue
            seen.add(tournament.id)
            tournaments.append(tournament)
        return tournaments

    @staticmethod
    def _parse_current_id(raw: Optional[str]) -> Optional[str]:
        """Stored id, written bare; a JSON-quoted id is accepted as well."""
        if not raw:
            return None
        if raw.startswith('"'):
            try:
                value: Any = json.loads(raw)
            except ValueError:
                return None
            return str(value) if value else None
        return raw

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"TournamentStore(tournaments={len(self._tournaments)}, "
                f"current={self._current_id!r})"
            )


def state_snapshot(store: TournamentStore) -> Dict[str, Any]:
    """Everything a front end reads, in the persisted JSON shape."""
    current = store.current_tournament
    return {
        "tournaments": [t.to_dict() for t in store.tournaments],
        "currentTournament": current.to_dict() if current is not None else None,
        "lastUsedYourSide": store.last_used_your_side.value,
    }
