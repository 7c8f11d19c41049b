"""Background persistence writes.

Writes are queued on a single worker thread so they happen in the order
they were issued without blocking the caller. A failed write is logged and
dropped; the in-memory state stays authoritative.
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

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import wait as wait_futures
from typing import List, Optional

from bridgescorecard.storage.backends import KeyValueStorage
from bridgescorecard.utils import setup_logger

logger = setup_logger(__name__)


class BackgroundWriter:
    """Fire-and-forget writer in front of a key-value storage.

    Args:
        storage: Storage to write to
        background: Write on a worker thread (default). When False every
            write happens inline, still logging rather than raising failures.
    """

    def __init__(self, storage: KeyValueStorage, background: bool = True) -> None:
        self.storage = storage
        self._executor: Optional[ThreadPoolExecutor] = None
        if background:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="bridgescorecard-storage"
            )
        self._pending: List[Future] = []
        self._lock = threading.Lock()

    @property
    def is_background(self) -> bool:
        return self._executor is not None

    def write(self, key: str, value: Optional[str]) -> None:
        """Queue a write. ``None`` removes the key."""
        if self._executor is None:
            self._apply(key, value)
            return

        future = self._executor.submit(self._apply, key, value)
        with self._lock:
            self._pending = [f for f in self._pending if not f.done()]
            self._pending.append(future)

    def _apply(self, key: str, value: Optional[str]) -> bool:
        try:
            if value is None:
                self.storage.remove_item(key)
            else:
                self.storage.set_item(key, value)
        except Exception:
            logger.exception(f"Failed to persist {key!r} to {self.storage!r}")
            return False
        logger.debug(f"Persisted {key!r}")
        return True

    def flush(self, timeout: Optional[float] = None) -> bool:
        """Wait for queued writes.

        Returns:
            True if every queued write finished within the timeout
        """
        with self._lock:
            pending = list(self._pending)
        if not pending:
            return True
        _, not_done = wait_futures(pending, timeout=timeout)
        return not not_done

    def close(self) -> None:
        """Finish queued writes and stop the worker thread."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None
