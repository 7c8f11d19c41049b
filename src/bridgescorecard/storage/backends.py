"""Durable key-value storage backends.

The tournament store persists three string values under fixed keys. Any
object with ``get_item``, ``set_item`` and ``remove_item`` can back it.
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
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from PyQt6.QtCore import QSettings

from bridgescorecard.constants import APPLICATION_NAME, ORGANIZATION_NAME
from bridgescorecard.exceptions import StorageLoadException, StorageSaveException
from bridgescorecard.utils import setup_logger

logger = setup_logger(__name__)


class KeyValueStorage(Protocol):
    """String key-value store the tournament store reads from and writes to."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """In-process storage. Lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.Lock()

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def remove_item(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def __repr__(self) -> str:
        return f"MemoryStorage(keys={sorted(self._data)!r})"


class JsonFileStorage:
    """All keys kept in a single JSON object on disk.

    Every write replaces the file atomically, so a crash mid-write leaves the
    previous contents intact.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise StorageLoadException(f"Could not read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageLoadException(f"{self.path} does not hold a JSON object")
        return data

    def _write(self, data: Dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=self.path.name, suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self.path)
            except BaseException:
                os.unlink(tmp_name)
                raise
        except OSError as e:
            raise StorageSaveException(f"Could not write {self.path}: {e}") from e

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            value = self._read().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            try:
                data = self._read()
            except StorageLoadException:
                logger.warning(f"Overwriting unreadable storage file {self.path}")
                data = {}
            data[key] = value
            self._write(data)

    def remove_item(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key in data:
                del data[key]
                self._write(data)

    def __repr__(self) -> str:
        return f"JsonFileStorage({str(self.path)!r})"


class QSettingsStorage:
    """Storage in Qt's per-user application settings.

    With a ``path`` the settings live in that INI file; otherwise in the
    user-scope INI file for the organisation and application names. A fresh
    ``QSettings`` object is opened per call so the storage can be used from
    the background writer thread.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        organization: str = ORGANIZATION_NAME,
        application: str = APPLICATION_NAME,
    ) -> None:
        self.path = str(path) if path is not None else None
        self.organization = organization
        self.application = application

    def _settings(self) -> QSettings:
        if self.path is not None:
            return QSettings(self.path, QSettings.Format.IniFormat)
        return QSettings(
            QSettings.Format.IniFormat,
            QSettings.Scope.UserScope,
            self.organization,
            self.application,
        )

    def get_item(self, key: str) -> Optional[str]:
        settings = self._settings()
        if settings.status() != QSettings.Status.NoError:
            raise StorageLoadException(
                f"Could not read settings {settings.fileName()}: {settings.status()}"
            )
        if not settings.contains(key):
            return None
        return settings.value(key, "", type=str)

    def set_item(self, key: str, value: str) -> None:
        settings = self._settings()
        settings.setValue(key, value)
        self._sync(settings)

    def remove_item(self, key: str) -> None:
        settings = self._settings()
        settings.remove(key)
        self._sync(settings)

    def _sync(self, settings: QSettings) -> None:
        settings.sync()
        if settings.status() != QSettings.Status.NoError:
            raise StorageSaveException(
                f"Could not write settings {settings.fileName()}: {settings.status()}"
            )

    def __repr__(self) -> str:
        return f"QSettingsStorage(path={self.path!r})"


def default_storage() -> QSettingsStorage:
    """Storage used by the application when none is supplied."""
    return QSettingsStorage()
