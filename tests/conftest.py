import pytest
from PyQt6.QtCore import QCoreApplication

from bridgescorecard.controllers.tournament import TournamentStore
from bridgescorecard.storage import MemoryStorage


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    store = TournamentStore(storage, background=False)
    yield store
    store.close()


class FailingStorage(MemoryStorage):
    """Reads work, every write raises."""

    def set_item(self, key, value):
        from bridgescorecard.exceptions import StorageSaveException

        raise StorageSaveException(f"disk full while writing {key}")

    def remove_item(self, key):
        from bridgescorecard.exceptions import StorageSaveException

        raise StorageSaveException(f"disk full while removing {key}")


class UnreadableStorage(MemoryStorage):
    """Every read raises."""

    def get_item(self, key):
        from bridgescorecard.exceptions import StorageLoadException

        raise StorageLoadException("storage unavailable")
