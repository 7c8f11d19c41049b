import json

import pytest

from bridgescorecard.constants import (
    STORAGE_KEY_CURRENT_TOURNAMENT_ID,
    STORAGE_KEY_LAST_USED_YOUR_SIDE,
    STORAGE_KEY_TOURNAMENTS,
)
from bridgescorecard.controllers.tournament import TournamentStore, state_snapshot
from bridgescorecard.exceptions import (
    BoardNotFoundException,
    IncompleteContractException,
    InvalidBoardCountException,
    InvalidContractException,
    InvalidSideException,
    InvalidTournamentNameException,
    NoTournamentSelectedException,
)
from bridgescorecard.models import Contract, Direction
from bridgescorecard.storage import JsonFileStorage, MemoryStorage
from conftest import FailingStorage, UnreadableStorage


def _contract(**overrides):
    fields = dict(
        level=4,
        suit="Spades",
        declarer="N",
        result="Made",
        tricks=10,
    )
    fields.update(overrides)
    return Contract(**fields)


def _stored_tournaments(storage):
    return json.loads(storage.get_item(STORAGE_KEY_TOURNAMENTS))


def _reloaded(storage):
    store = TournamentStore(storage, background=False)
    store.load()
    return store


# ========== Create ==========


def test_create_tournament_with_sixteen_boards(store):
    tournament = store.create_tournament("Club night", 16)
    assert tournament.name == "Club night"
    assert tournament.number_of_boards == 16
    assert [b.id for b in tournament.boards] == list(range(1, 17))
    assert all(b.contract is None for b in tournament.boards)
    assert store.current_tournament.id == tournament.id
    assert len(store.tournaments) == 1


def test_create_persists_collection_and_current_id(store, storage):
    tournament = store.create_tournament("Club night", 2)
    assert _stored_tournaments(storage) == [tournament.to_dict()]
    assert storage.get_item(STORAGE_KEY_CURRENT_TOURNAMENT_ID) == tournament.id


def test_created_ids_are_unique(store):
    ids = {store.create_tournament(f"T{i}", 1).id for i in range(5)}
    assert len(ids) == 5


@pytest.mark.parametrize("name", ["", "   "])
def test_create_rejects_blank_name(store, storage, name):
    with pytest.raises(InvalidTournamentNameException):
        store.create_tournament(name, 16)
    assert store.tournaments == []
    assert storage.get_item(STORAGE_KEY_TOURNAMENTS) is None


@pytest.mark.parametrize("count", [0, -1, "abc", 2.5])
def test_create_rejects_bad_board_count(store, count):
    with pytest.raises(InvalidBoardCountException):
        store.create_tournament("Club night", count)
    assert store.tournaments == []
    assert store.current_tournament is None


# ========== Select / Delete ==========


def test_select_tournament(store, storage):
    first = store.create_tournament("First", 4)
    store.create_tournament("Second", 4)
    assert store.select_tournament(first.id) is True
    assert store.current_tournament.id == first.id
    assert storage.get_item(STORAGE_KEY_CURRENT_TOURNAMENT_ID) == first.id


def test_select_unknown_tournament_is_a_no_op(store):
    current = store.create_tournament("Only", 4)
    assert store.select_tournament("does-not-exist") is False
    assert store.current_tournament.id == current.id


def test_delete_only_tournament_clears_current(store, storage):
    tournament = store.create_tournament("Only", 4)
    assert store.delete_tournament(tournament.id) is True
    assert store.current_tournament is None
    assert store.tournaments == []
    assert _stored_tournaments(storage) == []
    assert storage.get_item(STORAGE_KEY_CURRENT_TOURNAMENT_ID) is None


def test_deleted_tournament_stays_deleted_after_reload(store, storage):
    tournament = store.create_tournament("Only", 4)
    store.delete_tournament(tournament.id)
    reloaded = _reloaded(storage)
    assert reloaded.tournaments == []
    assert reloaded.current_tournament is None


def test_delete_current_selects_first_remaining(store):
    first = store.create_tournament("First", 4)
    second = store.create_tournament("Second", 4)
    third = store.create_tournament("Third", 4)
    assert store.current_tournament.id == third.id
    store.delete_tournament(third.id)
    assert store.current_tournament.id == first.id
    assert [t.id for t in store.tournaments] == [first.id, second.id]


def test_delete_other_tournament_keeps_current(store):
    first = store.create_tournament("First", 4)
    second = store.create_tournament("Second", 4)
    store.delete_tournament(first.id)
    assert store.current_tournament.id == second.id


def test_delete_unknown_tournament(store):
    store.create_tournament("Only", 4)
    assert store.delete_tournament("nope") is False
    assert len(store.tournaments) == 1


# ========== Board data ==========


def test_save_board_scores_contract(store):
    store.create_tournament("Pairs", 16)
    board = store.save_board_data(1, contract=_contract())
    assert board.score == 420
    assert board.contract.vulnerable is False
    current = store.current_tournament
    assert current.boards[0].score == 420
    assert store.tournaments[0].boards[0].score == 420


def test_save_board_resolves_declarer_vulnerability(store):
    store.create_tournament("Pairs", 16)
    # Board 2: N-S vulnerable only
    ns = store.save_board_data(2, contract=_contract(declarer="S"))
    assert ns.contract.vulnerable is True
    assert ns.score == 620
    store.create_tournament("Pairs again", 16)
    ew = store.save_board_data(2, contract=_contract(declarer="E"))
    assert ew.contract.vulnerable is False
    assert ew.score == 420


def test_save_board_ignores_stale_vulnerability(store):
    store.create_tournament("Pairs", 16)
    board = store.save_board_data(1, contract=_contract(vulnerable=True))
    assert board.contract.vulnerable is False
    assert board.score == 420


def test_save_board_uses_board_number_beyond_sixteen(store):
    store.create_tournament("Long session", 20)
    # Board 20 has the vulnerability of board 4: both vulnerable
    board = store.save_board_data(20, contract=_contract(declarer="W"))
    assert board.contract.vulnerable is True
    assert board.score == 620


def test_save_board_accepts_dictionary_contract(store):
    store.create_tournament("Pairs", 4)
    board = store.save_board_data(
        4,
        contract={
            "level": 4,
            "suit": "Hearts",
            "doubled": True,
            "redoubled": True,
            "declarer": "N",
            "result": "Down",
            "tricks": 2,
        },
    )
    assert board.score == -1000


def test_side_and_contract_update_independently(store):
    store.create_tournament("Pairs", 4)
    store.save_board_data(3, your_side="E-W")
    board = store.save_board_data(3, contract=_contract(result="Down", tricks=1))
    assert board.your_side is Direction.EW
    assert board.score == -50
    board = store.save_board_data(3, your_side=Direction.NS)
    assert board.your_side is Direction.NS
    assert board.score == -50
    assert board.contract.tricks == 1


def test_side_can_be_recorded_without_contract(store):
    store.create_tournament("Pairs", 4)
    board = store.save_board_data(1, your_side="N-S")
    assert board.contract is None
    assert board.score is None
    assert board.your_side is Direction.NS


def test_save_board_without_current_tournament(store):
    with pytest.raises(NoTournamentSelectedException):
        store.save_board_data(1, contract=_contract())


def test_save_unknown_board(store):
    store.create_tournament("Pairs", 4)
    with pytest.raises(BoardNotFoundException):
        store.save_board_data(5, your_side="N-S")


def test_incomplete_contract_leaves_board_untouched(store):
    store.create_tournament("Pairs", 4)
    with pytest.raises(IncompleteContractException):
        store.save_board_data(1, contract=Contract(level=3, suit="NoTrump"))
    assert store.current_tournament.boards[0].contract is None


def test_invalid_side_rejects_whole_save(store):
    store.create_tournament("Pairs", 4)
    with pytest.raises(InvalidSideException):
        store.save_board_data(1, contract=_contract(), your_side="North")
    assert store.current_tournament.boards[0].score is None


def test_out_of_range_contract_rejected(store):
    store.create_tournament("Pairs", 4)
    with pytest.raises(InvalidContractException):
        store.save_board_data(1, contract=_contract(tricks=9))


def test_snapshots_do_not_leak_internal_state(store):
    store.create_tournament("Pairs", 4)
    snapshot = store.current_tournament
    snapshot.boards[0].score = 9999
    snapshot.name = "Edited"
    assert store.current_tournament.boards[0].score is None
    assert store.current_tournament.name == "Pairs"


def test_saved_contract_is_not_shared_with_caller(store):
    store.create_tournament("Pairs", 4)
    contract = _contract()
    store.save_board_data(1, contract=contract)
    contract.tricks = 13
    assert store.current_tournament.boards[0].contract.tricks == 10


def test_calculate_score_uses_contract_flag(store):
    assert store.calculate_score(_contract(vulnerable=True)) == 620


# ========== Last used side ==========


def test_last_used_side_default_and_update(store, storage):
    assert store.last_used_your_side is Direction.NS
    store.update_last_used_your_side("E-W")
    assert store.last_used_your_side is Direction.EW
    assert storage.get_item(STORAGE_KEY_LAST_USED_YOUR_SIDE) == "E-W"


def test_last_used_side_rejects_unknown_value(store):
    with pytest.raises(InvalidSideException):
        store.update_last_used_your_side("N")
    assert store.last_used_your_side is Direction.NS


# ========== Load / persistence ==========


def test_board_round_trips_through_storage(store, storage):
    tournament = store.create_tournament("Pairs", 8)
    saved = store.save_board_data(
        7,
        contract=_contract(level=3, suit="NoTrump", doubled=True, tricks=9),
        your_side="E-W",
    )
    store.update_last_used_your_side("E-W")

    reloaded = _reloaded(storage)
    assert reloaded.current_tournament.id == tournament.id
    assert reloaded.current_tournament.get_board(7) == saved
    assert reloaded.current_tournament.to_dict() == store.current_tournament.to_dict()
    assert reloaded.last_used_your_side is Direction.EW
    assert saved.score == 750


def test_round_trip_through_json_file(tmp_path):
    storage = JsonFileStorage(tmp_path / "scorecard.json")
    store = TournamentStore(storage)
    store.create_tournament("Pairs", 4)
    store.save_board_data(2, contract=_contract(result="Down", tricks=2, doubled=True))
    assert store.flush(timeout=5)
    store.close()

    reloaded = _reloaded(JsonFileStorage(tmp_path / "scorecard.json"))
    assert reloaded.current_tournament.get_board(2).score == -500


def test_load_restores_selected_tournament(store, storage):
    first = store.create_tournament("First", 2)
    store.create_tournament("Second", 2)
    store.select_tournament(first.id)
    assert _reloaded(storage).current_tournament.id == first.id


def test_load_with_unknown_current_id(storage):
    storage.set_item(STORAGE_KEY_TOURNAMENTS, "[]")
    storage.set_item(STORAGE_KEY_CURRENT_TOURNAMENT_ID, "12345")
    assert _reloaded(storage).current_tournament is None


def test_load_accepts_quoted_current_id(store, storage):
    tournament = store.create_tournament("Only", 2)
    storage.set_item(STORAGE_KEY_CURRENT_TOURNAMENT_ID, json.dumps(tournament.id))
    assert _reloaded(storage).current_tournament.id == tournament.id


def test_load_empty_storage():
    store = _reloaded(MemoryStorage())
    assert store.tournaments == []
    assert store.current_tournament is None
    assert store.last_used_your_side is Direction.NS


@pytest.mark.parametrize("blob", ["{not json", '{"id": "1"}', "null", '"text"'])
def test_load_unreadable_collection_starts_empty(blob):
    storage = MemoryStorage({STORAGE_KEY_TOURNAMENTS: blob})
    assert _reloaded(storage).tournaments == []


def test_load_skips_malformed_entries(store, storage):
    good = store.create_tournament("Good", 2)
    data = _stored_tournaments(storage)
    data.append({"name": "No id or date"})
    data.append({**good.to_dict()})
    data.append("not a tournament")
    storage.set_item(STORAGE_KEY_TOURNAMENTS, json.dumps(data))

    reloaded = _reloaded(storage)
    assert [t.id for t in reloaded.tournaments] == [good.id]


def test_load_ignores_unknown_side():
    storage = MemoryStorage({STORAGE_KEY_LAST_USED_YOUR_SIDE: "Both"})
    assert _reloaded(storage).last_used_your_side is Direction.NS


def test_load_survives_unreadable_storage():
    store = _reloaded(UnreadableStorage())
    assert store.tournaments == []
    assert store.current_tournament is None


def test_write_failures_do_not_fail_operations(caplog):
    store = TournamentStore(FailingStorage(), background=False)
    tournament = store.create_tournament("Pairs", 4)
    board = store.save_board_data(1, contract=_contract())
    store.update_last_used_your_side("E-W")
    assert board.score == 420
    assert store.current_tournament.id == tournament.id
    assert store.last_used_your_side is Direction.EW
    assert any(r.levelname == "ERROR" for r in caplog.records)


class _OfflineStorage(MemoryStorage):
    """Writes are dropped until the storage comes back online."""

    online = False

    def set_item(self, key, value):
        if self.online:
            super().set_item(key, value)


def test_save_writes_full_state():
    storage = _OfflineStorage()
    store = TournamentStore(storage, background=False)
    tournament = store.create_tournament("Pairs", 2)
    assert storage.get_item(STORAGE_KEY_TOURNAMENTS) is None

    storage.online = True
    store.save()
    assert _stored_tournaments(storage) == [tournament.to_dict()]
    assert storage.get_item(STORAGE_KEY_CURRENT_TOURNAMENT_ID) == tournament.id
    assert storage.get_item(STORAGE_KEY_LAST_USED_YOUR_SIDE) == "N-S"


def test_background_store_persists_after_flush():
    storage = MemoryStorage()
    store = TournamentStore(storage)
    tournament = store.create_tournament("Pairs", 2)
    assert store.flush(timeout=5)
    assert storage.get_item(STORAGE_KEY_CURRENT_TOURNAMENT_ID) == tournament.id
    store.close()


# ========== Signals ==========


def test_signals_report_changes(store):
    events = []
    store.tournaments_changed.connect(lambda: events.append("tournaments"))
    store.current_tournament_changed.connect(
        lambda t: events.append(("current", t.name if t else None))
    )
    store.board_saved.connect(lambda board_id: events.append(("board", board_id)))
    store.last_used_your_side_changed.connect(lambda side: events.append(("side", side)))

    tournament = store.create_tournament("Pairs", 4)
    store.save_board_data(2, your_side="E-W")
    store.update_last_used_your_side("E-W")
    store.delete_tournament(tournament.id)

    assert events == [
        "tournaments",
        ("current", "Pairs"),
        ("board", 2),
        "tournaments",
        ("current", "Pairs"),
        ("side", "E-W"),
        "tournaments",
        ("current", None),
    ]


def test_failed_operation_emits_nothing(store):
    events = []
    store.tournaments_changed.connect(lambda: events.append("tournaments"))
    with pytest.raises(InvalidTournamentNameException):
        store.create_tournament("", 4)
    assert store.select_tournament("missing") is False
    assert events == []


def test_state_snapshot(store):
    tournament = store.create_tournament("Pairs", 1)
    snapshot = state_snapshot(store)
    assert snapshot["currentTournament"] == tournament.to_dict()
    assert snapshot["tournaments"] == [tournament.to_dict()]
    assert snapshot["lastUsedYourSide"] == "N-S"
