"""Tests for the calculation history stores."""

import json
from datetime import date

import pytest

from juscalc.catalog import CalculationKind
from juscalc.engine import compute
from juscalc.exceptions import HistoryEntryNotFoundError, UnknownCalculationError
from juscalc.history import InMemoryHistoryStore, JsonFileHistoryStore


@pytest.fixture(params=["memory", "json"])
def store(request, tmp_path):
    if request.param == "memory":
        return InMemoryHistoryStore()
    return JsonFileHistoryStore(tmp_path / "history" / "calculations.json")


def _save(store, title, owner="adv-1", kind="overtime"):
    inputs = {"base_salary": 2200, "overtime_hours": 10}
    return store.save(owner, title, kind, inputs, compute(kind, inputs))


class TestHistoryStore:
    """Behavior shared by every store."""

    def test_save_returns_entry(self, store):
        """Saved entries carry the resolved kind and an id."""
        entry = _save(store, "Horas extras março")
        assert entry.id
        assert entry.title == "Horas extras março"
        assert entry.calculation_kind is CalculationKind.OVERTIME
        assert entry.result_record["total"] == pytest.approx(175)
        assert entry.created_at.tzinfo is not None

    def test_list_newest_first(self, store):
        """Listing is per owner, newest first."""
        first = _save(store, "first")
        second = _save(store, "second")
        _save(store, "other", owner="adv-2")
        assert [e.id for e in store.list("adv-1")] == [second.id, first.id]
        assert [e.title for e in store.list("adv-2")] == ["other"]
        assert store.list("nobody") == []

    def test_list_limit(self, store):
        """The listing is capped."""
        for i in range(5):
            _save(store, f"calc {i}")
        assert [e.title for e in store.list("adv-1", limit=2)] == ["calc 4", "calc 3"]

    def test_get(self, store):
        """Entries can be fetched by id."""
        entry = _save(store, "x")
        assert store.get(entry.id) == entry

    def test_delete(self, store):
        """Deleted entries disappear; others stay."""
        keep = _save(store, "keep")
        drop = _save(store, "drop")
        store.delete(drop.id)
        assert [e.id for e in store.list("adv-1")] == [keep.id]
        with pytest.raises(HistoryEntryNotFoundError):
            store.get(drop.id)

    def test_delete_missing(self, store):
        """Deleting an unknown id raises."""
        with pytest.raises(HistoryEntryNotFoundError) as exc:
            store.delete("missing")
        assert "missing" in str(exc.value)

    def test_unknown_kind(self, store):
        """Only catalog kinds can be saved."""
        with pytest.raises(UnknownCalculationError):
            store.save("adv-1", "x", "irpf", {}, {"total": 0})

    def test_dates_stored_as_iso(self, store):
        """Date inputs are stored JSON-compatible."""
        inputs = {"start_date": date(2000, 1, 1), "end_date": date(2020, 1, 1)}
        entry = store.save("adv-1", "tempo", "contribution_time", inputs,
                           compute("contribution_time", inputs))
        assert entry.input_record == {"start_date": "2000-01-01", "end_date": "2020-01-01"}

    def test_process_id(self, store):
        """Entries can be linked to a legal process."""
        entry = store.save("adv-1", "x", "hazard_premium", {}, {"total": 0}, process_id="p-9")
        assert store.get(entry.id).process_id == "p-9"


class TestJsonFileHistoryStore:
    """File persistence."""

    def test_survives_reopen(self, tmp_path):
        """A new store on the same file sees earlier entries."""
        path = tmp_path / "h.json"
        entry = _save(JsonFileHistoryStore(path), "persisted")
        reopened = JsonFileHistoryStore(path)
        assert reopened.list("adv-1") == [entry]

    def test_file_format(self, tmp_path):
        """The file is a JSON array of plain records."""
        path = tmp_path / "h.json"
        _save(JsonFileHistoryStore(path), "persisted")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data[0]["calculation_kind"] == "overtime"
        assert data[0]["title"] == "persisted"
        assert data[0]["owner_id"] == "adv-1"

    def test_missing_file_is_empty(self, tmp_path):
        """No file means no history."""
        assert JsonFileHistoryStore(tmp_path / "none.json").list("adv-1") == []

    def test_legacy_kind_ids_load(self, tmp_path):
        """Records saved with the legacy dashboard ids load."""
        path = tmp_path / "h.json"
        path.write_text(json.dumps([{
            "id": "abc",
            "owner_id": "adv-1",
            "title": "antigo",
            "calculation_kind": "verbas_rescisorias",
            "input_record": {"salario": "3000"},
            "result_record": {"total": 12952},
            "created_at": "2024-05-01T12:00:00+00:00",
        }]))
        entry = JsonFileHistoryStore(path).get("abc")
        assert entry.calculation_kind is CalculationKind.SEVERANCE_PAY
        assert entry.process_id is None
