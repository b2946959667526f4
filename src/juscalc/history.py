"""
Calculation history: the persistence gateway for saved results.

The engine never touches history; callers save a result explicitly under a
title. Entries are immutable and are removed only by delete().

Two stores are provided: an in-memory one and a JSON file, the latter
standing in for the hosted legal_calculations table.
"""

import json
import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from .catalog import CalculationKind, resolve_kind
from .exceptions import HistoryEntryNotFoundError

logger = logging.getLogger(__name__)

# The dashboard shows the 20 most recent calculations
DEFAULT_LIST_LIMIT = 20


def _json_compatible(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy a record, turning dates into ISO strings."""
    return {
        key: value.isoformat() if isinstance(value, (date, datetime)) else value
        for key, value in record.items()
    }


@dataclass(frozen=True)
class HistoryEntry:
    """A saved calculation."""

    id: str
    owner_id: str
    title: str
    calculation_kind: CalculationKind
    input_record: Dict[str, Any]
    result_record: Dict[str, Any]
    created_at: datetime
    process_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["calculation_kind"] = self.calculation_kind.value
        data["created_at"] = self.created_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "HistoryEntry":
        return cls(
            id=data["id"],
            owner_id=data["owner_id"],
            title=data["title"],
            calculation_kind=resolve_kind(data["calculation_kind"]),
            input_record=dict(data.get("input_record") or {}),
            result_record=dict(data.get("result_record") or {}),
            created_at=datetime.fromisoformat(data["created_at"]),
            process_id=data.get("process_id"),
        )


class HistoryStore(ABC):
    """Persistence gateway for saved calculations."""

    def save(
        self,
        owner_id: str,
        title: str,
        kind: Any,
        input_record: Mapping[str, Any],
        result_record: Mapping[str, Any],
        process_id: Optional[str] = None,
    ) -> HistoryEntry:
        """
        Save a result under a title.

        Args:
            owner_id: Lawyer the entry belongs to
            title: Name given by the user
            kind: Calculation kind of the result
            input_record: Inputs the result was computed from
            result_record: Result record from compute()
            process_id: Optional legal process the calculation belongs to

        Returns:
            The stored HistoryEntry

        Raises:
            UnknownCalculationError: if kind is not in the catalog
        """
        entry = HistoryEntry(
            id=str(uuid.uuid4()),
            owner_id=owner_id,
            title=title,
            calculation_kind=resolve_kind(kind),
            input_record=_json_compatible(input_record),
            result_record=dict(result_record),
            created_at=datetime.now(timezone.utc),
            process_id=process_id,
        )
        self._append(entry)
        logger.info(
            "Saved %s calculation %r for %s (%s)",
            entry.calculation_kind.value, title, owner_id, entry.id,
        )
        return entry

    def list(self, owner_id: str, limit: int = DEFAULT_LIST_LIMIT) -> List[HistoryEntry]:
        """Entries of an owner, newest first."""
        owned = [e for e in reversed(self._entries()) if e.owner_id == owner_id]
        return owned[:limit]

    def get(self, entry_id: str) -> HistoryEntry:
        for entry in self._entries():
            if entry.id == entry_id:
                return entry
        raise HistoryEntryNotFoundError(entry_id)

    def delete(self, entry_id: str) -> None:
        """Remove an entry; raises HistoryEntryNotFoundError if absent."""
        entries = self._entries()
        remaining = [e for e in entries if e.id != entry_id]
        if len(remaining) == len(entries):
            raise HistoryEntryNotFoundError(entry_id)
        self._replace(remaining)
        logger.info("Deleted calculation %s", entry_id)

    @abstractmethod
    def _entries(self) -> List[HistoryEntry]:
        """All entries, oldest first."""

    @abstractmethod
    def _append(self, entry: HistoryEntry) -> None:
        pass

    @abstractmethod
    def _replace(self, entries: List[HistoryEntry]) -> None:
        pass


@dataclass
class InMemoryHistoryStore(HistoryStore):
    """History kept in a list; lost when the process exits."""

    entries: List[HistoryEntry] = field(default_factory=list)

    def _entries(self) -> List[HistoryEntry]:
        return self.entries

    def _append(self, entry: HistoryEntry) -> None:
        self.entries.append(entry)

    def _replace(self, entries: List[HistoryEntry]) -> None:
        self.entries = entries


class JsonFileHistoryStore(HistoryStore):
    """History persisted as a JSON array in a file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _entries(self) -> List[HistoryEntry]:
        if not self.path.exists():
            return []
        data = json.loads(self.path.read_text(encoding="utf-8") or "[]")
        return [HistoryEntry.from_dict(item) for item in data]

    def _append(self, entry: HistoryEntry) -> None:
        self._replace(self._entries() + [entry])

    def _replace(self, entries: List[HistoryEntry]) -> None:
        self.path.parent.mkdir(exist_ok=True, parents=True)
        payload = [e.to_dict() for e in entries]
        self.path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8"
        )
