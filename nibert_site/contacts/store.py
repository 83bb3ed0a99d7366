"""Append-only storage for accepted contact submissions."""
from __future__ import annotations

import json
import threading
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

DEFAULT_SUBJECT = "General Inquiry"
INITIAL_STATUS = "new"
SUMMARY_MESSAGE_LIMIT = 100


@dataclass(frozen=True, slots=True)
class ContactRecord:
    """A validated, normalized contact submission."""

    id: int
    name: str
    email: str
    subject: str
    message: str
    timestamp: str
    status: str = INITIAL_STATUS

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ContactRecord:
        return cls(
            id=int(data["id"]),
            name=data.get("name", ""),
            email=data.get("email", ""),
            subject=data.get("subject", DEFAULT_SUBJECT),
            message=data.get("message", ""),
            timestamp=data.get("timestamp", ""),
            status=data.get("status", INITIAL_STATUS),
        )

    def summary(self) -> Dict[str, Any]:
        """List-view representation with the message cut to 100 characters."""
        data = self.to_dict()
        if len(self.message) > SUMMARY_MESSAGE_LIMIT:
            data["message"] = self.message[:SUMMARY_MESSAGE_LIMIT] + "..."
        return data


class ContactStore(ABC):
    """Interface shared by the in-memory and file-backed stores.

    Ids are epoch milliseconds, bumped past the last issued id when two
    submissions land in the same millisecond.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last_id = 0

    def next_id(self) -> int:
        with self._lock:
            candidate = time.time_ns() // 1_000_000
            if candidate <= self._last_id:
                candidate = self._last_id + 1
            self._last_id = candidate
            return candidate

    @abstractmethod
    def append(self, record: ContactRecord) -> None:
        ...

    @abstractmethod
    def records(self) -> List[ContactRecord]:
        ...

    def get(self, contact_id: int) -> Optional[ContactRecord]:
        for record in self.records():
            if record.id == contact_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self.records())


class InMemoryContactStore(ContactStore):
    """Process-lifetime store; contents vanish on restart."""

    def __init__(self) -> None:
        super().__init__()
        self._records: List[ContactRecord] = []

    def append(self, record: ContactRecord) -> None:
        with self._lock:
            self._records.append(record)

    def records(self) -> List[ContactRecord]:
        with self._lock:
            return list(self._records)


class JsonlContactStore(ContactStore):
    """Durable store writing one JSON object per line."""

    def __init__(self, path: Path | str) -> None:
        super().__init__()
        self.path = Path(path)
        for record in self._read():
            self._last_id = max(self._last_id, record.id)

    def append(self, record: ContactRecord) -> None:
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as handle:
                handle.write(json.dumps(record.to_dict()) + "\n")

    def records(self) -> List[ContactRecord]:
        with self._lock:
            return self._read()

    def _read(self) -> List[ContactRecord]:
        if not self.path.exists():
            return []
        records: List[ContactRecord] = []
        with self.path.open("r", encoding="utf-8") as handle:
            for line in handle:
                line = line.strip()
                if line:
                    records.append(ContactRecord.from_dict(json.loads(line)))
        return records


def list_contacts(store: ContactStore) -> List[Dict[str, Any]]:
    """Return every stored contact in list-view form, oldest first."""
    return [record.summary() for record in store.records()]


def build_store(contacts_file: Optional[str] = None) -> ContactStore:
    """Pick the JSONL store when a file is configured, else keep contacts in memory."""
    if contacts_file:
        return JsonlContactStore(contacts_file)
    return InMemoryContactStore()
