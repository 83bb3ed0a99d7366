"""Tests for contact storage backends and the list view."""
from __future__ import annotations

import threading

from nibert_site.contacts import (
    ContactRecord,
    ContactSubmission,
    InMemoryContactStore,
    JsonlContactStore,
    build_store,
    list_contacts,
    submit_contact,
)


def _record(store, message="hi", **overrides):
    fields = {
        "id": store.next_id(),
        "name": "Jane",
        "email": "jane@example.com",
        "subject": "General Inquiry",
        "message": message,
        "timestamp": "2025-11-30T12:00:00.000Z",
    }
    fields.update(overrides)
    return ContactRecord(**fields)


class TestIdGeneration:
    def test_ids_strictly_increase(self, store):
        ids = [store.next_id() for _ in range(500)]

        assert ids == sorted(set(ids))

    def test_ids_unique_across_threads(self, store):
        ids = []
        lock = threading.Lock()

        def worker():
            local = [store.next_id() for _ in range(200)]
            with lock:
                ids.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(ids) == len(set(ids)) == 1600


class TestListView:
    def test_long_message_truncated_with_ellipsis(self, store):
        store.append(_record(store, message="x" * 150))

        summary = list_contacts(store)[0]

        assert summary["message"] == "x" * 100 + "..."

    def test_exactly_100_characters_not_truncated(self, store):
        store.append(_record(store, message="y" * 100))

        assert list_contacts(store)[0]["message"] == "y" * 100

    def test_listing_never_mutates_stored_message(self, store):
        record = _record(store, message="z" * 250)
        store.append(record)

        for _ in range(3):
            list_contacts(store)

        assert store.records()[0].message == "z" * 250

    def test_list_keeps_insertion_order_and_fields(self, store):
        first = _record(store, name="First")
        second = _record(store, name="Second")
        store.append(first)
        store.append(second)

        summaries = list_contacts(store)

        assert [s["name"] for s in summaries] == ["First", "Second"]
        assert set(summaries[0]) == {
            "id", "name", "email", "subject", "message", "timestamp", "status",
        }


class TestJsonlStore:
    def test_records_survive_reopen(self, tmp_path):
        path = tmp_path / "contacts" / "contacts.jsonl"
        store = JsonlContactStore(path)
        record = submit_contact(
            ContactSubmission(name="Jane", email="jane@example.com", message="hello"),
            store,
        )

        reopened = JsonlContactStore(path)

        assert reopened.records() == [record]
        assert reopened.next_id() > record.id

    def test_missing_file_is_empty(self, tmp_path):
        assert JsonlContactStore(tmp_path / "none.jsonl").records() == []

    def test_blank_subject_survives_reopen(self, tmp_path):
        path = tmp_path / "contacts.jsonl"
        record = submit_contact(
            ContactSubmission(
                name="Jane", email="jane@example.com", message="hello", subject="   "
            ),
            JsonlContactStore(path),
        )

        assert record.subject == ""
        assert JsonlContactStore(path).records() == [record]


def test_build_store_picks_backend(tmp_path):
    assert isinstance(build_store(None), InMemoryContactStore)
    assert isinstance(build_store(str(tmp_path / "c.jsonl")), JsonlContactStore)


def test_record_round_trips_through_dict():
    record = ContactRecord(
        id=1,
        name="Jane",
        email="jane@example.com",
        subject="Quote",
        message="hi",
        timestamp="2025-11-30T12:00:00.000Z",
    )

    assert ContactRecord.from_dict(record.to_dict()) == record
