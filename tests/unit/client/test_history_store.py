"""
Unit tests for LocalHistoryStore.
"""

import json

from notaire.client import HISTORY_KEY, LocalHistoryStore
from notaire.domain.entities import SignedMessageHistoryEntry


def _entry(message: str) -> SignedMessageHistoryEntry:
    return SignedMessageHistoryEntry(
        message=message, signature="0x01", address="0xA", verified=True
    )


def test_missing_file_is_empty(tmp_path):
    assert LocalHistoryStore(tmp_path / "history.json").load() == []


def test_add_persists_newest_first(tmp_path):
    path = tmp_path / "nested" / "history.json"
    store = LocalHistoryStore(path)

    store.add(_entry("first"))
    store.add(_entry("second"))

    reloaded = LocalHistoryStore(path).load()
    assert [e.message for e in reloaded] == ["second", "first"]


def test_file_layout_uses_fixed_key(tmp_path):
    path = tmp_path / "history.json"
    LocalHistoryStore(path).add(_entry("hello"))

    with open(path) as f:
        data = json.load(f)

    assert list(data) == [HISTORY_KEY]
    assert data[HISTORY_KEY][0]["message"] == "hello"
    assert data[HISTORY_KEY][0]["verified"] is True


def test_capped_at_fifty(tmp_path):
    store = LocalHistoryStore(tmp_path / "history.json")

    for i in range(55):
        store.add(_entry(str(i)))

    entries = store.load()
    assert len(entries) == 50
    assert entries[0].message == "54"
    assert entries[-1].message == "5"


def test_clear(tmp_path):
    store = LocalHistoryStore(tmp_path / "history.json")
    store.add(_entry("hello"))

    store.clear()

    assert store.load() == []


def test_corrupt_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "history.json"
    path.write_text("{not json")

    store = LocalHistoryStore(path)

    assert store.load() == []
    store.add(_entry("recovered"))
    assert [e.message for e in store.load()] == ["recovered"]
