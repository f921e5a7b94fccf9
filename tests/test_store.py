"""Tests for passlock.core.store — the entry list file."""

import json
import os
import stat
import sys

import pytest

from passlock.core.errors import CorruptStoreError
from passlock.core.store import Entry, EntryStore


@pytest.fixture
def store(tmp_path):
    return EntryStore(tmp_path)


def _entry(label="email"):
    return Entry.seal(label, b"\x00" * 12, b"\x01" * 28)


class TestEntry:
    def test_seal_encodes_base64(self):
        entry = _entry()
        assert entry.nonce == "AAAAAAAAAAAAAAAA"
        assert entry.nonce_bytes() == b"\x00" * 12
        assert entry.ciphertext_bytes() == b"\x01" * 28

    def test_repr_hides_material(self):
        entry = _entry()
        assert repr(entry) == "Entry(label='email')"

    @pytest.mark.parametrize("data", [
        [],
        "entry",
        {"label": "x", "nonce": "AAAA"},
        {"label": "x", "nonce": "AAAA", "ciphertext": "AAAA", "extra": "y"},
        {"label": 1, "nonce": "AAAA", "ciphertext": "AAAA"},
        {"label": "x", "nonce": "not base64!", "ciphertext": "AAAA"},
        {"label": "\ud800", "nonce": "AAAA", "ciphertext": "AAAA"},
    ])
    def test_from_dict_rejects(self, data):
        with pytest.raises(CorruptStoreError):
            Entry.from_dict(data)


class TestLoad:
    def test_missing_file_is_empty(self, store):
        assert store.load() == []

    @pytest.mark.parametrize("content", ["", "  \n", "[]"])
    def test_blank_or_empty_array(self, store, content):
        store.path.write_text(content)
        assert store.load() == []

    def test_round_trip(self, store):
        entries = [_entry("a"), _entry("b")]
        store.write(entries)
        assert store.load() == entries

    @pytest.mark.parametrize("content", [
        "{",
        "{}",
        "null",
        "[1, 2]",
        '[{"label": "x"}]',
    ])
    def test_corrupt_content(self, store, content):
        store.path.write_text(content)
        with pytest.raises(CorruptStoreError):
            store.load()

    def test_invalid_utf8(self, store):
        store.path.write_bytes(b"\xff\xfe[")
        with pytest.raises(CorruptStoreError, match="UTF-8"):
            store.load()


class TestWrite:
    def test_overwrites_in_full(self, store):
        store.write([_entry("a"), _entry("b")])
        store.write([_entry("c")])
        data = json.loads(store.path.read_text())
        assert [e["label"] for e in data] == ["c"]

    def test_non_ascii_labels_kept_readable(self, store):
        store.write([_entry("courriel é")])
        assert "courriel é" in store.path.read_text(encoding="utf-8")

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_file_is_owner_only(self, store):
        store.write([_entry()])
        mode = stat.S_IMODE(os.stat(store.path).st_mode)
        assert mode == 0o600

    def test_failure_mid_write_removes_temp_file(self, store, monkeypatch):
        store.write([_entry("a")])
        before = store.path.read_text()

        def interrupted(fd):
            raise RuntimeError("interrupted")

        monkeypatch.setattr("passlock.core.store.os.fsync", interrupted)
        with pytest.raises(RuntimeError):
            store.write([_entry("a"), _entry("b")])

        assert store.path.read_text() == before
        assert [p.name for p in store.path.parent.iterdir()] == [store.path.name]
