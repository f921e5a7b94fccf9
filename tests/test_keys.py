"""Tests for passlock.core.keys — vault key lifecycle."""

import os
import stat
import sys
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from passlock.core.errors import InvalidKeyError, StorageIOError, VaultErrorKind
from passlock.core.keys import key_path, obtain_key
from passlock.security.constants import KEY_FILE_NAME


class TestFirstUse:
    def test_creates_directory_and_key(self, vault_dir):
        assert not vault_dir.exists()
        key = obtain_key(vault_dir)
        assert len(key) == 32
        assert vault_dir.is_dir()
        assert [p.name for p in vault_dir.iterdir()] == [KEY_FILE_NAME]

    def test_key_written_verbatim(self, vault_dir, read_key):
        key = obtain_key(vault_dir)
        assert read_key(vault_dir) == key

    def test_second_call_returns_same_key(self, vault_dir):
        first = obtain_key(vault_dir)
        second = obtain_key(vault_dir)
        assert first == second

    def test_existing_directory_is_reused(self, vault_dir):
        vault_dir.mkdir()
        (vault_dir / "other.txt").write_text("keep me")
        obtain_key(vault_dir)
        assert (vault_dir / "other.txt").read_text() == "keep me"

    def test_independent_vaults_get_different_keys(self, tmp_path):
        assert obtain_key(tmp_path / "a") != obtain_key(tmp_path / "b")

    def test_key_path(self, vault_dir):
        assert key_path(vault_dir) == vault_dir / "key.bin"

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_key_file_is_owner_only(self, vault_dir):
        obtain_key(vault_dir)
        mode = stat.S_IMODE(os.stat(key_path(vault_dir)).st_mode)
        assert mode & 0o077 == 0


class TestCorruption:
    @pytest.mark.parametrize("length", [0, 1, 16, 31, 33, 64])
    def test_wrong_length_is_invalid(self, vault_dir, length):
        vault_dir.mkdir()
        key_path(vault_dir).write_bytes(b"\x01" * length)

        for _ in range(2):
            with pytest.raises(InvalidKeyError) as exc:
                obtain_key(vault_dir)
            assert exc.value.kind is VaultErrorKind.INVALID_KEY

    def test_invalid_key_is_not_repaired(self, vault_dir):
        vault_dir.mkdir()
        key_path(vault_dir).write_bytes(b"short")
        with pytest.raises(InvalidKeyError):
            obtain_key(vault_dir)
        assert key_path(vault_dir).read_bytes() == b"short"

    def test_truncating_existing_key(self, vault_dir):
        key = obtain_key(vault_dir)
        key_path(vault_dir).write_bytes(key[:20])
        with pytest.raises(InvalidKeyError, match="expected 32 bytes, found 20"):
            obtain_key(vault_dir)


class TestIoFailure:
    def test_data_dir_is_a_file(self, tmp_path):
        blocker = tmp_path / "vault"
        blocker.write_text("not a directory")
        with pytest.raises(StorageIOError) as exc:
            obtain_key(blocker)
        assert exc.value.kind is VaultErrorKind.IO_FAILURE

    def test_unreadable_key_file(self, vault_dir, monkeypatch):
        obtain_key(vault_dir)

        def boom(self):
            raise PermissionError("denied")

        monkeypatch.setattr("pathlib.Path.read_bytes", boom)
        with pytest.raises(StorageIOError, match="denied"):
            obtain_key(vault_dir)


class TestConcurrentFirstUse:
    def test_threads_agree_on_one_key(self, vault_dir):
        start = threading.Barrier(16)

        def fetch(_):
            start.wait()
            return obtain_key(vault_dir)

        with ThreadPoolExecutor(max_workers=16) as pool:
            keys = list(pool.map(fetch, range(16)))

        assert len(set(keys)) == 1
        assert key_path(vault_dir).read_bytes() == keys[0]
