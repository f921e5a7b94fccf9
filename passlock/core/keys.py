"""
Vault Key Manager
=================

Owns the lifecycle of the single 256-bit vault key.

The key is created lazily on first use, written verbatim to
``<data_dir>/key.bin`` and read back on every later call. An existing key
file is never overwritten: regenerating it would make every stored entry
permanently undecryptable, so a malformed key file is reported and left
for the operator to resolve.
"""

from __future__ import annotations

import logging
import os
import secrets
import threading
from pathlib import Path

from passlock.core.errors import InvalidKeyError, StorageIOError
from passlock.security.constants import (
    KEY_FILE_NAME,
    KEY_LENGTH_BYTES,
    PRIVATE_FILE_MODE,
)
from passlock.utils.paths import ensure_private_dir

_log = logging.getLogger("passlock.keys")

# Serialises check-then-create within this process so no thread reads a
# key file another thread has created but not yet written.
_key_lock = threading.Lock()


def key_path(data_dir: Path) -> Path:
    """Return the fixed location of the key file inside ``data_dir``."""
    return Path(data_dir) / KEY_FILE_NAME


def _create_key(path: Path) -> bytes:
    key = secrets.token_bytes(KEY_LENGTH_BYTES)

    # O_EXCL: never clobber a key another caller wrote in the meantime
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL | getattr(os, "O_BINARY", 0),
                 PRIVATE_FILE_MODE)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(key)
            fh.flush()
            os.fsync(fh.fileno())
    except OSError:
        path.unlink(missing_ok=True)
        raise

    _log.info("Created new vault key at %s", path)
    return key


def _read_key(path: Path) -> bytes:
    data = path.read_bytes()
    if len(data) != KEY_LENGTH_BYTES:
        _log.error("Key file %s has invalid length %d", path, len(data))
        raise InvalidKeyError(
            f"invalid key length: expected {KEY_LENGTH_BYTES} bytes, found {len(data)}"
        )
    return data


def obtain_key(data_dir: Path) -> bytes:
    """
    Return the vault key, creating it on first use.

    Args:
        data_dir: The vault's data directory

    Returns:
        The 32-byte key

    Raises:
        InvalidKeyError: If the key file exists but is not exactly 32 bytes
        StorageIOError: If the directory or key file cannot be created or read
    """
    data_dir = Path(data_dir)
    path = key_path(data_dir)

    try:
        with _key_lock:
            if path.exists():
                return _read_key(path)

            ensure_private_dir(data_dir)
            try:
                return _create_key(path)
            except FileExistsError:
                # Another process created it first; its key wins
                return _read_key(path)
    except OSError as e:
        raise StorageIOError(f"cannot access key file {path}: {e}") from e
