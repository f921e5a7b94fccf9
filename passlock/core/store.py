"""
Entry Store
===========

The vault's durable state: an ordered list of sealed entries kept as a
pretty-printed JSON array in ``<data_dir>/passwords.json``.

File Format:
    [
      {
        "label": "email",
        "nonce": "<base64, 12 bytes>",
        "ciphertext": "<base64, ciphertext + 16-byte tag>"
      }
    ]

Entries are never edited, removed or reordered. Rewrites go through a
temporary file and ``os.replace`` so a crash leaves either the previous
store or the new one on disk.
"""

from __future__ import annotations

import base64
import binascii
import json
import os
import tempfile
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Final, List

from passlock.core.errors import CorruptStoreError, StorageIOError
from passlock.security.constants import PRIVATE_FILE_MODE, STORE_FILE_NAME

_ENTRY_FIELDS: Final[frozenset[str]] = frozenset({"label", "nonce", "ciphertext"})


@dataclass(frozen=True, slots=True)
class Entry:
    """
    One sealed credential.

    Attributes:
        label: Human-readable name, stored in plaintext
        nonce: Base64 of the 12-byte nonce
        ciphertext: Base64 of the AES-GCM output (ciphertext + tag)
    """

    label: str
    nonce: str
    ciphertext: str

    @classmethod
    def seal(cls, label: str, nonce: bytes, ciphertext: bytes) -> Entry:
        """Build an entry from raw nonce and ciphertext bytes."""
        return cls(
            label=label,
            nonce=base64.b64encode(nonce).decode("ascii"),
            ciphertext=base64.b64encode(ciphertext).decode("ascii"),
        )

    def nonce_bytes(self) -> bytes:
        return base64.b64decode(self.nonce, validate=True)

    def ciphertext_bytes(self) -> bytes:
        return base64.b64decode(self.ciphertext, validate=True)

    def to_dict(self) -> dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: object) -> Entry:
        """
        Build an entry from a decoded JSON object.

        Raises:
            CorruptStoreError: If the object is not a well-formed entry
        """
        if not isinstance(data, dict) or set(data) != _ENTRY_FIELDS:
            raise CorruptStoreError("store entry has unexpected shape")
        if not all(isinstance(data[name], str) for name in _ENTRY_FIELDS):
            raise CorruptStoreError("store entry fields must be strings")

        entry = cls(label=data["label"], nonce=data["nonce"], ciphertext=data["ciphertext"])
        try:
            entry.label.encode("utf-8")
        except UnicodeEncodeError as e:
            raise CorruptStoreError("store entry label is not valid Unicode text") from e
        try:
            entry.nonce_bytes()
            entry.ciphertext_bytes()
        except (binascii.Error, ValueError) as e:
            raise CorruptStoreError(f"store entry is not valid base64: {e}") from e
        return entry

    def __repr__(self) -> str:
        return f"Entry(label={self.label!r})"


class EntryStore:
    """
    Reads and rewrites the entry list file.

    Usage:
        store = EntryStore(data_dir)
        entries = store.load()
        store.write([*entries, entry])
    """

    __slots__ = ("_path",)

    def __init__(self, data_dir: Path) -> None:
        self._path = Path(data_dir) / STORE_FILE_NAME

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[Entry]:
        """
        Load all entries.

        A missing or blank file is an empty store.

        Raises:
            CorruptStoreError: If the file is present but not decodable
            StorageIOError: If the file cannot be read
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        except UnicodeDecodeError as e:
            raise CorruptStoreError(f"store file {self._path} is not valid UTF-8") from e
        except OSError as e:
            raise StorageIOError(f"cannot read store file {self._path}: {e}") from e

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptStoreError(f"store file {self._path} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise CorruptStoreError(f"store file {self._path} must hold a JSON array")

        return [Entry.from_dict(item) for item in data]

    def write(self, entries: List[Entry]) -> None:
        """
        Replace the store with ``entries``.

        Raises:
            StorageIOError: If the file cannot be written
        """
        payload = json.dumps([e.to_dict() for e in entries], indent=2, ensure_ascii=False)

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{STORE_FILE_NAME}.", suffix=".tmp", dir=self._path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.chmod(tmp_name, PRIVATE_FILE_MODE)
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as e:
            raise StorageIOError(f"cannot write store file {self._path}: {e}") from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)

    def __repr__(self) -> str:
        return f"EntryStore(path={str(self._path)!r})"
