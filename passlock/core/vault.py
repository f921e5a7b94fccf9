"""
Vault Writer
============

Seals one secret under the vault key and appends it to the entry store.

Save Flow:
1. Obtain (or lazily create) the vault key
2. Draw a fresh 96-bit nonce
3. AES-256-GCM encrypt the UTF-8 secret, no associated data
4. Load the existing entries (abort if the store is corrupt)
5. Append and rewrite the whole store

Any failure aborts the save before the store is touched; nothing is
retried here.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from passlock.core.crypto.aes_gcm import AesGcmCipher
from passlock.core.keys import obtain_key
from passlock.core.store import Entry, EntryStore
from passlock.utils.paths import ensure_private_dir
from passlock.utils.validators import encode_text

_log = logging.getLogger("passlock.vault")

# Serialises load-append-rewrite within this process. Separate processes
# writing the same vault are not coordinated.
_store_lock = threading.Lock()


def save(label: str, secret: str, data_dir: Path) -> Entry:
    """
    Encrypt ``secret`` and append it to the vault under ``label``.

    Args:
        label: Human-readable name, stored in plaintext
        secret: The value to seal
        data_dir: The vault's data directory

    Returns:
        The entry that was appended

    Raises:
        ValidationError: If label or secret is not a string with a UTF-8 encoding
        InvalidKeyError: If the key file is malformed
        EncryptionError: If the AEAD operation fails
        CorruptStoreError: If the existing store cannot be decoded
        StorageIOError: On any filesystem failure
    """
    encode_text(label, field_name="label")
    plaintext = encode_text(secret, field_name="secret")

    data_dir = Path(data_dir)
    key = obtain_key(data_dir)

    result = AesGcmCipher(key).encrypt(plaintext)
    entry = Entry.seal(label, result.nonce, result.ciphertext)

    ensure_private_dir(data_dir)
    store = EntryStore(data_dir)

    with _store_lock:
        entries = store.load()
        entries.append(entry)
        store.write(entries)

    _log.info("Saved entry %r (%d entries in vault)", label, len(entries))
    return entry
