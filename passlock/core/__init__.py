"""
Core module - Contains configuration, logging, key management and the vault writer.
"""

from passlock.core.config import VaultConfig
from passlock.core.errors import (
    VaultError,
    VaultErrorKind,
    DirectoryResolutionError,
    InvalidKeyError,
    EncryptionError,
    CorruptStoreError,
    StorageIOError,
    ValidationError,
)
from passlock.core.keys import obtain_key
from passlock.core.logging import get_secure_logger, SecureLogFilter
from passlock.core.store import Entry, EntryStore
from passlock.core.vault import save

__all__ = [
    "VaultConfig",
    "VaultError",
    "VaultErrorKind",
    "DirectoryResolutionError",
    "InvalidKeyError",
    "EncryptionError",
    "CorruptStoreError",
    "StorageIOError",
    "ValidationError",
    "obtain_key",
    "get_secure_logger",
    "SecureLogFilter",
    "Entry",
    "EntryStore",
    "save",
]
