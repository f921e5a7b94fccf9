"""
Vault Errors
============

Every failure on the save path is raised as a subclass of VaultError.
Each class carries a VaultErrorKind so callers can branch on the kind
without string matching. Errors stay typed until the invocation surface
turns them into display strings.
"""

from __future__ import annotations

from enum import Enum


class VaultErrorKind(Enum):
    """Enumerated failure kinds of the vault."""
    DIRECTORY_RESOLUTION_FAILED = "DIRECTORY_RESOLUTION_FAILED"
    INVALID_KEY = "INVALID_KEY"
    ENCRYPTION_FAILED = "ENCRYPTION_FAILED"
    CORRUPT_STORE = "CORRUPT_STORE"
    IO_FAILURE = "IO_FAILURE"
    INVALID_INPUT = "INVALID_INPUT"


class VaultError(Exception):
    """Base class for all vault failures."""

    kind: VaultErrorKind

    def __str__(self) -> str:
        message = super().__str__()
        return message or self.kind.value.replace("_", " ").lower()


class DirectoryResolutionError(VaultError):
    """Raised when the application data directory cannot be located."""
    kind = VaultErrorKind.DIRECTORY_RESOLUTION_FAILED


class InvalidKeyError(VaultError):
    """
    Raised when the key file exists but does not hold exactly 32 bytes.

    The vault is unusable until the operator resolves this; the key is
    never regenerated automatically.
    """
    kind = VaultErrorKind.INVALID_KEY


class EncryptionError(VaultError):
    """Raised when the AEAD operation fails."""
    kind = VaultErrorKind.ENCRYPTION_FAILED


class CorruptStoreError(VaultError):
    """Raised when the entry store is present but cannot be decoded."""
    kind = VaultErrorKind.CORRUPT_STORE


class StorageIOError(VaultError):
    """Raised on any read, write or create failure of vault files."""
    kind = VaultErrorKind.IO_FAILURE


class ValidationError(VaultError, ValueError):
    """Raised when a label or secret is not acceptable input."""
    kind = VaultErrorKind.INVALID_INPUT
