"""
AES-256-GCM Authenticated Encryption
====================================

Implements AES-256-GCM under a caller-supplied vault key with a fresh
random nonce per operation.

Security Properties:
    - 256-bit key
    - 96-bit nonce (NIST recommended)
    - 128-bit authentication tag appended to the ciphertext
    - No associated data

NIST SP 800-38D Compliance:
    - GCM mode with 96-bit IV
    - Unique nonce for each encryption under same key

WARNING:
    - Never reuse (key, nonce) pairs
    - Always verify tag before using plaintext
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Optional

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from passlock.core.errors import EncryptionError
from passlock.security.constants import (
    KEY_LENGTH_BYTES,
    NONCE_LENGTH_BYTES,
    TAG_LENGTH_BYTES,
)


@dataclass(frozen=True, slots=True)
class AesGcmResult:
    """
    Immutable result of AES-GCM encryption.

    Attributes:
        ciphertext: Encrypted data with appended authentication tag
        nonce: Nonce used for this encryption (must be stored with ciphertext)
    """

    ciphertext: bytes
    nonce: bytes

    def __repr__(self) -> str:
        return f"AesGcmResult(ciphertext_len={len(self.ciphertext)}, nonce_len={len(self.nonce)})"


class AesGcmCipher:
    """
    AES-256-GCM bound to a single vault key.

    Usage:
        cipher = AesGcmCipher(key)
        result = cipher.encrypt(b"correcthorse")
        plaintext = cipher.decrypt(result.ciphertext, result.nonce)
    """

    __slots__ = ("_aesgcm",)

    def __init__(self, key: bytes) -> None:
        if len(key) != KEY_LENGTH_BYTES:
            raise ValueError(f"Key must be exactly {KEY_LENGTH_BYTES} bytes")
        self._aesgcm = AESGCM(key)

    def __repr__(self) -> str:
        return "AesGcmCipher(<key hidden>)"

    @staticmethod
    def generate_nonce() -> bytes:
        """
        Generate a cryptographically secure random nonce.

        96-bit random nonces have negligible collision probability for up
        to 2^32 encryptions under the same key.
        """
        return secrets.token_bytes(NONCE_LENGTH_BYTES)

    def encrypt(self, plaintext: bytes, aad: Optional[bytes] = None) -> AesGcmResult:
        """
        Encrypt plaintext under a freshly drawn nonce.

        Raises:
            EncryptionError: If the underlying AEAD operation fails
        """
        nonce = self.generate_nonce()
        try:
            ciphertext = self._aesgcm.encrypt(nonce, plaintext, aad)
        except (ValueError, OverflowError, TypeError) as e:
            raise EncryptionError(f"AES-GCM encryption failed: {e}") from e

        return AesGcmResult(ciphertext=ciphertext, nonce=nonce)

    def decrypt(self, ciphertext: bytes, nonce: bytes, aad: Optional[bytes] = None) -> bytes:
        """
        Decrypt and verify.

        Raises:
            ValueError: If the nonce or ciphertext has an impossible length
            cryptography.exceptions.InvalidTag: If authentication fails.
                Never catch this silently; it means tampering or the wrong key.
        """
        if len(nonce) != NONCE_LENGTH_BYTES:
            raise ValueError(f"Nonce must be exactly {NONCE_LENGTH_BYTES} bytes")
        if len(ciphertext) < TAG_LENGTH_BYTES:
            raise ValueError("Ciphertext too short (missing authentication tag)")

        return self._aesgcm.decrypt(nonce, ciphertext, aad)
