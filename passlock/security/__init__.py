"""
Security module - Constants shared by the key manager, cipher and store.
"""

from passlock.security.constants import (
    KEY_FILE_NAME,
    STORE_FILE_NAME,
    KEY_LENGTH_BYTES,
    NONCE_LENGTH_BYTES,
    TAG_LENGTH_BYTES,
)

__all__ = [
    "KEY_FILE_NAME",
    "STORE_FILE_NAME",
    "KEY_LENGTH_BYTES",
    "NONCE_LENGTH_BYTES",
    "TAG_LENGTH_BYTES",
]
