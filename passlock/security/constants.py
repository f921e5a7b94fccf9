"""
Security Constants
==================

Defines security-related constants used throughout the application.
Changing the file names or sizes makes existing vaults unreadable.
"""

from typing import Final

# Vault files (inside the application data directory)
KEY_FILE_NAME: Final[str] = "key.bin"
STORE_FILE_NAME: Final[str] = "passwords.json"

# Encryption Settings
ENCRYPTION_ALGORITHM: Final[str] = "AES-256-GCM"
KEY_LENGTH_BYTES: Final[int] = 32  # 256 bits
NONCE_LENGTH_BYTES: Final[int] = 12  # 96 bits for GCM
TAG_LENGTH_BYTES: Final[int] = 16  # 128 bits

# File permissions on Unix-like systems
PRIVATE_FILE_MODE: Final[int] = 0o600
