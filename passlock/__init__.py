"""
PassLock - Local Credential Vault
=================================

Seals individual secrets with AES-256-GCM under a single locally stored
key and appends them to an on-disk entry store.

Security Notice:
- Secrets, keys and ciphertexts are never logged
- Fail-closed: any error aborts the save
- All paths are OS-aware
"""

from passlock.core.config import VaultConfig
from passlock.core.logging import get_secure_logger

__version__ = "0.1.0"

__all__ = ["VaultConfig", "get_secure_logger", "__version__"]
