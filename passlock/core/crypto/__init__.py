"""
PassLock Cryptographic Core
===========================

AES-256-GCM sealing of individual secrets under the vault key.

Security Properties:
    - All encryption is authenticated (AEAD)
    - Fresh CSPRNG nonce for every encryption
    - Tag verified before any plaintext is returned
"""

from passlock.core.crypto.aes_gcm import AesGcmCipher, AesGcmResult

__all__ = [
    "AesGcmCipher",
    "AesGcmResult",
]
