"""
Front-End Invocation Surface
============================

The only operation the user interface may call: ``save_password``.

Errors stay typed inside the core; this module is the one place they are
turned into human-readable strings. Success carries no payload.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional

from passlock.core.config import VaultConfig
from passlock.core.errors import VaultError, VaultErrorKind
from passlock.core.logging import get_secure_logger
from passlock.core.vault import save

_log = logging.getLogger("passlock.bridge")

_GENERIC_FAILURE = "failed to save password"


@dataclass(frozen=True, slots=True)
class SaveResult:
    """Outcome of a save as seen by the front-end."""

    ok: bool
    error: Optional[str] = None
    kind: Optional[VaultErrorKind] = None

    @classmethod
    def success(cls) -> SaveResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, message: str, kind: Optional[VaultErrorKind] = None) -> SaveResult:
        return cls(ok=False, error=message, kind=kind)

    def to_dict(self) -> dict[str, Any]:
        """JSON payload for the UI; error kinds are not exposed."""
        if self.ok:
            return {"ok": True}
        return {"ok": False, "error": self.error}


def configure_logging(config: VaultConfig) -> logging.Logger:
    """Attach handlers to the ``passlock`` logger from configuration."""
    settings = config.logging
    return get_secure_logger(
        "passlock",
        log_dir=config.paths.log_dir,
        level=settings.level,
        enable_console=settings.enable_console,
        enable_file=settings.enable_file,
        enable_json=settings.enable_json,
        max_file_size=settings.max_file_size_bytes,
        backup_count=settings.backup_count,
    )


def save_password(label: str, password: str, config: Optional[VaultConfig] = None) -> SaveResult:
    """
    Seal ``password`` under ``label`` in the configured vault.

    Args:
        label: Human-readable name for the credential
        password: The secret to store
        config: Configuration to use (defaults to the process instance)

    Returns:
        SaveResult; on failure ``error`` holds a display message
    """
    try:
        if config is None:
            config = VaultConfig.get_instance()
        save(label, password, config.paths.data_dir)
    except VaultError as e:
        _log.warning("Save failed [%s]: %s", e.kind.value, e)
        return SaveResult.failure(str(e), e.kind)
    except Exception:
        _log.exception("Unexpected error while saving")
        return SaveResult.failure(_GENERIC_FAILURE)

    return SaveResult.success()


async def save_password_async(
    label: str, password: str, config: Optional[VaultConfig] = None
) -> SaveResult:
    """Run ``save_password`` on a worker thread, off the event loop."""
    return await asyncio.to_thread(save_password, label, password, config)
