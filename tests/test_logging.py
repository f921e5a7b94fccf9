"""Tests for passlock.core.logging — secret redaction and handler setup."""

import json
import logging

import pytest

from passlock.core.logging import SecureLogFilter, StructuredLogFormatter, get_secure_logger
from passlock.core.vault import save


def _record(msg, args=()):
    return logging.LogRecord("passlock.test", logging.INFO, __file__, 1, msg, args, None)


@pytest.fixture
def isolated_logger():
    name = "passlock-test-isolated"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestSecureLogFilter:
    @pytest.mark.parametrize("message, secret", [
        ("password=hunter2", "hunter2"),
        ("secret: swordfish", "swordfish"),
        ("token=abc.def", "abc.def"),
        ("raw " + "ab" * 32, "ab" * 32),
    ])
    def test_redacts_message(self, message, secret):
        record = _record(message)
        assert SecureLogFilter().filter(record) is True
        assert secret not in record.getMessage()
        assert "[REDACTED]" in record.getMessage()

    def test_redacts_args(self):
        record = _record("value %s", ("password=hunter2",))
        SecureLogFilter().filter(record)
        assert "hunter2" not in record.getMessage()

    @pytest.mark.parametrize("message", [
        "Saved entry 'correcthorsebattery' (1 entries in vault)",
        "Created new vault key at /home/user/.local/share/PassLock/key.bin",
        "Created new vault key at /srv/vaults/averyveryverylongdirectorynamewithoutbreaks/key.bin",
    ])
    def test_labels_and_paths_survive(self, message):
        record = _record(message)
        SecureLogFilter().filter(record)
        assert record.getMessage() == message

    def test_plain_message_untouched(self):
        record = _record("Saved entry %r (%d entries in vault)", ("email", 3))
        SecureLogFilter().filter(record)
        assert record.getMessage() == "Saved entry 'email' (3 entries in vault)"


class TestStructuredLogFormatter:
    def test_json_line(self):
        line = StructuredLogFormatter().format(_record("hello"))
        data = json.loads(line)
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["logger"] == "passlock.test"


class TestGetSecureLogger:
    def test_file_handler_writes_redacted(self, tmp_path, isolated_logger):
        logger = get_secure_logger(
            isolated_logger, log_dir=tmp_path, enable_console=False, enable_file=True
        )
        logger.info("password=hunter2")
        for handler in logger.handlers:
            handler.flush()

        text = (tmp_path / f"{isolated_logger}.log").read_text(encoding="utf-8")
        assert "hunter2" not in text
        assert "[REDACTED]" in text

    def test_idempotent(self, isolated_logger):
        first = get_secure_logger(isolated_logger, enable_file=False)
        second = get_secure_logger(isolated_logger, enable_file=False)
        assert first is second
        assert len(first.handlers) == 1
        assert first.propagate is False


class TestVaultLogging:
    def test_save_never_logs_secret(self, vault_dir, caplog):
        with caplog.at_level(logging.DEBUG, logger="passlock"):
            save("email", "correcthorse", vault_dir)

        assert "correcthorse" not in caplog.text
        assert "Saved entry 'email'" in caplog.text
        assert "Created new vault key" in caplog.text
