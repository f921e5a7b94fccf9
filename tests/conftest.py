"""Shared fixtures for the vault tests."""

import json

import pytest

from passlock.core.config import PathConfig, VaultConfig
from passlock.security.constants import KEY_FILE_NAME, STORE_FILE_NAME


@pytest.fixture(autouse=True)
def _reset_config_singleton():
    VaultConfig.reset_instance()
    yield
    VaultConfig.reset_instance()


@pytest.fixture
def vault_dir(tmp_path):
    """A data directory that does not exist yet."""
    return tmp_path / "vault"


@pytest.fixture
def config(tmp_path, vault_dir):
    return VaultConfig(paths=PathConfig(data_dir=vault_dir, log_dir=tmp_path / "logs"))


@pytest.fixture
def read_store():
    def _read(data_dir):
        return json.loads((data_dir / STORE_FILE_NAME).read_text(encoding="utf-8"))
    return _read


@pytest.fixture
def read_key():
    def _read(data_dir):
        return (data_dir / KEY_FILE_NAME).read_bytes()
    return _read
