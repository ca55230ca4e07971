"""Pytest fixtures for EJSON Core tests."""

import json

import pytest

from ejson_core.config import get_settings

from vectors import PLAINTEXT, PRIVATE_KEY, PUBLIC_KEY, TOKEN


@pytest.fixture
def keys():
    """Public -> private key mapping for the test keypair."""
    return {PUBLIC_KEY: PRIVATE_KEY}


@pytest.fixture
def test_document():
    """Document with top-level, nested and plain values."""
    return {
        "_public_key": PUBLIC_KEY,
        "test_secret": TOKEN,
        "plain": "not a secret",
        "port": 5432,
        "enabled": True,
        "nothing": None,
        "DATABASE": {
            "USERNAME": "app",
            "PASSWORD": TOKEN,
        },
    }


@pytest.fixture
def test_ejson(test_document):
    """test_document as JSON text."""
    return json.dumps(test_document)


@pytest.fixture(autouse=True)
def clear_settings(monkeypatch):
    """Keep cached settings and EJSON_* variables from leaking between tests."""
    for name in (
        "EJSON_FILE_PATH",
        "EJSON_FILE_DIR",
        "EJSON_FILE_PREFIX",
        "EJSON_FILE_SUFFIX",
        "EJSON_KEYS_DIR",
        "EJSON_PRIVATE_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
