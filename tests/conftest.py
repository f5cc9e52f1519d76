"""Pytest configuration and shared fixtures."""

import io
from pathlib import Path
import sys

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Directory holding the key fixture files."""
    return FIXTURES


@pytest.fixture
def blake3_key_path():
    """BLAKE3 key file: 32 key bytes followed by a newline."""
    return FIXTURES / "blake3.txt"


@pytest.fixture
def ed25519_sk_path():
    """Ed25519 private key from RFC 8032 test vector 1."""
    return FIXTURES / "ed25519.sk"


@pytest.fixture
def ed25519_pk_path():
    """Ed25519 public key from RFC 8032 test vector 1."""
    return FIXTURES / "ed25519.pk"


@pytest.fixture
def message_file(tmp_path):
    """A file containing b"hello world"."""
    path = tmp_path / "message.txt"
    path.write_bytes(b"hello world")
    return path


@pytest.fixture
def stdin_bytes(monkeypatch):
    """Replace standard input with an in-memory binary stream."""

    def _set(data: bytes):
        stream = io.TextIOWrapper(io.BytesIO(data))
        monkeypatch.setattr(sys, "stdin", stream)
        return stream

    return _set
