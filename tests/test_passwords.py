"""Tests for the password generator."""

import pytest

from textsig.passwords import (
    LOWER,
    NUMBER,
    SYMBOL,
    SYMMETRIC_KEY_POLICY,
    UPPER,
    PasswordPolicy,
    generate_from_policy,
    generate_password,
)


class TestGeneratePassword:
    """Test password generation."""

    def test_default_length(self):
        assert len(generate_password()) == 16

    def test_custom_length(self):
        assert len(generate_password(64)) == 64

    def test_contains_every_enabled_class(self):
        for _ in range(20):
            password = generate_password(8)
            for chars in (UPPER, LOWER, NUMBER, SYMBOL):
                assert any(c in chars for c in password)

    def test_only_enabled_classes(self):
        password = generate_password(32, uppercase=False, symbol=False)
        assert all(c in LOWER + NUMBER for c in password)

    def test_no_ambiguous_characters(self):
        password = generate_password(256)
        for c in "IOl0":
            assert c not in password

    def test_no_class_enabled_raises(self):
        with pytest.raises(ValueError):
            generate_password(16, False, False, False, False)

    def test_too_short_raises(self):
        with pytest.raises(ValueError):
            generate_password(3)

    def test_passwords_differ(self):
        assert generate_password(32) != generate_password(32)


class TestPolicy:
    """Test password policies."""

    def test_symmetric_key_policy(self):
        assert SYMMETRIC_KEY_POLICY == PasswordPolicy(
            length=32, uppercase=True, lowercase=True, number=True, symbol=True
        )

    def test_charsets_order(self):
        assert PasswordPolicy(lowercase=False).charsets() == [UPPER, NUMBER, SYMBOL]

    def test_generate_from_policy(self):
        password = generate_from_policy(SYMMETRIC_KEY_POLICY)
        assert len(password) == 32
        assert password.isascii()
