"""Tests for custom exceptions."""

import pytest

from textsig.exceptions import (
    TextSigError,
    InvalidKeyError,
    InvalidSignatureError,
    SignatureEncodingError,
    UnsupportedAlgorithmError,
)


class TestExceptionHierarchy:
    """Test that all exceptions inherit from TextSigError."""

    def test_invalid_key_error_inheritance(self):
        assert issubclass(InvalidKeyError, TextSigError)
        assert issubclass(InvalidKeyError, Exception)

    def test_invalid_signature_error_inheritance(self):
        assert issubclass(InvalidSignatureError, TextSigError)

    def test_signature_encoding_error_inheritance(self):
        assert issubclass(SignatureEncodingError, InvalidSignatureError)

    def test_unsupported_algorithm_error_inheritance(self):
        assert issubclass(UnsupportedAlgorithmError, TextSigError)
        assert issubclass(UnsupportedAlgorithmError, ValueError)

    def test_io_errors_are_not_wrapped(self):
        assert not issubclass(FileNotFoundError, TextSigError)


class TestExceptionMessages:
    """Test exception default and custom messages."""

    def test_invalid_key_default_message(self):
        assert "key" in str(InvalidKeyError()).lower()

    def test_invalid_key_custom_message(self):
        msg = "Custom key message"
        exc = InvalidKeyError(msg)
        assert str(exc) == msg
        assert exc.message == msg

    def test_invalid_signature_default_message(self):
        exc = InvalidSignatureError()
        assert "invalid" in str(exc).lower() or "malformed" in str(exc).lower()

    def test_signature_encoding_default_message(self):
        exc = SignatureEncodingError()
        assert "encoding" in str(exc).lower()
        assert exc.message == str(exc)

    def test_unsupported_algorithm_default_message(self):
        assert str(UnsupportedAlgorithmError()) == "Invalid format"


class TestExceptionRaising:
    """Test that exceptions can be raised and caught properly."""

    def test_catch_base_exception(self):
        with pytest.raises(TextSigError):
            raise SignatureEncodingError("test")

    def test_exception_chaining(self):
        try:
            try:
                raise ValueError("original")
            except ValueError as e:
                raise InvalidKeyError("wrapper") from e
        except InvalidKeyError as e:
            assert isinstance(e.__cause__, ValueError)
