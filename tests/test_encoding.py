"""Tests for signature text encoding."""

import pytest

from textsig.encoding import decode, encode
from textsig.exceptions import InvalidSignatureError, SignatureEncodingError


class TestEncode:
    """Test URL-safe, padding-free encoding."""

    def test_no_padding(self):
        assert encode(b"a") == "YQ"
        assert encode(b"ab") == "YWI"
        assert encode(b"abc") == "YWJj"

    def test_url_safe_alphabet(self):
        assert encode(b"\xfb\xff") == "-_8"

    def test_empty(self):
        assert encode(b"") == ""


class TestDecode:
    """Test decoding and its failure modes."""

    def test_decode_unpadded(self):
        assert decode("YQ") == b"a"
        assert decode("YWI") == b"ab"

    def test_decode_url_safe_alphabet(self):
        assert decode("-_8") == b"\xfb\xff"

    def test_decode_strips_whitespace(self):
        assert decode("  YWJj\n") == b"abc"

    def test_rejects_standard_alphabet(self):
        with pytest.raises(SignatureEncodingError):
            decode("+/8")

    def test_rejects_padding(self):
        with pytest.raises(SignatureEncodingError):
            decode("YQ==")

    def test_rejects_invalid_characters(self):
        with pytest.raises(SignatureEncodingError):
            decode("abc$")

    def test_rejects_impossible_length(self):
        with pytest.raises(SignatureEncodingError):
            decode("YWJjZ")

    def test_encoding_error_is_signature_error(self):
        with pytest.raises(InvalidSignatureError):
            decode("%%%")
