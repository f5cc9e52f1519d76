"""
URL-safe base64 without padding, used for the printable form of signatures.

The alphabet is A-Z, a-z, 0-9, "-" and "_"; no "=" is emitted or accepted,
so signatures can be placed in URLs and command lines without escaping.
"""

import base64
import binascii
import re

from .exceptions import SignatureEncodingError


_URL_SAFE_NO_PAD = re.compile(r"[A-Za-z0-9_-]*")


def encode(data: bytes) -> str:
    """Encode bytes as URL-safe base64 with the padding stripped."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode(text: str) -> bytes:
    """
    Decode URL-safe, padding-free base64 text.

    Surrounding whitespace is ignored.

    Args:
        text: Encoded signature text.

    Returns:
        Decoded bytes.

    Raises:
        SignatureEncodingError: If the text contains characters outside the
            URL-safe alphabet, contains padding, or has an impossible length.
    """
    text = text.strip()
    if not _URL_SAFE_NO_PAD.fullmatch(text):
        raise SignatureEncodingError(
            "Invalid signature encoding: expected URL-safe base64 without padding"
        )
    # A single trailing symbol carries only 6 bits and cannot end a byte
    if len(text) % 4 == 1:
        raise SignatureEncodingError(
            f"Invalid signature encoding: invalid length {len(text)}"
        )

    padded = text + "=" * (-len(text) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except (binascii.Error, ValueError) as e:
        raise SignatureEncodingError(f"Invalid signature encoding: {e}") from e
