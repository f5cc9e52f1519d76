"""
Custom exceptions for the textsig library.

This module defines specific exceptions that can be raised while loading
keys, decoding signatures or selecting an algorithm. A signature that
simply does not match is never an exception: verify() returns False.

File-system failures (missing or unreadable key and input files) are not
wrapped; they surface as the built-in OSError subclasses.
"""


class TextSigError(Exception):
    """Base exception for all textsig errors."""

    pass


class InvalidKeyError(TextSigError):
    """
    Raised when key material cannot be used by the selected scheme.

    This occurs when a key file holds fewer bytes than the scheme needs,
    when an Ed25519 key is not exactly 32 bytes, or when Ed25519 public
    key bytes do not decode to a curve point.

    Attributes:
        message: Explanation of why the key was rejected.
    """

    def __init__(self, message: str = "Invalid key material"):
        self.message = message
        super().__init__(self.message)


class InvalidSignatureError(TextSigError):
    """
    Raised when the provided signature bytes are malformed.

    This is distinct from a verification failure - it indicates the
    signature has the wrong length for the scheme, not that it failed
    to verify.
    """

    def __init__(self, message: str = "Invalid or malformed signature"):
        self.message = message
        super().__init__(self.message)


class SignatureEncodingError(InvalidSignatureError):
    """
    Raised when signature text is not URL-safe base64 without padding.
    """

    def __init__(self, message: str = "Invalid signature encoding"):
        super().__init__(message)


class UnsupportedAlgorithmError(TextSigError, ValueError):
    """
    Raised when an algorithm tag is neither "blake3" nor "ed25519".
    """

    def __init__(self, message: str = "Invalid format"):
        self.message = message
        super().__init__(self.message)
