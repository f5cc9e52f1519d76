"""
Signer, verifier and key types for the two supported schemes.

Each concrete type satisfies one or more of four small capability
contracts, expressed as typing.Protocol classes:

- TextSigner:   sign(reader) -> signature bytes
- TextVerifier: verify(reader, signature) -> bool
- KeyLoader:    load(path) -> instance built from the key file's bytes
- KeyGenerator: generate() -> list of fresh key buffers

Readers are binary file-like objects; they are read to the end and the
whole message is held in memory before any cryptographic work begins.
"""

import logging
import os
from typing import BinaryIO, Callable, List, Optional, Protocol, Union, runtime_checkable

from ecdsa import SigningKey, VerifyingKey

from .crypto import (
    BLAKE3_KEY_SIZE,
    Entropy,
    deserialize_private_key,
    deserialize_public_key,
    generate_private_key,
    get_public_key,
    keyed_hash,
    serialize_private_key,
    serialize_public_key,
    sign_message,
    verify_keyed_hash,
    verify_signature,
)
from .exceptions import InvalidKeyError
from .passwords import SYMMETRIC_KEY_POLICY, PasswordPolicy, generate_from_policy


logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@runtime_checkable
class TextSigner(Protocol):
    def sign(self, reader: BinaryIO) -> bytes:
        """Sign the data from the reader and return the signature."""
        ...


@runtime_checkable
class TextVerifier(Protocol):
    def verify(self, reader: BinaryIO, signature: bytes) -> bool:
        """Verify the data from the reader against the signature."""
        ...


@runtime_checkable
class KeyLoader(Protocol):
    @classmethod
    def load(cls, path: PathLike) -> "KeyLoader":
        ...


@runtime_checkable
class KeyGenerator(Protocol):
    @staticmethod
    def generate() -> List[bytes]:
        ...


def _read_key_file(path: PathLike) -> bytes:
    with open(path, "rb") as f:
        data = f.read()
    logger.debug("Read %d key bytes from %s", len(data), path)
    return data


class Blake3:
    """
    BLAKE3 keyed-hash signer and verifier.

    The same 32-byte secret both produces and checks signatures.

    Example:
        >>> signer = Blake3.load("blake3.txt")
        >>> sig = signer.sign(open("message.txt", "rb"))
        >>> signer.verify(open("message.txt", "rb"), sig)
        True
    """

    def __init__(self, key: bytes):
        if len(key) != BLAKE3_KEY_SIZE:
            raise InvalidKeyError(
                f"Invalid BLAKE3 key length: expected {BLAKE3_KEY_SIZE} bytes, got {len(key)}"
            )
        self._key = bytes(key)

    @classmethod
    def try_new(cls, key: bytes) -> "Blake3":
        """
        Build a signer from raw key bytes.

        Only the first 32 bytes are used; longer input is truncated so that
        key files with trailing data (such as a newline) still load.

        Raises:
            InvalidKeyError: If fewer than 32 bytes are given.
        """
        if len(key) < BLAKE3_KEY_SIZE:
            raise InvalidKeyError(
                f"Invalid BLAKE3 key length: expected at least {BLAKE3_KEY_SIZE} bytes, "
                f"got {len(key)}"
            )
        if len(key) > BLAKE3_KEY_SIZE:
            logger.debug(
                "Truncating BLAKE3 key from %d to %d bytes", len(key), BLAKE3_KEY_SIZE
            )
        return cls(key[:BLAKE3_KEY_SIZE])

    @classmethod
    def load(cls, path: PathLike) -> "Blake3":
        """Load a signer from a key file. See try_new()."""
        return cls.try_new(_read_key_file(path))

    @staticmethod
    def generate(
        password_generator: Optional[Callable[[PasswordPolicy], str]] = None,
    ) -> List[bytes]:
        """
        Generate a new key.

        The key is the ASCII encoding of a 32 character password using all
        four character classes.

        Args:
            password_generator: Produces a password for a policy. Defaults
                to the CSPRNG-backed generator.

        Returns:
            A single-element list holding the 32-byte key.
        """
        password = (password_generator or generate_from_policy)(SYMMETRIC_KEY_POLICY)
        return [password.encode("utf-8")]

    def sign(self, reader: BinaryIO) -> bytes:
        return keyed_hash(self._key, reader.read())

    def verify(self, reader: BinaryIO, signature: bytes) -> bool:
        return verify_keyed_hash(self._key, reader.read(), signature)


class Ed25519Signer:
    """Ed25519 signer holding a private key."""

    def __init__(self, key: SigningKey):
        self._key = key

    @classmethod
    def try_new(cls, key: bytes) -> "Ed25519Signer":
        """
        Build a signer from a 32-byte private key seed.

        Raises:
            InvalidKeyError: If the key is not exactly 32 bytes.
        """
        return cls(deserialize_private_key(key))

    @classmethod
    def load(cls, path: PathLike) -> "Ed25519Signer":
        return cls.try_new(_read_key_file(path))

    @staticmethod
    def generate(entropy: Optional[Entropy] = None) -> List[bytes]:
        """
        Generate a new keypair.

        Args:
            entropy: Random byte provider, os.urandom by default.

        Returns:
            [private_key, public_key], 32 bytes each, private key first.
        """
        private_key = generate_private_key(entropy)
        public_key = get_public_key(private_key)
        return [serialize_private_key(private_key), serialize_public_key(public_key)]

    def verifier(self) -> "Ed25519Verifier":
        """Return the verifier for this signer's public key."""
        return Ed25519Verifier(get_public_key(self._key))

    def sign(self, reader: BinaryIO) -> bytes:
        return sign_message(self._key, reader.read())


class Ed25519Verifier:
    """Ed25519 verifier holding a public key."""

    def __init__(self, key: VerifyingKey):
        self._key = key

    @classmethod
    def try_new(cls, key: bytes) -> "Ed25519Verifier":
        """
        Build a verifier from 32 public key bytes.

        Raises:
            InvalidKeyError: If the key is not 32 bytes or not a curve point.
        """
        return cls(deserialize_public_key(key))

    @classmethod
    def load(cls, path: PathLike) -> "Ed25519Verifier":
        return cls.try_new(_read_key_file(path))

    def verify(self, reader: BinaryIO, signature: bytes) -> bool:
        """
        Verify the data from the reader.

        Returns:
            True if the signature is valid for this public key, else False.

        Raises:
            InvalidSignatureError: If the signature is not 64 bytes.
        """
        return verify_signature(self._key, reader.read(), signature)
