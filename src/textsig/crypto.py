"""
BLAKE3 and Ed25519 primitives for text signing.

This module provides the cryptographic building blocks behind the two
signing schemes:

- BLAKE3 in keyed mode, a MAC whose 32-byte digest is the signature.
- Ed25519 via the python-ecdsa library, producing 64-byte signatures
  over the raw message (the scheme hashes internally with SHA-512).

Keys and signatures are exchanged as raw bytes in their canonical
encodings: 32-byte BLAKE3 keys, 32-byte Ed25519 seeds and public keys,
64-byte Ed25519 signatures.

Security Note:
    Ed25519 signing is deterministic: the same key and message always
    give the same signature. Randomness is only consumed at key generation.
"""

import hmac
import os
from typing import Callable, Optional, Tuple

import blake3
from ecdsa import BadSignatureError, Ed25519, SigningKey, VerifyingKey
from ecdsa.errors import MalformedPointError

from .exceptions import InvalidKeyError, InvalidSignatureError


# Curve for asymmetric operations
DEFAULT_CURVE = Ed25519

BLAKE3_KEY_SIZE = 32
BLAKE3_SIGNATURE_SIZE = 32
ED25519_KEY_SIZE = 32
ED25519_SIGNATURE_SIZE = 64

# Source of secure random bytes: called with a byte count, returns that many bytes
Entropy = Callable[[int], bytes]


def keyed_hash(key: bytes, message: bytes) -> bytes:
    """
    Compute the BLAKE3 keyed hash of a message.

    Args:
        key: Exactly 32 bytes of key material.
        message: Message bytes.

    Returns:
        32-byte digest.

    Raises:
        InvalidKeyError: If the key is not 32 bytes.
    """
    if len(key) != BLAKE3_KEY_SIZE:
        raise InvalidKeyError(
            f"Invalid BLAKE3 key length: expected {BLAKE3_KEY_SIZE} bytes, got {len(key)}"
        )
    return blake3.blake3(message, key=key).digest()


def verify_keyed_hash(key: bytes, message: bytes, signature: bytes) -> bool:
    """
    Check a BLAKE3 keyed hash against a message.

    The comparison is constant-time.

    Returns:
        True if the signature matches, False otherwise.

    Raises:
        InvalidSignatureError: If the signature is not 32 bytes.
    """
    if len(signature) != BLAKE3_SIGNATURE_SIZE:
        raise InvalidSignatureError(
            f"Invalid signature length: expected {BLAKE3_SIGNATURE_SIZE} bytes, "
            f"got {len(signature)}"
        )
    return hmac.compare_digest(keyed_hash(key, message), signature)


def generate_private_key(
    entropy: Optional[Entropy] = None, curve=DEFAULT_CURVE
) -> SigningKey:
    """
    Generate a fresh Ed25519 private key.

    Args:
        entropy: Random byte provider. Defaults to os.urandom; tests may
            pass a deterministic provider.
        curve: Edwards curve to use (default: Ed25519).

    Returns:
        ECDSA-library SigningKey on the Edwards curve.
    """
    return SigningKey.generate(curve=curve, entropy=entropy or os.urandom)


def get_public_key(private_key: SigningKey) -> VerifyingKey:
    """Get the public key corresponding to a private key."""
    return private_key.get_verifying_key()


def serialize_private_key(private_key: SigningKey) -> bytes:
    """Serialize a private key to its 32-byte seed."""
    return private_key.to_string()


def serialize_public_key(public_key: VerifyingKey) -> bytes:
    """Serialize a public key to its 32-byte compressed point encoding."""
    return public_key.to_string()


def deserialize_private_key(data: bytes, curve=DEFAULT_CURVE) -> SigningKey:
    """
    Deserialize an Ed25519 private key from its seed.

    Raises:
        InvalidKeyError: If the data is not exactly 32 bytes.
    """
    if len(data) != ED25519_KEY_SIZE:
        raise InvalidKeyError(
            f"Invalid private key length: expected {ED25519_KEY_SIZE} bytes, got {len(data)}"
        )
    return SigningKey.from_string(data, curve=curve)


def deserialize_public_key(data: bytes, curve=DEFAULT_CURVE) -> VerifyingKey:
    """
    Deserialize an Ed25519 public key.

    Args:
        data: Public key bytes.
        curve: Edwards curve (default: Ed25519).

    Returns:
        ECDSA-library VerifyingKey.

    Raises:
        InvalidKeyError: If the data is not 32 bytes or is not a valid point.
    """
    if len(data) != ED25519_KEY_SIZE:
        raise InvalidKeyError(
            f"Invalid public key length: expected {ED25519_KEY_SIZE} bytes, got {len(data)}"
        )
    try:
        return VerifyingKey.from_string(data, curve=curve)
    except (MalformedPointError, ValueError) as e:
        raise InvalidKeyError(f"Failed to deserialize public key: {e}") from e


def sign_message(private_key: SigningKey, message: bytes) -> bytes:
    """
    Sign a message with an Ed25519 private key.

    Returns:
        64-byte raw signature (R || S).
    """
    return private_key.sign(message)


def verify_signature(public_key: VerifyingKey, message: bytes, signature: bytes) -> bool:
    """
    Verify an Ed25519 signature.

    Args:
        public_key: ECDSA-library VerifyingKey.
        message: Original message bytes.
        signature: Signature bytes to verify.

    Returns:
        True if the signature is valid, False otherwise.

    Raises:
        InvalidSignatureError: If the signature is not 64 bytes.
    """
    if len(signature) != ED25519_SIGNATURE_SIZE:
        raise InvalidSignatureError(
            f"Invalid signature length: expected {ED25519_SIGNATURE_SIZE} bytes, "
            f"got {len(signature)}"
        )
    try:
        return public_key.verify(signature, message)
    except BadSignatureError:
        return False


def generate_keypair(
    entropy: Optional[Entropy] = None, curve=DEFAULT_CURVE
) -> Tuple[bytes, bytes]:
    """
    Generate a serialized Ed25519 keypair.

    Convenience function that generates a private key and derives the
    public key from it.

    Returns:
        Tuple of (private_key_bytes, public_key_bytes), 32 bytes each.
    """
    private_key = generate_private_key(entropy, curve)
    public_key = get_public_key(private_key)
    return serialize_private_key(private_key), serialize_public_key(public_key)
