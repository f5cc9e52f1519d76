"""
textsig - Sign and verify text with BLAKE3 keyed hashes or Ed25519.

This library puts two unrelated primitives behind one interface:

- BLAKE3 in keyed mode: a shared 32-byte secret signs and verifies.
- Ed25519: a private key signs, the matching public key verifies.

Callers pick the scheme with an algorithm tag and never touch the
primitives directly. Signatures are exchanged as URL-safe base64 text
without padding.

Quick Start:
    >>> from textsig import generate_key, save_keys, sign, verify
    >>>
    >>> # Key generation (store the files, keep .sk/.txt secret)
    >>> save_keys("ed25519", generate_key("ed25519"), "keys/")
    >>>
    >>> # Signing ("-" reads standard input)
    >>> sig = sign("message.txt", "keys/ed25519.sk", "ed25519")
    >>>
    >>> # Verification
    >>> is_valid = verify("message.txt", "keys/ed25519.pk", "ed25519", sig)

For more control, use the key types directly:
    >>> from textsig import Blake3
    >>>
    >>> signer = Blake3.load("keys/blake3.txt")
    >>> raw_sig = signer.sign(open("message.txt", "rb"))

See Also:
    - api.py: Main API functions
    - signers.py: Capability contracts and key types
    - crypto.py: BLAKE3 and Ed25519 primitives
    - encoding.py: Signature text encoding
    - passwords.py: Password generator used for BLAKE3 keys
    - exceptions.py: Custom exception types
"""

__version__ = "0.1.0"
__author__ = "textsig Contributors"

# Public API - main functions
from .api import (
    SignAlgorithm,
    generate_key,
    get_reader,
    key_file_names,
    save_keys,
    sign,
    verify,
    verify_input_file,
)

# Exceptions for error handling
from .exceptions import (
    TextSigError,
    InvalidKeyError,
    InvalidSignatureError,
    SignatureEncodingError,
    UnsupportedAlgorithmError,
)

# Key types and contracts (for advanced usage)
from .signers import (
    Blake3,
    Ed25519Signer,
    Ed25519Verifier,
    KeyGenerator,
    KeyLoader,
    TextSigner,
    TextVerifier,
)
from .passwords import PasswordPolicy, generate_password

__all__ = [
    # Version
    "__version__",
    # Main API
    "SignAlgorithm",
    "sign",
    "verify",
    "generate_key",
    "key_file_names",
    "save_keys",
    "get_reader",
    "verify_input_file",
    # Exceptions
    "TextSigError",
    "InvalidKeyError",
    "InvalidSignatureError",
    "SignatureEncodingError",
    "UnsupportedAlgorithmError",
    # Types
    "Blake3",
    "Ed25519Signer",
    "Ed25519Verifier",
    "TextSigner",
    "TextVerifier",
    "KeyLoader",
    "KeyGenerator",
    "PasswordPolicy",
    "generate_password",
]
