"""
Public API for signing and verifying text with BLAKE3 or Ed25519.

This module provides the main entry points for the textsig library:
- sign(): Sign an input with a key file, returning printable signature text
- verify(): Check printable signature text against an input and a key file
- generate_key(): Produce fresh key material for an algorithm
- save_keys(): Persist generated keys under their conventional file names

Inputs are named by a string: "-" means standard input, anything else is
a path to a readable file. The whole input is read into memory before it
is signed or verified.

Signatures travel as URL-safe base64 text without padding.

Example:
    >>> keys = generate_key("ed25519")
    >>> save_keys("ed25519", keys, "keys/")
    >>>
    >>> sig = sign("message.txt", "keys/ed25519.sk", "ed25519")
    >>> verify("message.txt", "keys/ed25519.pk", "ed25519", sig)
    True
"""

from contextlib import contextmanager
from enum import Enum
import logging
import os
from pathlib import Path
import sys
from typing import BinaryIO, Iterator, List, Union

from . import encoding
from .exceptions import UnsupportedAlgorithmError
from .signers import (
    Blake3,
    Ed25519Signer,
    Ed25519Verifier,
    PathLike,
    TextSigner,
    TextVerifier,
)


logger = logging.getLogger(__name__)

# Input name that selects standard input
STDIN_TOKEN = "-"


class SignAlgorithm(str, Enum):
    """Algorithm tag selecting the signing scheme."""

    BLAKE3 = "blake3"
    ED25519 = "ed25519"

    @classmethod
    def parse(cls, value: Union[str, "SignAlgorithm"]) -> "SignAlgorithm":
        """
        Parse an algorithm tag, ignoring case.

        Raises:
            UnsupportedAlgorithmError: If the tag names no known algorithm.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError as e:
            raise UnsupportedAlgorithmError(f"Invalid format: {value!r}") from e

    def __str__(self) -> str:
        return self.value


def verify_input_file(filename: str) -> str:
    """
    Check that an input name is usable.

    Returns:
        The name unchanged, if it is "-" or an existing path.

    Raises:
        FileNotFoundError: If the path does not exist.
    """
    if filename == STDIN_TOKEN or Path(filename).exists():
        return filename
    raise FileNotFoundError("File does not exist")


def get_reader(input: str) -> BinaryIO:
    """
    Open an input for binary reading.

    Args:
        input: "-" for standard input, otherwise a file path.

    Returns:
        A binary stream. The caller closes it when done.

    Raises:
        OSError: If the file cannot be opened.
    """
    if input == STDIN_TOKEN:
        return sys.stdin.buffer
    return open(input, "rb")


@contextmanager
def _open_input(input: str) -> Iterator[BinaryIO]:
    reader = get_reader(input)
    try:
        yield reader
    finally:
        if input != STDIN_TOKEN:
            reader.close()


def sign(input: str, key: PathLike, algorithm: Union[str, SignAlgorithm]) -> str:
    """
    Sign an input with a key file.

    Args:
        input: "-" for standard input, otherwise a file path.
        key: Path to the key file: the shared secret for BLAKE3, the private
            key for Ed25519.
        algorithm: "blake3" or "ed25519", case-insensitive, or a SignAlgorithm.

    Returns:
        The signature as URL-safe base64 text without padding.

    Raises:
        OSError: If the input or key file cannot be read.
        InvalidKeyError: If the key material does not fit the algorithm.
        UnsupportedAlgorithmError: If the algorithm tag is unknown.
    """
    algorithm = SignAlgorithm.parse(algorithm)
    logger.debug("Signing %s with %s key %s", input, algorithm, key)

    with _open_input(input) as reader:
        signer: TextSigner
        if algorithm is SignAlgorithm.BLAKE3:
            signer = Blake3.load(key)
        else:
            signer = Ed25519Signer.load(key)
        signature = signer.sign(reader)

    return encoding.encode(signature)


def verify(
    input: str,
    key: PathLike,
    algorithm: Union[str, SignAlgorithm],
    signature: str,
) -> bool:
    """
    Verify signature text against an input and a key file.

    Args:
        input: "-" for standard input, otherwise a file path.
        key: Path to the key file: the shared secret for BLAKE3, the public
            key for Ed25519.
        algorithm: "blake3" or "ed25519", case-insensitive, or a SignAlgorithm.
        signature: URL-safe base64 text without padding; surrounding
            whitespace is ignored.

    Returns:
        True if the signature matches, False otherwise.

    Raises:
        OSError: If the input or key file cannot be read.
        InvalidKeyError: If the key material does not fit the algorithm.
        SignatureEncodingError: If the signature text is not valid base64.
        InvalidSignatureError: If the decoded signature has the wrong length.
        UnsupportedAlgorithmError: If the algorithm tag is unknown.
    """
    algorithm = SignAlgorithm.parse(algorithm)
    logger.debug("Verifying %s with %s key %s", input, algorithm, key)

    with _open_input(input) as reader:
        sig = encoding.decode(signature)
        verifier: TextVerifier
        if algorithm is SignAlgorithm.BLAKE3:
            verifier = Blake3.load(key)
        else:
            verifier = Ed25519Verifier.load(key)
        verified = verifier.verify(reader, sig)

    logger.debug("Verification of %s %s", input, "succeeded" if verified else "failed")
    return verified


def generate_key(algorithm: Union[str, SignAlgorithm]) -> List[bytes]:
    """
    Generate fresh key material.

    Returns:
        [secret] for BLAKE3, [private_key, public_key] for Ed25519.
    """
    algorithm = SignAlgorithm.parse(algorithm)
    logger.debug("Generating %s key", algorithm)

    if algorithm is SignAlgorithm.BLAKE3:
        return Blake3.generate()
    return Ed25519Signer.generate()


def key_file_names(algorithm: Union[str, SignAlgorithm]) -> List[str]:
    """
    File names for the buffers returned by generate_key(), in the same order.
    """
    algorithm = SignAlgorithm.parse(algorithm)
    if algorithm is SignAlgorithm.BLAKE3:
        return [f"{algorithm}.txt"]
    return [f"{algorithm}.sk", f"{algorithm}.pk"]


def save_keys(
    algorithm: Union[str, SignAlgorithm],
    keys: List[bytes],
    output: PathLike,
) -> List[Path]:
    """
    Write generated keys into a directory.

    Args:
        algorithm: Algorithm the keys were generated for.
        keys: Output of generate_key() for that algorithm.
        output: Existing directory to write into.

    Returns:
        Paths of the written files, in key order.

    Raises:
        NotADirectoryError: If output is not an existing directory.
        ValueError: If the number of keys does not match the algorithm.
    """
    output = Path(output)
    if not output.is_dir():
        raise NotADirectoryError(f"Path does not exist or is not a directory: {output}")

    names = key_file_names(algorithm)
    if len(keys) != len(names):
        raise ValueError(
            f"Expected {len(names)} key buffers for {SignAlgorithm.parse(algorithm)}, "
            f"got {len(keys)}"
        )

    paths = []
    for name, data in zip(names, keys):
        path = output / name
        path.write_bytes(data)
        logger.debug("Wrote %d key bytes to %s", len(data), os.fspath(path))
        paths.append(path)

    return paths
