"""
Random password generation.

Passwords are drawn from character sets that leave out easily confused
glyphs (I, O, l, 0). Symmetric BLAKE3 keys are derived from a 32 character
password using every class, so the generator doubles as the key source for
that scheme.
"""

from dataclasses import dataclass
import secrets


UPPER = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWER = "abcdefghijkmnopqrstuvwxyz"
NUMBER = "123456789"
SYMBOL = "!@#$%^&*_"

DEFAULT_PASSWORD_LENGTH = 16

_rng = secrets.SystemRandom()


@dataclass(frozen=True)
class PasswordPolicy:
    """
    Length and character classes for a generated password.

    Attributes:
        length: Total number of characters.
        uppercase: Include upper-case letters.
        lowercase: Include lower-case letters.
        number: Include digits.
        symbol: Include punctuation symbols.
    """

    length: int = DEFAULT_PASSWORD_LENGTH
    uppercase: bool = True
    lowercase: bool = True
    number: bool = True
    symbol: bool = True

    def charsets(self) -> list[str]:
        """Return the enabled character sets in a fixed order."""
        enabled = [
            (self.uppercase, UPPER),
            (self.lowercase, LOWER),
            (self.number, NUMBER),
            (self.symbol, SYMBOL),
        ]
        return [chars for flag, chars in enabled if flag]


# Policy used when deriving a BLAKE3 key from a password
SYMMETRIC_KEY_POLICY = PasswordPolicy(length=32)


def generate_password(
    length: int = DEFAULT_PASSWORD_LENGTH,
    uppercase: bool = True,
    lowercase: bool = True,
    number: bool = True,
    symbol: bool = True,
) -> str:
    """
    Generate a random password.

    One character from every enabled class is always present; the remaining
    characters are drawn from the union of the enabled classes, and the
    result is shuffled.

    Args:
        length: Number of characters to produce.
        uppercase: Include upper-case letters.
        lowercase: Include lower-case letters.
        number: Include digits.
        symbol: Include punctuation symbols.

    Returns:
        The generated password.

    Raises:
        ValueError: If no class is enabled or length is too short to hold
            one character from each enabled class.
    """
    return generate_from_policy(
        PasswordPolicy(
            length=length,
            uppercase=uppercase,
            lowercase=lowercase,
            number=number,
            symbol=symbol,
        )
    )


def generate_from_policy(policy: PasswordPolicy) -> str:
    """Generate a password for the given policy. See generate_password()."""
    charsets = policy.charsets()
    if not charsets:
        raise ValueError("At least one character class must be enabled")
    if policy.length < len(charsets):
        raise ValueError(
            f"Password length {policy.length} is too short for "
            f"{len(charsets)} character classes"
        )

    password = [_rng.choice(chars) for chars in charsets]
    alphabet = "".join(charsets)
    password.extend(_rng.choice(alphabet) for _ in range(policy.length - len(charsets)))
    _rng.shuffle(password)

    return "".join(password)
