import logging
import math
import numbers
import secrets
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger('password_generator')

UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SPECIAL = "!@#$%^&*()_+-=[]{}|;:,.<>?"

DEFAULT_LENGTH = 8


@dataclass(frozen=True)
class PasswordOptions:
    """Character classes to draw password characters from"""
    numbers: bool = True
    special: bool = True
    alphabets: bool = True


DEFAULT_OPTIONS = PasswordOptions()


def _resolve_options(options) -> PasswordOptions:
    """
    Normalize any options value into a PasswordOptions

    Accepts None, a PasswordOptions, a mapping with any of the keys
    numbers/special/alphabets, or an object exposing those attributes.
    Missing flags default to True; present flags are judged by truthiness.
    """
    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, PasswordOptions):
        return options
    if isinstance(options, Mapping):
        lookup = options.get
    else:
        lookup = lambda name, default: getattr(options, name, default)
    return PasswordOptions(
        numbers=bool(lookup('numbers', True)),
        special=bool(lookup('special', True)),
        alphabets=bool(lookup('alphabets', True)),
    )


def build_character_pool(options=None) -> str:
    """
    Build the pool of characters a password is drawn from

    Pools are concatenated in the order alphabets, numbers, special. When no
    class is enabled the alphabetic pool is used instead.
    """
    resolved = _resolve_options(options)

    pool = ""
    if resolved.alphabets:
        pool += UPPERCASE + LOWERCASE
    if resolved.numbers:
        pool += NUMBERS
    if resolved.special:
        pool += SPECIAL

    if not pool:
        logger.debug("No character class selected, falling back to alphabets")
        pool = UPPERCASE + LOWERCASE
    return pool


def generate_password(length=DEFAULT_LENGTH, options=None) -> str:
    """
    Generate a random password

    Each character is drawn independently from the character pool, so a
    short password may not contain every enabled class.

    Args:
        length: Number of characters. Fractional lengths round up, non-numbers
            (and NaN or infinity) fall back to 8 and non-positive values produce
            an empty string.
        options: PasswordOptions, mapping or object with numbers/special/alphabets flags

    Returns:
        str: The generated password
    """
    if isinstance(length, bool) or not isinstance(length, numbers.Real):
        length = DEFAULT_LENGTH
    if length <= 0:
        return ""
    if not math.isfinite(length):
        length = DEFAULT_LENGTH
    length = math.ceil(length)

    pool = build_character_pool(options)
    logger.debug(f"Generating password of length {length} from a pool of {len(pool)} characters")
    return ''.join(secrets.choice(pool) for _ in range(length))
