import re
import logging

logger = logging.getLogger('validators')

# Characters trimmed from both ends of a candidate. Unlike str.strip(), the
# U+001C-U+001F separators and U+0085 are kept and U+FEFF is removed.
TRIM_CHARACTERS = (
    "\t\n\x0b\x0c\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Email grammar building blocks. Input is lowercased before matching, so only
# lowercase letters appear in the character classes.
LOCAL_PART_START = r"[a-z0-9]"
# The lookahead scans the rest of the address, rejecting ".." anywhere after
# the first character (local part and domain alike)
LOCAL_PART_MIDDLE = r"(?!.*\.\.)[a-z0-9._+-]*"
LOCAL_PART_END = r"[a-z0-9]"
LOCAL_PART_PLUS = r"(?:\+[a-z0-9._+-]+)?"
DOMAIN_START = r"[a-z0-9]"
DOMAIN_MIDDLE = r"(?!.*\.\.)[a-z0-9.-]*"
DOMAIN_END = r"[a-z0-9]"
TLD = r"[a-z]{2,}"

EMAIL_PATTERN = re.compile(
    f"{LOCAL_PART_START}{LOCAL_PART_MIDDLE}{LOCAL_PART_END}{LOCAL_PART_PLUS}"
    f"@{DOMAIN_START}{DOMAIN_MIDDLE}{DOMAIN_END}\\.{TLD}"
)


def is_valid_email(email) -> bool:
    """
    Check whether a value is a syntactically valid email address

    Accepted:
        user@example.com, user.name+tag@example.com, user-name_123@sub.example.com

    Rejected:
        user..name@example.com, .user@example.com, user*name@example.com,
        user@.com, @example.com, user@example.c

    Args:
        email: Candidate value of any type

    Returns:
        bool: True if the trimmed, lowercased string matches the email grammar.
        Non-strings and blank strings are never valid.
    """
    logger.debug(f"Validating email: {email!r}")
    if not isinstance(email, str):
        return False

    normalized = email.strip(TRIM_CHARACTERS).lower()
    if not normalized:
        return False

    return EMAIL_PATTERN.fullmatch(normalized) is not None
