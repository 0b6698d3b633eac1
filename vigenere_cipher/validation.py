"""
Input validation for messages, ciphertexts and keys.

validate_lowercase() walks the text once. A non-alphabetic character
anywhere wins over an out-of-range letter anywhere, so "A1" reports
NOT_ALPHABETIC even though the uppercase letter comes first.
"""

import logging

from .alphabet import ALPHABET_OFFSET, ALPHABET_LAST
from .errors import ErrorKind, Side, VigenereError

logger = logging.getLogger(__name__)


def _require_str(text, side: Side) -> None:
    if not isinstance(text, str):
        raise TypeError(f"{side.value} must be str, not {type(text).__name__}")


def validate_lowercase(text: str, side: Side) -> None:
    """
    Ensure every character of `text` is a letter in a-z.

    Raises VigenereError(NOT_ALPHABETIC) if any character is not a letter,
    otherwise VigenereError(NOT_LOWERCASE) if any letter falls outside
    the code point range 97..122 (uppercase, accented, non-Latin).
    """
    _require_str(text, side)
    out_of_range = False
    for ch in text:
        if not ch.isalpha():
            logger.debug(f"Rejected {side.value}: non-alphabetic character")
            raise VigenereError(ErrorKind.NOT_ALPHABETIC, side)
        if not out_of_range:
            code = ord(ch)
            out_of_range = code < ALPHABET_OFFSET or code > ALPHABET_LAST
    if out_of_range:
        logger.debug(f"Rejected {side.value}: letter outside a-z")
        raise VigenereError(ErrorKind.NOT_LOWERCASE, side)


def validate_alphabetic(text: str, side: Side) -> None:
    """Ensure every character of `text` is a letter. Case is not checked."""
    _require_str(text, side)
    if not all(ch.isalpha() for ch in text):
        logger.debug(f"Rejected {side.value}: non-alphabetic character")
        raise VigenereError(ErrorKind.NOT_ALPHABETIC, side)
