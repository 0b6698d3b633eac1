"""
Key extension
=============
Materialize a key into exactly the length of a message: repeat it
whole as many times as fits, then append the leading characters of the
key needed to reach the target length.

    extend_key("flooop", "abc")   -> "abcabc"
    extend_key("floopolo", "abc") -> "abcabcab"

Only the alphabetic check is applied here. Uppercase keys pass through
unchanged, unlike encrypt()/decrypt() which also require a-z.
"""

import logging

from .errors import ErrorKind, Side, VigenereError
from .validation import validate_alphabetic

logger = logging.getLogger(__name__)


def extend_key(message: str, key: str, side: Side = Side.MESSAGE) -> str:
    """
    Return `key` repeated and truncated to len(message).

    `message` is only used for its length. `side` names it in errors
    (pass Side.CIPHERTEXT when extending against a ciphertext).

    Raises VigenereError with:
        NOT_ALPHABETIC  message or key contains a non-letter
        EMPTY_KEY       key is ""
        KEY_TOO_LONG    len(key) > len(message)
    """
    validate_alphabetic(message, side)
    validate_alphabetic(key, Side.KEY)
    if not key:
        raise VigenereError(ErrorKind.EMPTY_KEY, Side.KEY)
    if len(key) > len(message):
        raise VigenereError(ErrorKind.KEY_TOO_LONG, Side.KEY)

    whole, rest = divmod(len(message), len(key))
    extended = key * whole + key[:rest]
    logger.debug(f"Extended key: {len(key)} -> {len(extended)} chars")
    return extended
