"""
vigenere_cipher
===============
Classical Vigenère polyalphabetic cipher over lowercase a-z.

Modules:
    alphabet    letter <-> 0-25 mapping constants
    validation  one-pass message / key checks
    cipher      encrypt / decrypt, VigenereCipher
    keys        key extension to a message's length
    errors      VigenereError (kind + side)

Educational only. Not a secure primitive, not constant-time.
"""

__version__ = "1.0.0"

from .errors     import ErrorKind, Side, VigenereError
from .validation import validate_lowercase, validate_alphabetic
from .keys       import extend_key
from .cipher     import (
    encrypt,
    decrypt,
    encrypt_with_keystream,
    decrypt_with_keystream,
    VigenereCipher,
)

__all__ = [
    "ErrorKind",
    "Side",
    "VigenereError",
    "validate_lowercase",
    "validate_alphabetic",
    "extend_key",
    "encrypt",
    "decrypt",
    "encrypt_with_keystream",
    "decrypt_with_keystream",
    "VigenereCipher",
]
