"""
Vigenère Polyalphabetic Cipher
==============================
Classical keyed substitution over the lowercase alphabet a-z.

Each plaintext letter is shifted by the key letter at the same position,
the key repeating cyclically:

    c[i] = (p[i] + k[i mod len(k)]) mod 26
    p[i] = (c[i] - k[i mod len(k)]) mod 26

Historical note: Blaise de Vigenère, 1553. Not a secure primitive;
this module is an educational baseline.

WARNING: not constant-time. The key index is computed with a modulo
whose cost depends on the position, and validation stops at the first
bad character. Do not use where timing is observable.

Input rules:
  - text and key: letters a-z only (VigenereError otherwise)
  - key: at least one character
  - text is validated before key
"""

import logging

from .alphabet import ALPHABET_SIZE, shift, unshift
from .errors import ErrorKind, Side, VigenereError
from .keys import extend_key
from .validation import validate_lowercase

logger = logging.getLogger(__name__)


def _check(text: str, key: str, side: Side) -> None:
    validate_lowercase(text, side)
    validate_lowercase(key, Side.KEY)
    if not key:
        raise VigenereError(ErrorKind.EMPTY_KEY, Side.KEY)


def _add(p: int, k: int) -> int:
    return (p + k) % ALPHABET_SIZE


def _sub(c: int, k: int) -> int:
    # stay non-negative
    if c >= k:
        return c - k
    return ALPHABET_SIZE - (k - c)


def encrypt(message: str, key: str) -> str:
    """Encrypt lowercase `message` with lowercase `key`."""
    _check(message, key, Side.MESSAGE)
    key_len = len(key)
    out = []
    for i, ch in enumerate(message):
        k_idx = i % key_len
        out.append(unshift(_add(shift(ch), shift(key[k_idx]))))
    logger.debug(f"Encrypt: msg={len(message)} key={key_len}")
    return "".join(out)


def decrypt(ciphertext: str, key: str) -> str:
    """Decrypt lowercase `ciphertext` with lowercase `key`."""
    _check(ciphertext, key, Side.CIPHERTEXT)
    key_len = len(key)
    out = []
    for i, ch in enumerate(ciphertext):
        k_idx = i % key_len
        out.append(unshift(_sub(shift(ch), shift(key[k_idx]))))
    logger.debug(f"Decrypt: ct={len(ciphertext)} key={key_len}")
    return "".join(out)


def encrypt_with_keystream(message: str, key: str) -> str:
    """
    Encrypt using a key first extended to the message length.

    Produces the same ciphertext as encrypt(), but the key may not be
    longer than the message (KEY_TOO_LONG).
    """
    _check(message, key, Side.MESSAGE)
    stream = extend_key(message, key, Side.MESSAGE)
    return "".join(unshift(_add(shift(p), shift(k)))
                   for p, k in zip(message, stream))


def decrypt_with_keystream(ciphertext: str, key: str) -> str:
    """Inverse of encrypt_with_keystream()."""
    _check(ciphertext, key, Side.CIPHERTEXT)
    stream = extend_key(ciphertext, key, Side.CIPHERTEXT)
    return "".join(unshift(_sub(shift(c), shift(k)))
                   for c, k in zip(ciphertext, stream))


class VigenereCipher:
    """
    Vigenère cipher bound to one key.

    The key is validated once here; encrypt()/decrypt() still validate
    their text argument on every call.
    """

    def __init__(self, key: str):
        validate_lowercase(key, Side.KEY)
        if not key:
            raise VigenereError(ErrorKind.EMPTY_KEY, Side.KEY)
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def encrypt(self, plaintext: str) -> str:
        return encrypt(plaintext, self._key)

    def decrypt(self, ciphertext: str) -> str:
        return decrypt(ciphertext, self._key)

    def keystream(self, message: str) -> str:
        """The key extended to len(message). See keys.extend_key()."""
        return extend_key(message, self._key)

    def __repr__(self):
        return f"VigenereCipher(key_len={len(self._key)})"


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format=' %(message)s')

    vectors = [
        ("floop",  "a",   "floop"),
        ("floop",  "abc", "fmqoq"),
        ("floopo", "ab",  "fmoppp"),
        ("floob",  "bca", "gnopd"),
    ]
    print(f"\n{'═'*60}")
    print("Vigenère known vectors")
    print(f"{'═'*60}")
    for pt, key, expected in vectors:
        ct = encrypt(pt, key)
        assert ct == expected, (pt, key, ct)
        assert decrypt(ct, key) == pt
        print(f"  ✓  {pt:<8} + {key:<4} -> {ct}")
    print(f"{'═'*60}\n")
