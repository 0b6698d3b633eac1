"""
vigenere_cipher — Validation & Key Extension Tests
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from vigenere_cipher import (
    ErrorKind, Side, VigenereError,
    validate_lowercase, validate_alphabetic, extend_key,
)

# ── validate_lowercase ────────────────────────────────────────────────────────
@pytest.mark.parametrize("text", ["", "a", "floop", "abcdefghijklmnopqrstuvwxyz"])
def test_lowercase_accepts(text):
    assert validate_lowercase(text, Side.MESSAGE) is None

@pytest.mark.parametrize("text, kind", [
    ("1",     ErrorKind.NOT_ALPHABETIC),
    ("ab c",  ErrorKind.NOT_ALPHABETIC),
    ("A",     ErrorKind.NOT_LOWERCASE),
    ("abcZ",  ErrorKind.NOT_LOWERCASE),
    ("café",  ErrorKind.NOT_LOWERCASE),
    # a non-letter anywhere outranks an earlier uppercase letter
    ("A1",    ErrorKind.NOT_ALPHABETIC),
    ("Abc=",  ErrorKind.NOT_ALPHABETIC),
])
def test_lowercase_rejects(text, kind):
    with pytest.raises(VigenereError) as exc:
        validate_lowercase(text, Side.KEY)
    assert exc.value.kind is kind
    assert exc.value.side is Side.KEY

# ── validate_alphabetic ───────────────────────────────────────────────────────
def test_alphabetic_ignores_case():
    assert validate_alphabetic("FlOoP", Side.MESSAGE) is None

def test_alphabetic_rejects_symbols():
    with pytest.raises(VigenereError) as exc:
        validate_alphabetic("fl0op", Side.MESSAGE)
    assert exc.value.kind is ErrorKind.NOT_ALPHABETIC

# ── extend_key ────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("message, key, expected", [
    ("flooop",   "abc", "abcabc"),
    ("floopol",  "abc", "abcabca"),
    ("floopolo", "abc", "abcabcab"),
    ("abc",      "abc", "abc"),
    ("floop",    "z",   "zzzzz"),
])
def test_extend_key(message, key, expected):
    extended = extend_key(message, key)
    assert extended == expected
    assert len(extended) == len(message)

def test_extend_key_skips_case_check():
    assert extend_key("FLOOP", "AB") == "ABABA"

@pytest.mark.parametrize("message, key, kind, side", [
    ("fl1",  "a",   ErrorKind.NOT_ALPHABETIC, Side.MESSAGE),
    ("flo",  "a-",  ErrorKind.NOT_ALPHABETIC, Side.KEY),
    ("1",    "a-",  ErrorKind.NOT_ALPHABETIC, Side.MESSAGE),
    ("ab",   "abc", ErrorKind.KEY_TOO_LONG,   Side.KEY),
    ("",     "a",   ErrorKind.KEY_TOO_LONG,   Side.KEY),
    ("ab",   "",    ErrorKind.EMPTY_KEY,      Side.KEY),
])
def test_extend_key_rejects(message, key, kind, side):
    with pytest.raises(VigenereError) as exc:
        extend_key(message, key)
    assert exc.value.kind is kind
    assert exc.value.side is side

def test_extend_key_side_override():
    with pytest.raises(VigenereError, match="^ciphertext must contain only alphabetic characters$"):
        extend_key("a1", "a", Side.CIPHERTEXT)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
