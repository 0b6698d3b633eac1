"""
Alphabet constants for the lowercase Latin alphabet.

Letters map to 0-25 by subtracting ALPHABET_OFFSET (ord("a") == 97)
and back by adding it. Nothing outside a-z is ever produced.
"""

ALPHABET        = "abcdefghijklmnopqrstuvwxyz"
ALPHABET_OFFSET = 97   # ord("a")
ALPHABET_LAST   = 122  # ord("z")
ALPHABET_SIZE   = 26


def shift(ch: str) -> int:
    """Map a lowercase letter to 0-25."""
    return ord(ch) - ALPHABET_OFFSET


def unshift(value: int) -> str:
    """Map 0-25 back to a lowercase letter."""
    return chr(value + ALPHABET_OFFSET)
