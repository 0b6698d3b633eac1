"""
vigenere_cipher — Live Demo
===========================
Run:  python examples/demo_vigenere.py

Encrypts and decrypts a message, extends a key, and shows each
validation error the core can raise.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_cipher import (
    VigenereCipher, VigenereError, encrypt, decrypt, extend_key,
)

logging.basicConfig(level=logging.INFO, format=' %(message)s')

LINE = "═" * 70
MSG  = "attackatdawn"
KEY  = "lemon"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

print(f"\n{LINE}")
print("  vigenere_cipher — Demo")
print(LINE)
print(f"  Message: {MSG}")
print(f"  Key:     {KEY}")

# ── Encrypt / decrypt ────────────────────────────────────────────────────────
header("Encrypt / decrypt")
ct = encrypt(MSG, KEY)
pt = decrypt(ct, KEY)
ok("Encrypted", ct)
ok("Decrypted", pt)
ok("Round-trip", str(pt == MSG))

v = VigenereCipher(KEY)
ok("VigenereCipher", repr(v))
ok("Same ciphertext", str(v.encrypt(MSG) == ct))

# ── Key extension ────────────────────────────────────────────────────────────
header("Key extension")
ok("Keystream", extend_key(MSG, KEY))
ok("Exact multiple", extend_key("flooop", "abc"))
ok("Remainder",      extend_key("floopolo", "abc"))

# ── Errors ───────────────────────────────────────────────────────────────────
header("Validation errors")
for text, key in [("floopol", "1"), ("1", "ab"), ("floopol", "A"),
                  ("ABCDE", "abc"), ("floop", "")]:
    try:
        encrypt(text, key)
    except VigenereError as e:
        print(f"  ✗  encrypt({text!r}, {key!r}) -> {e.kind.name}/{e.side.name}: {e}")
try:
    extend_key("ab", "abc")
except VigenereError as e:
    print(f"  ✗  extend_key('ab', 'abc') -> {e.kind.name}: {e}")

print(f"\n{LINE}\n")
