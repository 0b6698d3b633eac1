"""
Error taxonomy for the Vigenère core.

Every failure is a single exception type tagged with what went wrong
(ErrorKind) and which input it concerns (Side). VigenereError is a
ValueError so callers catching bad input the usual way keep working.
"""

from enum import Enum


class ErrorKind(Enum):
    NOT_ALPHABETIC = "not_alphabetic"
    NOT_LOWERCASE  = "not_lowercase"
    EMPTY_KEY      = "empty_key"
    KEY_TOO_LONG   = "key_too_long"


class Side(Enum):
    MESSAGE    = "message"
    CIPHERTEXT = "ciphertext"
    KEY        = "key"


_TEMPLATES = {
    ErrorKind.NOT_ALPHABETIC: "{side} must contain only alphabetic characters",
    ErrorKind.NOT_LOWERCASE:  "{side} must be all lowercase values",
    ErrorKind.EMPTY_KEY:      "{side} must not be empty",
    ErrorKind.KEY_TOO_LONG:   "{side} must not be longer than the message",
}


class VigenereError(ValueError):
    """Raised when a message, ciphertext or key fails validation."""

    def __init__(self, kind: ErrorKind, side: Side):
        self.kind = kind
        self.side = side
        super().__init__(_TEMPLATES[kind].format(side=side.value))

    def __repr__(self):
        return f"VigenereError({self.kind.name}, {self.side.name})"
