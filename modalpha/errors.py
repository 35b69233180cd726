"""
Cipher errors
=============
A single exception type with three kinds. Every kind means the caller
passed malformed input and has to fix it before calling again.
"""

from enum import Enum


class ErrorKind(Enum):
    INVALID_KEY         = "invalid key"
    INVALID_PLAIN_TEXT  = "invalid plain text"
    INVALID_CIPHER_TEXT = "invalid cipher text"


class CipherError(ValueError):
    """Raised when a key, open text or cipher text fails validation."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind    = kind
        self.message = message

    def __repr__(self):
        return f"CipherError({self.kind.name}, {self.message!r})"
