"""
modalpha — Modified-Alphabet Cipher
===================================
Vigenère-family substitution cipher over the Russian alphabet
(А..Я with Ё, 33 letters) driven by a repeating keyword.

    >>> from modalpha import ModAlphaCipher
    >>> ModAlphaCipher("Б").encrypt("яблоко")
    'АВМПЛП'

Errors:
    CipherError (a ValueError) with .kind one of
    ErrorKind.INVALID_KEY / INVALID_PLAIN_TEXT / INVALID_CIPHER_TEXT

License: Apache 2.0
"""

__version__ = "1.0.0"

from .cipher import ModAlphaCipher, ALPHABET, ALPHABET_SIZE
from .errors import CipherError, ErrorKind

__all__ = [
    "ModAlphaCipher",
    "CipherError",
    "ErrorKind",
    "ALPHABET",
    "ALPHABET_SIZE",
]
