"""
Modified-Alphabet Cipher
========================
Polyalphabetic substitution over the Russian alphabet.

Every letter maps to its position in the alphabet (А=0 ... Я=32). The
keyword becomes a vector of positions that repeats over the message:

    c[i] = (p[i] + key[i mod len(key)]) mod N
    p[i] = (c[i] - key[i mod len(key)]) mod N

where N is the alphabet length. Input is case-insensitive and is
normalized to uppercase. Anything outside the alphabet (digits, spaces,
punctuation, Latin letters) is rejected instead of passed through.

Historical note: this is the Vigenère scheme with the Latin tableau
swapped for the Cyrillic one. Teaching-grade only, trivially broken by
Kasiski/Friedman analysis.
"""

import logging
from types import MappingProxyType
from typing import Iterable, List

from .errors import CipherError, ErrorKind

logger = logging.getLogger(__name__)

ALPHABET      = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"
ALPHABET_SIZE = len(ALPHABET)   # 33, Ё included
LETTER_INDEX  = MappingProxyType({ch: i for i, ch in enumerate(ALPHABET)})


class ModAlphaCipher:
    """
    Modified-alphabet cipher bound to one keyword.

    The key is validated and converted once, in the constructor, and
    never changes afterwards. encrypt/decrypt do not touch instance
    state, so one instance can be shared freely between threads.
    """

    ALPHABET      = ALPHABET
    ALPHABET_SIZE = ALPHABET_SIZE

    def __init__(self, keyword: str):
        self._key = tuple(self.to_indices(self.validate_key(keyword)))
        logger.debug(f"Key set: {len(self._key)} letters")

    @property
    def key(self) -> tuple:
        return self._key

    def encrypt(self, open_text: str) -> str:
        """Encrypt open text. Raises CipherError(INVALID_PLAIN_TEXT)."""
        p = self.to_indices(self.validate_open_text(open_text))
        n = len(self._key)
        c = [(x + self._key[i % n]) % ALPHABET_SIZE for i, x in enumerate(p)]
        logger.debug(f"Encrypt: {len(c)} letters")
        return self.to_text(c)

    def decrypt(self, cipher_text: str) -> str:
        """Decrypt cipher text. Raises CipherError(INVALID_CIPHER_TEXT)."""
        c = self.to_indices(self.validate_cipher_text(cipher_text))
        n = len(self._key)
        # Python's % is non-negative for a positive modulus
        p = [(x - self._key[i % n]) % ALPHABET_SIZE for i, x in enumerate(c)]
        logger.debug(f"Decrypt: {len(p)} letters")
        return self.to_text(p)

    # ── conversion ───────────────────────────────────────────────────────────

    @staticmethod
    def to_indices(text: str) -> List[int]:
        """Map normalized text to alphabet positions."""
        return [LETTER_INDEX[ch] for ch in text]

    @staticmethod
    def to_text(indices: Iterable[int]) -> str:
        """Map alphabet positions back to letters."""
        return "".join(ALPHABET[i] for i in indices)

    # ── validation ───────────────────────────────────────────────────────────

    @classmethod
    def validate_key(cls, keyword: str) -> str:
        return cls._validate(keyword, ErrorKind.INVALID_KEY, "key")

    @classmethod
    def validate_open_text(cls, text: str) -> str:
        return cls._validate(text, ErrorKind.INVALID_PLAIN_TEXT, "open text")

    @classmethod
    def validate_cipher_text(cls, text: str) -> str:
        return cls._validate(text, ErrorKind.INVALID_CIPHER_TEXT, "cipher text")

    @staticmethod
    def _validate(text: str, kind: ErrorKind, what: str) -> str:
        """
        Uppercase text and check every character against the alphabet.
        Returns the normalized text or raises CipherError of the given kind.
        """
        if not isinstance(text, str):
            raise CipherError(kind, f"Invalid {what}: expected str, got {type(text).__name__}")
        normalized = text.upper()
        if not normalized:
            raise CipherError(kind, f"Empty {what}")
        for ch in normalized:
            if ch not in LETTER_INDEX:
                raise CipherError(kind, f"Invalid {what}: {ch!r} is not a letter of the alphabet")
        return normalized

    def __repr__(self):
        return f"ModAlphaCipher(key_length={len(self._key)})"
