"""
Playfair Cipher Engine
======================
Digraph substitution over a keyed 5×5 square.

Historical note: Charles Wheatstone, 1854, promoted by Lord Playfair.
Used in the field through both World Wars. Encrypting pairs instead of
single letters flattens the letter-frequency profile, but digraph
frequencies still break it by hand. Not modern-secure.

Input model: only lowercase a..z are enciphered. Uppercase letters,
digits, spaces and punctuation pass through unchanged and do not take
part in pairing. Lower-case the text first for case-insensitive use.
"""

import logging

from .square import KeySquare
from .digraph import transform

logger = logging.getLogger(__name__)


class PlayfairCipher:
    """
    Playfair cipher bound to one key.

    The key square is built once here and never changes, so a single
    instance can be shared between threads.
    """

    def __init__(self, key: str):
        self._square = KeySquare.from_key(key)

    @classmethod
    def from_square(cls, square: KeySquare) -> "PlayfairCipher":
        """Wrap an already-built square."""
        cipher = cls.__new__(cls)
        cipher._square = square
        return cipher

    @property
    def square(self) -> KeySquare:
        return self._square

    def encode(self, text: str) -> str:
        """Encrypt plaintext. Raises EncodingError if the square is corrupt."""
        return self.transform(text, True)

    def decode(self, text: str) -> str:
        """Decrypt ciphertext. Filler letters are left in place."""
        return self.transform(text, False)

    def transform(self, text: str, is_encode: bool) -> str:
        return transform(self._square, text, is_encode)

    def __repr__(self):
        return f"PlayfairCipher({self._square!r})"
