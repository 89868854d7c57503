"""
playfair_cipher
===============
Classical Playfair digraph cipher (1854).

Modules:
    square   — KeySquare: keyed 5×5 grid, I/J merged, wrap-around border
    digraph  — pair grouping (filler rules) and pair substitution
    cipher   — PlayfairCipher: encode / decode façade
    errors   — EncodingError

Not a security primitive: Playfair falls to digraph frequency analysis.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors import EncodingError
from .square import KeySquare
from .cipher import PlayfairCipher

__all__ = [
    "EncodingError",
    "KeySquare",
    "PlayfairCipher",
]
