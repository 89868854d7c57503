"""
Key Square: the 5×5 Playfair grid
=================================
Twenty-five letters, I and J sharing one cell, laid out row by row:
first the letters of the key in order of first appearance, then the rest
of the alphabet in order.

Cells are addressed by a packed position  row * 8 + col  with row and col
in 1..5. The letter table is 8 wide and 7 tall (rows and columns 0..6) so
the cells one step past each edge can hold the letter from the opposite
edge:

    column 0 = column 5     column 6 = column 1
    row 0    = row 5        row 6    = row 1

Neighbour lookups then become  pos ± 1  (same row) and  pos ± 8  (same
column) with no modulo arithmetic.

Only lowercase a..z count as letters. Anything else in the key is skipped.
"""

import logging
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

IJ_INDEX     = ord("i") - ord("a")        # 8, shared by i and j
FILLER       = "x"
FILLER_INDEX = ord(FILLER) - ord("a") - 1  # 22
ALPHABET_SIZE = 25


def letter_index(ch: str) -> Optional[int]:
    """Map a lowercase letter to its 0-24 slot, j onto i. None for anything else."""
    if not ("a" <= ch <= "z"):
        return None
    index = ord(ch) - ord("a")
    return index if index <= IJ_INDEX else index - 1


def canonical_letter(index: int) -> str:
    """Inverse of letter_index; the shared slot always yields 'i'."""
    if index <= IJ_INDEX:
        return chr(index + ord("a"))
    return chr(index + ord("a") + 1)


class KeySquare:
    """Immutable Playfair key square with a wrap-around border."""

    SIZE   = 5
    STRIDE = 8   # packed position = row * STRIDE + col
    TABLE  = STRIDE * STRIDE   # highest used cell is row 6, col 6 = 54

    def __init__(self, positions, letters):
        """
        Wrap pre-computed tables. Use KeySquare.from_key() to build one.

        positions : 25 packed positions, indexed by alphabet slot
        letters   : 64 letters, indexed by packed position
        """
        positions = tuple(positions)
        letters   = tuple(letters)
        if len(positions) != ALPHABET_SIZE:
            raise ValueError(f"KeySquare needs {ALPHABET_SIZE} positions, got {len(positions)}.")
        if len(letters) != self.TABLE:
            raise ValueError(f"KeySquare needs a {self.TABLE}-entry letter table, got {len(letters)}.")
        object.__setattr__(self, "_positions", positions)
        object.__setattr__(self, "_letters", letters)

    def __setattr__(self, name, value):
        raise AttributeError("KeySquare is immutable.")

    @classmethod
    def from_key(cls, key: str) -> "KeySquare":
        """Build the square for `key`. Never fails; non-letters are skipped."""
        positions: List[Optional[int]] = [None] * ALPHABET_SIZE
        letters:   List[Optional[str]] = [None] * cls.TABLE
        row, col = 1, 1

        def place(index: int, letter: str) -> None:
            nonlocal row, col
            pos = row * cls.STRIDE + col
            positions[index] = pos
            letters[pos] = letter
            col += 1
            if col > cls.SIZE:
                row, col = row + 1, 1

        for ch in key:
            index = letter_index(ch)
            if index is None or positions[index] is not None:
                continue
            place(index, "i" if ch == "j" else ch)

        for index in range(ALPHABET_SIZE):
            if positions[index] is None:
                place(index, canonical_letter(index))

        s = cls.STRIDE
        for r in range(1, cls.SIZE + 1):
            letters[r * s]     = letters[r * s + 5]
            letters[r * s + 6] = letters[r * s + 1]
        for c in range(0, cls.SIZE + 2):
            letters[c]         = letters[5 * s + c]
            letters[6 * s + c] = letters[1 * s + c]

        square = cls(positions, letters)
        logger.debug(f"KeySquare built: key={len(key)} chars, first row={square.rows()[0]!r}")
        return square

    # ── read-only views ──────────────────────────────────────────────────────

    @property
    def positions(self) -> Tuple[int, ...]:
        return self._positions

    @property
    def letters(self) -> Tuple[str, ...]:
        return self._letters

    def letter_at(self, row: int, col: int) -> str:
        """Letter at (row, col); 0 and 6 address the wrap border."""
        if not (0 <= row <= self.SIZE + 1 and 0 <= col <= self.SIZE + 1):
            raise ValueError(f"Cell ({row}, {col}) is outside the bordered square.")
        return self._letters[row * self.STRIDE + col]

    def position_of(self, letter: str) -> Tuple[int, int]:
        """(row, col) of a lowercase letter; j resolves to i's cell."""
        index = letter_index(letter) if len(letter) == 1 else None
        if index is None:
            raise ValueError(f"Not a lowercase letter: {letter!r}")
        return divmod(self._positions[index], self.STRIDE)

    def rows(self) -> List[str]:
        return [
            "".join(self.letter_at(r, c) for c in range(1, self.SIZE + 1))
            for r in range(1, self.SIZE + 1)
        ]

    def __str__(self):
        return "\n".join(self.rows())

    def __repr__(self):
        return f"KeySquare({self.rows()[0]}...)"
