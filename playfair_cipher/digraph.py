"""
Digraph Transformer
===================
Splits a text into letter pairs and substitutes each pair through a
KeySquare.

Pairing rules (one left-to-right pass):
  * characters outside a..z are copied through and never pair
  * a pair whose two letters share a cell is split with the filler 'x';
    the second letter starts the next pair
  * a letter left over at the end is paired with the filler

Substitution rules, applied to the two cells:
  same column  →  one row down (encode) / up (decode)
  same row     →  one column right (encode) / left (decode)
  otherwise    →  rectangle swap: own row, partner's column
"""

import logging
from typing import List, Optional, Tuple

from .errors import EncodingError
from .square import KeySquare, FILLER, FILLER_INDEX, letter_index

logger = logging.getLogger(__name__)

_COL_MASK = 0o07
_ROW_MASK = 0o70


def _lookup(square: KeySquare, pos: int) -> str:
    letter = square.letters[pos] if 0 <= pos < len(square.letters) else None
    if not isinstance(letter, str) or len(letter) != 1 or not ("a" <= letter <= "z"):
        raise EncodingError(f"KeySquare cell {pos} holds {letter!r}, not a letter.")
    return letter


def _cell(square: KeySquare, index: int) -> int:
    pos = square.positions[index]
    if not isinstance(pos, int):
        raise EncodingError(f"KeySquare has no cell for slot {index}.")
    return pos


def substitute_pair(square: KeySquare, a: int, b: int,
                    is_encode: bool) -> Tuple[str, str]:
    """Substitute the pair of alphabet slots (a, b); returns two letters."""
    pos_a = _cell(square, a)
    pos_b = _cell(square, b)

    if pos_a == pos_b:
        if a == FILLER_INDEX:
            # 'xx' has no rule in the classical cipher; leave it as is.
            return FILLER, FILLER
        # Only reachable if two slots share a cell. Retry once against the filler.
        b = FILLER_INDEX
        pos_b = _cell(square, b)
        if pos_a == pos_b:
            raise EncodingError(f"KeySquare maps slots {a} and {b} to the same cell.")

    if (pos_a & _COL_MASK) == (pos_b & _COL_MASK):
        step = KeySquare.STRIDE if is_encode else -KeySquare.STRIDE
        return _lookup(square, pos_a + step), _lookup(square, pos_b + step)

    if (pos_a & _ROW_MASK) == (pos_b & _ROW_MASK):
        step = 1 if is_encode else -1
        return _lookup(square, pos_a + step), _lookup(square, pos_b + step)

    pos_c = (pos_a & _ROW_MASK) | (pos_b & _COL_MASK)
    pos_d = (pos_b & _ROW_MASK) | (pos_a & _COL_MASK)
    return _lookup(square, pos_c), _lookup(square, pos_d)


def transform(square: KeySquare, text: str, is_encode: bool) -> str:
    """Encode or decode `text` through `square`."""
    out: List[str] = []
    pending: Optional[Tuple[int, int]] = None   # (slot in out, alphabet index)
    pairs = 0

    for ch in text:
        index = letter_index(ch)
        if index is None:
            out.append(ch)
            continue

        if pending is not None:
            slot, first = pending
            if first == index:
                out[slot], filler = substitute_pair(square, first, FILLER_INDEX, is_encode)
                out.append(filler)
                pairs += 1
            else:
                out[slot], second = substitute_pair(square, first, index, is_encode)
                out.append(second)
                pairs += 1
                pending = None
                continue

        pending = (len(out), index)
        out.append(ch)

    if pending is not None:
        slot, first = pending
        out[slot], filler = substitute_pair(square, first, FILLER_INDEX, is_encode)
        out.append(filler)
        pairs += 1

    logger.debug(f"{'encode' if is_encode else 'decode'}: {len(text)} chars in, {pairs} pairs")
    return "".join(out)
