"""
Playfair Engine — digraph substitution
======================================
Each digraph is located in the square and classified once:

  SAME_ROW     shift one column  (right to encrypt, left to decrypt)
  SAME_COLUMN  shift one row     (down to encrypt, up to decrypt)
  RECTANGLE    swap columns      (identical both ways)

Shifts wrap modulo 5. The rectangle rule is its own inverse, the shift
rules invert each other, so decrypt(encrypt(text)) == text for any text
that needed no filler.

Historical note: Charles Wheatstone, 1854; promoted by Lord Playfair.
Broken by hand with digraph frequency analysis. Teaching use only.
"""

import enum
import logging

from .digraphs import Digraph, pair
from .table import PlayfairTable, build_table, normalize

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    ENCRYPT = 1
    DECRYPT = -1

    @property
    def shift(self) -> int:
        return self.value


class Relation(enum.Enum):
    SAME_ROW    = "same-row"
    SAME_COLUMN = "same-column"
    RECTANGLE   = "rectangle"


def _check(digraph) -> Digraph:
    if len(digraph) != 2:
        raise ValueError(f"A digraph has exactly two letters, got {digraph!r}.")
    return digraph[0], digraph[1]


def _relate(ra, ca, rb, cb) -> Relation:
    if ra == rb:
        return Relation.SAME_ROW
    if ca == cb:
        return Relation.SAME_COLUMN
    return Relation.RECTANGLE


def relation_of(table: PlayfairTable, digraph: Digraph) -> Relation:
    """Classify a digraph. Row is tested before column, so XX is SAME_ROW."""
    a, b = _check(digraph)
    (ra, ca), (rb, cb) = table.position(a), table.position(b)
    return _relate(ra, ca, rb, cb)


def substitute(table: PlayfairTable, direction: Direction, digraph: Digraph) -> Digraph:
    """Substitute one digraph. Raises ValueError if a letter is outside the square."""
    a, b = _check(digraph)
    (ra, ca), (rb, cb) = table.position(a), table.position(b)
    relation = _relate(ra, ca, rb, cb)
    step = direction.shift

    if relation is Relation.SAME_ROW:
        return table.letter_at(ra, ca + step), table.letter_at(rb, cb + step)
    if relation is Relation.SAME_COLUMN:
        return table.letter_at(ra + step, ca), table.letter_at(rb + step, cb)
    return table.letter_at(ra, cb), table.letter_at(rb, ca)


def transform(table: PlayfairTable, direction: Direction, text: str) -> str:
    """Normalize, pair and substitute the whole message."""
    out = []
    for digraph in pair(normalize(text)):
        out.extend(substitute(table, direction, digraph))
    result = "".join(out)
    logger.debug(f"{direction.name.lower()}: {len(result) // 2} digraphs")
    return result


class PlayfairCipher:
    """
    Playfair cipher bound to one keyword.

    Output is uppercase letters only, no spacing; fillers stay in the
    decrypted text because they cannot be told apart from real X's.
    """

    def __init__(self, key: str):
        self._table = build_table(key)

    @property
    def table(self) -> PlayfairTable:
        return self._table

    def encrypt(self, plaintext: str) -> str:
        return transform(self._table, Direction.ENCRYPT, plaintext)

    def decrypt(self, ciphertext: str) -> str:
        return transform(self._table, Direction.DECRYPT, ciphertext)

    def __repr__(self):
        return f"PlayfairCipher(first_row={self._table.rows[0]!r})"
