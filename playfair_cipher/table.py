"""
Playfair Table — the 5×5 key square
===================================
Builds the grid the whole cipher runs on.

The keyword is written into the square first (duplicates dropped, first
occurrence wins), then the rest of the alphabet follows in A–Z order.
J is folded into I so that 25 letters fill 25 cells exactly.

    K E Y W O
    R D A B C      <- key "KEYWORD"
    F G H I L
    M N P Q S
    T U V X Z

Forward view:  grid[row][col] -> letter
Reverse view:  letter -> (row, col)
Both are built in one pass and never mutated afterwards.
"""

import logging
import string
from types import MappingProxyType
from typing import Tuple

logger = logging.getLogger(__name__)

SIZE          = 5
MERGED_LETTER = "J"
MERGED_INTO   = "I"
ALPHABET      = string.ascii_uppercase.replace(MERGED_LETTER, "")   # 25 letters


def normalize(raw: str) -> str:
    """Uppercase, drop everything that is not an ASCII letter, fold J into I."""
    if not isinstance(raw, str):
        raise TypeError(f"Expected str, got {type(raw).__name__}.")
    letters = "".join(ch for ch in raw if ch in string.ascii_letters).upper()
    return letters.replace(MERGED_LETTER, MERGED_INTO)


class PlayfairTable:
    """
    Immutable 5×5 Playfair square with its coordinate index.

    Use PlayfairTable.from_key(key) (or build_table) to derive it from a
    keyword. The constructor takes the 25 letters in row-major order and
    raises ValueError unless they are a permutation of ALPHABET.
    """

    __slots__ = ("_grid", "_index")

    def __init__(self, letters: str):
        if len(letters) != SIZE * SIZE or set(letters) != set(ALPHABET):
            raise ValueError("Table letters must be a permutation of the 25-letter alphabet.")
        grid  = []
        index = {}
        for row in range(SIZE):
            cells = letters[row * SIZE:(row + 1) * SIZE]
            for col, letter in enumerate(cells):
                index[letter] = (row, col)
            grid.append(tuple(cells))
        object.__setattr__(self, "_grid", tuple(grid))
        object.__setattr__(self, "_index", MappingProxyType(index))

    def __setattr__(self, name, value):
        raise AttributeError("PlayfairTable is immutable.")

    @classmethod
    def from_key(cls, key: str) -> "PlayfairTable":
        placed = []
        for letter in normalize(key) + ALPHABET:
            if letter not in placed:
                placed.append(letter)
        logger.debug(f"Table built from key {key!r}: {''.join(placed)}")
        return cls("".join(placed))

    # ── views ────────────────────────────────────────────────────────────────

    @property
    def grid(self) -> Tuple[Tuple[str, ...], ...]:
        return self._grid

    @property
    def rows(self) -> Tuple[str, ...]:
        return tuple("".join(row) for row in self._grid)

    def letter_at(self, row: int, col: int) -> str:
        return self._grid[row % SIZE][col % SIZE]

    def position(self, letter: str) -> Tuple[int, int]:
        """Return (row, col) of `letter`. Raises ValueError for J or non-letters."""
        try:
            return self._index[letter]
        except KeyError:
            raise ValueError(f"{letter!r} is not in the Playfair alphabet.") from None

    def __contains__(self, letter) -> bool:
        return letter in self._index

    def __iter__(self):
        for row in self._grid:
            yield from row

    def __eq__(self, other):
        if not isinstance(other, PlayfairTable):
            return NotImplemented
        return self._grid == other._grid

    def __hash__(self):
        return hash(self._grid)

    def __str__(self):
        return "\n".join(" ".join(row) for row in self._grid)

    def __reduce__(self):
        return PlayfairTable, ("".join(self),)

    def __repr__(self):
        return f"PlayfairTable({''.join(self)!r})"


def build_table(key: str) -> PlayfairTable:
    """Build the Playfair square for `key`. An empty key gives the plain A–Z (no J) square."""
    return PlayfairTable.from_key(key)
