"""
Digraph pairing
===============
Splits normalized text into the letter pairs the cipher substitutes.

    BALLOON  ->  BA LX LO ON

A repeated letter never shares a digraph: X is slotted in after the
first one and the repeat starts the next pair. A lone trailing letter is
padded with X. XX is still paired as XX (no alternate filler).
"""

import logging
from typing import Iterator, Tuple

logger = logging.getLogger(__name__)

FILLER = "X"

Digraph = Tuple[str, str]


def pair(text: str) -> Iterator[Digraph]:
    """Yield digraphs over `text` with a single forward cursor."""
    i = 0
    n = len(text)
    while i < n:
        first = text[i]
        if i + 1 < n and text[i + 1] != first:
            yield first, text[i + 1]
            i += 2
        else:
            if i + 1 < n:
                logger.debug(f"Filler after repeated {first!r} at offset {i}")
            else:
                logger.debug(f"Filler pads trailing {first!r}")
            yield first, FILLER
            i += 1
