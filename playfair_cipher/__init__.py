"""
playfair_cipher — Playfair digraph substitution
===============================================
The classical 5×5 Playfair cipher (Wheatstone, 1854).
Historical and educational only: not secure against any modern attack.

Layers:
    table     — keyword → immutable 5×5 square + coordinate index
    digraphs  — normalized text → letter pairs (X filler / padding)
    engine    — row / column / rectangle substitution, both directions
    card      — the square rendered as a PNG key card (Pillow)

Pipeline:
    raw key     → normalize → build_table ─┐
    raw message → normalize → pair ────────┴→ substitute → ciphertext

License: Apache 2.0
"""

__version__  = "1.0.0"

from .table     import ALPHABET, PlayfairTable, build_table, normalize
from .digraphs  import FILLER, pair
from .engine    import Direction, Relation, PlayfairCipher, relation_of, substitute, transform
from .card      import TableCard

__all__ = [
    "ALPHABET",
    "FILLER",
    "PlayfairTable",
    "build_table",
    "normalize",
    "pair",
    "Direction",
    "Relation",
    "PlayfairCipher",
    "relation_of",
    "substitute",
    "transform",
    "TableCard",
]
