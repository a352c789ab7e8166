"""
playfair — command-line front end
=================================
Run:  python -m playfair_cipher -k KEYWORD -i "HELLO WORLD"
      python -m playfair_cipher -k KEYWORD -i GYIZSCOKCFBU -d
      python -m playfair_cipher -k KEYWORD -i "..." --card key.png
"""

import argparse
import logging
import sys

from . import __version__
from .card import TableCard
from .engine import Direction, transform
from .table import build_table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playfair",
        description="Encrypts or decrypts text using the Playfair cipher",
    )
    parser.add_argument("-k", "--key", required=True, metavar="KEY",
                        help="Sets the encryption/decryption key")
    parser.add_argument("-i", "--input", required=True, metavar="TEXT",
                        help="The text to encrypt or decrypt")
    parser.add_argument("-d", "--decrypt", action="store_true",
                        help="Decrypt the input text instead of encrypting")
    parser.add_argument("--card", metavar="PATH",
                        help="Also write the generated table as a PNG key card")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log table construction and pairing details")
    parser.add_argument("--version", action="version",
                        version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format=" %(message)s")

    table = build_table(args.key)
    print("Generated Playfair Table:")
    for row in table.rows:
        print(" ".join(row))

    direction = Direction.DECRYPT if args.decrypt else Direction.ENCRYPT
    result = transform(table, direction, args.input)
    label = "Decrypted Text:" if direction is Direction.DECRYPT else "Encrypted Text:"
    print(f"{label} {result}")

    if args.card:
        try:
            TableCard().save(table, args.card)
        except OSError as e:
            print(f"playfair: cannot write key card: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
