"""
playfair_cipher — Live Demo
===========================
Run:  python examples/demo_playfair.py

Builds the KEYWORD square, walks each digraph of the known-answer
message through its rule, then decrypts it back.
"""

import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from playfair_cipher import (Direction, PlayfairCipher, TableCard,
                             normalize, pair, relation_of, substitute)

LINE = "═" * 70
KEY  = "KEYWORD"
MSG  = "Hello World"

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

# ── Table ────────────────────────────────────────────────────────────────────
cipher = PlayfairCipher(KEY)
header(f"Key square — {KEY}")
for row in cipher.table.rows:
    print("     " + " ".join(row))

# ── Digraphs ─────────────────────────────────────────────────────────────────
header("Digraph walk")
for digraph in pair(normalize(MSG)):
    out = substitute(cipher.table, Direction.ENCRYPT, digraph)
    rule = relation_of(cipher.table, digraph).value
    print(f"     {''.join(digraph)} → {''.join(out)}   ({rule})")

# ── Round trip ───────────────────────────────────────────────────────────────
header("Encrypt / decrypt")
ct = cipher.encrypt(MSG)
pt = cipher.decrypt(ct)
ok("Plaintext", MSG)
ok("Encrypted", ct)
ok("Decrypted", pt)
ok("Fillers stay in the output (X after repeated L, X pad at the end)")

# ── Key card ─────────────────────────────────────────────────────────────────
header("Key card")
png = TableCard().render(cipher.table)
ok("PNG bytes", f"{len(png):,}")
print(LINE + "\n")
