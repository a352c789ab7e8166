"""
Key Card — the Playfair square as an image
==========================================
Field operators carried the square on a card. TableCard draws the
generated 5×5 table as a PNG: one letter per cell, ruled grid lines.

Output format: PNG bytes (lossless), or written straight to a path.
Image size:    margin + 5 × cell_size + margin on each axis.

Dependencies: Pillow >= 10.1
"""

import io
import logging
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from .table import SIZE, PlayfairTable

logger = logging.getLogger(__name__)


class TableCard:
    """Render a PlayfairTable to a PNG key card."""

    MIN_CELL = 16

    def __init__(self, cell_size: int = 64, margin: int = 16,
                 background: Tuple[int, int, int] = (255, 255, 255),
                 ink: Tuple[int, int, int] = (0, 0, 0)):
        if cell_size < self.MIN_CELL:
            raise ValueError(f"cell_size must be at least {self.MIN_CELL} pixels.")
        if margin < 0:
            raise ValueError("margin must not be negative.")
        self.cell_size  = cell_size
        self.margin     = margin
        self.background = background
        self.ink        = ink

    @property
    def image_size(self) -> Tuple[int, int]:
        side = 2 * self.margin + SIZE * self.cell_size
        return side, side

    def draw(self, table: PlayfairTable) -> Image.Image:
        """Return the card as a PIL Image."""
        img  = Image.new("RGB", self.image_size, color=self.background)
        pen  = ImageDraw.Draw(img)
        font = self._font()
        m, c = self.margin, self.cell_size

        for i in range(SIZE + 1):
            offset = m + i * c
            pen.line([(m, offset), (m + SIZE * c, offset)], fill=self.ink, width=2)
            pen.line([(offset, m), (offset, m + SIZE * c)], fill=self.ink, width=2)

        for row, letters in enumerate(table.grid):
            for col, letter in enumerate(letters):
                left, top, right, bottom = pen.textbbox((0, 0), letter, font=font)
                x = m + col * c + (c - (right - left)) // 2 - left
                y = m + row * c + (c - (bottom - top)) // 2 - top
                pen.text((x, y), letter, fill=self.ink, font=font)
        return img

    def render(self, table: PlayfairTable) -> bytes:
        """Return PNG bytes of the card."""
        buf = io.BytesIO()
        self.draw(table).save(buf, format="PNG")
        data = buf.getvalue()
        logger.debug(f"Key card rendered: {self.image_size[0]}px square, {len(data)} bytes")
        return data

    def save(self, table: PlayfairTable, path: str) -> None:
        self.draw(table).save(path, format="PNG")
        logger.info(f"Key card written to {path}")

    def _font(self):
        return ImageFont.load_default(size=self.cell_size // 2)
