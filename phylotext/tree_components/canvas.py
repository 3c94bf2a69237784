import logging
from typing import Dict, List, Tuple

from wcwidth import wcwidth

from ..errors import LayoutOverflowError

logger = logging.getLogger(__name__)


class Canvas:

    def __init__(self, width: int, height: int, strict: bool = False):
        self.width = width
        self.height = height
        self.strict = strict
        self.grid = [[" " for _ in range(width)] for _ in range(height)]
        self.cell_widths = [[1 for _ in range(width)] for _ in range(height)]
        self.markup: Dict[Tuple[int, int], Dict[str, List[str]]] = {}
        self.dropped = 0

    def contains(self, x: int, y: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def _clear_markup(self, x: int, y: int) -> None:
        self.markup.pop((x, y), None)

    def _clear_glyph_at(self, x: int, y: int) -> None:
        width = self.cell_widths[y][x]
        if width == 0:
            base_x = x - 1
            while base_x >= 0 and self.cell_widths[y][base_x] == 0:
                base_x -= 1
            if base_x < 0:
                return
            width = self.cell_widths[y][base_x]
            x = base_x
        if width <= 1:
            return
        for i in range(width):
            xi = x + i
            if xi < self.width:
                self.grid[y][xi] = " "
                self.cell_widths[y][xi] = 1
                self._clear_markup(xi, y)

    def _reject(self, x: int, y: int) -> None:
        if self.strict:
            raise LayoutOverflowError(
                f"Tree content exceeds canvas bounds at ({x}, {y}) "
                f"on a {self.width}x{self.height} canvas."
            )
        self.dropped += 1
        logger.debug("Dropped write outside canvas at (%d, %d)", x, y)

    def set(self, x: int, y: int, char: str, width: int = 1) -> bool:
        if not self.contains(x, y):
            self._reject(x, y)
            return False
        if width < 1:
            width = 1
        if x + width > self.width:
            self._reject(x + width - 1, y)
            return False

        for i in range(width):
            self._clear_glyph_at(x + i, y)
        self._clear_markup(x, y)
        self.grid[y][x] = char
        self.cell_widths[y][x] = width
        for i in range(1, width):
            xi = x + i
            self.grid[y][xi] = ""
            self.cell_widths[y][xi] = 0
            self._clear_markup(xi, y)
        return True

    def write_text(self, x: int, y: int, text: str) -> int:
        """Write ``text`` glyph by glyph starting at column ``x``.

        Returns the number of columns consumed, including clipped ones.
        """
        offset = 0
        for char in text:
            glyph_width = max(wcwidth(char), 1)
            self.set(x + offset, y, char, glyph_width)
            offset += glyph_width
        return offset

    def insert_markup(self, x: int, y: int, markup: str, *, position: str = "prefix") -> None:
        if not markup or not self.contains(x, y):
            return
        if position not in {"prefix", "suffix"}:
            position = "prefix"
        cell = self.markup.setdefault((x, y), {"prefix": [], "suffix": []})
        cell[position].append(markup)

    def row(self, y: int, include_markup: bool = False) -> str:
        parts: List[str] = []
        for x in range(self.width):
            if self.cell_widths[y][x] == 0:
                continue
            markup_cell = self.markup.get((x, y)) if include_markup else None
            if markup_cell:
                parts.extend(markup_cell.get("prefix", []))
            parts.append(self.grid[y][x])
            if markup_cell:
                parts.extend(markup_cell.get("suffix", []))
        return "".join(parts)

    def rows(self, include_markup: bool = False) -> List[str]:
        return [self.row(y, include_markup) for y in range(self.height)]
