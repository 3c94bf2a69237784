from typing import Any, Dict, Optional, Tuple

from .canvas import Canvas
from .core import TreeChars
from .layout import TreeLayout


class GridRenderer:

    def __init__(self, chars: Optional[TreeChars] = None, connector_style: Optional[str] = None):
        self.chars = chars or TreeChars()
        self.connector_style = connector_style

    def render(self, layout: TreeLayout, canvas: Canvas, leaf_rows: Dict[int, str]) -> None:
        """Paint ``layout`` onto ``canvas`` and fill ``leaf_rows`` with row -> leaf name."""
        self._paint(layout, layout.root, canvas, leaf_rows)

    def _style_tokens(self, style: Optional[str]) -> Optional[Tuple[str, str]]:
        if not style:
            return None
        tag = style.strip()
        if not tag:
            return None
        open_tag = tag if tag.startswith("[") else f"[{tag}]"
        close_tag = "[/]"
        return open_tag, close_tag

    def _set_connector_char(self, canvas: Canvas, x: int, y: int, char: str) -> None:
        if not canvas.set(x, y, char):
            return
        tokens = self._style_tokens(self.connector_style)
        if tokens:
            open_tag, close_tag = tokens
            canvas.insert_markup(x, y, open_tag, position="prefix")
            canvas.insert_markup(x, y, close_tag, position="suffix")

    def _write_label(self, canvas: Canvas, x: int, y: int, text: str) -> None:
        # labels are clipped to the visible columns instead of overflowing
        visible = "".join(char for i, char in enumerate(text) if 0 <= x + i < canvas.width)
        if visible:
            canvas.write_text(max(x, 0), y, visible)

    def _paint(self, layout: TreeLayout, node: Any, canvas: Canvas, leaf_rows: Dict[int, str]) -> None:
        record = layout.record_for(node)
        x_self = int(record.x_self)
        y_self = int(record.y_self)
        x_parent = int(record.x_parent)

        children = node.children
        if children:
            for child in children:
                self._paint(layout, child, canvas, leaf_rows)

            # stored child order is taken as top-to-bottom order
            first_y = int(layout.record_for(children[0]).y_parent)
            last_y = int(layout.record_for(children[-1]).y_parent)
            for y in range(first_y, last_y):
                self._set_connector_char(canvas, x_self, y, self.chars.vertical)

        for x in range(x_parent, x_self):
            self._set_connector_char(canvas, x, y_self, self.chars.horizontal)

        if x_self < canvas.width:
            self._write_label(canvas, x_self, y_self, str(node.node_id))

        if node is not layout.root and y_self - 1 >= 0:
            self._write_label(canvas, (x_self + x_parent) // 2 - 1, y_self - 1, str(int(node.length)))

        if not children:
            leaf_rows[y_self] = node.name or ""
