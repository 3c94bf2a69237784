import io
import logging
import sys
from typing import Any, Dict, List, Optional, TextIO, Tuple, Union

from rich.markup import escape

from ..errors import ConfigurationError
from .canvas import Canvas
from .core import TreeChars
from .layout import LayoutEngine, TreeLayout
from .renderer import GridRenderer

logger = logging.getLogger(__name__)


class TextTreeDescriber:
    """Draws a phylogenetic tree as fixed-size text, like PHYLIP's quick view.

    Each output line is one grid row; rows that hold a leaf carry the leaf
    name after the grid. A header line of blanks followed by
    ``header_label`` precedes the grid.
    """

    def __init__(
        self,
        width: int = 80,
        height: int = 20,
        topology_only: bool = False,
        chars: Optional[Union[str, TreeChars]] = None,
        connector_style: Optional[str] = None,
        header_label: str = "Reference",
    ):
        self._check_size("width", width)
        self._check_size("height", height)
        if not isinstance(topology_only, bool):
            raise ConfigurationError("topology_only must be a boolean value.")
        if connector_style is not None and not isinstance(connector_style, str):
            raise ConfigurationError("connector_style must be a string when provided.")
        if not isinstance(header_label, str):
            raise ConfigurationError("header_label must be a string.")

        if isinstance(chars, TreeChars):
            self.chars = chars
        else:
            style_key = chars or "ascii"
            if not isinstance(style_key, str):
                raise ConfigurationError("chars must be a string or TreeChars instance.")
            try:
                self.chars = TreeChars.for_style(style_key)
            except ValueError as exc:
                raise ConfigurationError(str(exc)) from exc

        self.width = width
        self.height = height
        self.topology_only = topology_only
        self.connector_style = connector_style
        self.header_label = header_label
        self.engine = LayoutEngine()
        self.renderer = GridRenderer(self.chars, connector_style)

    @staticmethod
    def _check_size(name: str, value: Any) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(f"{name} must be an integer.")
        if value < 1:
            raise ConfigurationError(f"{name} must be at least 1, got {value}.")

    def layout(
        self,
        root: Any,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        topology_only: Optional[bool] = None,
    ) -> TreeLayout:
        width = self.width if width is None else width
        height = self.height if height is None else height
        self._check_size("width", width)
        self._check_size("height", height)
        if topology_only is None:
            topology_only = self.topology_only
        return self.engine.layout(root, width, height, topology_only)

    def paint(self, tree_layout: TreeLayout) -> Tuple[Canvas, Dict[int, str]]:
        canvas = Canvas(tree_layout.width, tree_layout.height)
        leaf_rows: Dict[int, str] = {}
        self.renderer.render(tree_layout, canvas, leaf_rows)
        if canvas.dropped:
            logger.debug("%d glyphs fell outside the grid and were clipped", canvas.dropped)
        return canvas, leaf_rows

    def lines(
        self,
        root: Any,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        topology_only: Optional[bool] = None,
        include_markup: bool = False,
    ) -> List[str]:
        if topology_only is None:
            topology_only = self.topology_only
        tree_layout = self.layout(root, width=width, height=height, topology_only=topology_only)
        logger.info(
            "Rendering tree with %d leaves on a %dx%d grid%s",
            tree_layout.leaf_count,
            tree_layout.width,
            tree_layout.height,
            " (topology only)" if topology_only else "",
        )
        canvas, leaf_rows = self.paint(tree_layout)

        header = " " * tree_layout.width + self.header_label
        output = [escape(header) if include_markup else header]
        for y, row in enumerate(canvas.rows(include_markup)):
            name = leaf_rows.get(y)
            if name is None:
                output.append(row)
            else:
                output.append(row + (escape(name) if include_markup else name))
        return output

    def describe(
        self,
        root: Any,
        sink: Optional[TextIO] = None,
        *,
        width: Optional[int] = None,
        height: Optional[int] = None,
        topology_only: Optional[bool] = None,
        include_markup: bool = False,
    ) -> None:
        """Write the rendering of ``root`` to ``sink`` (stdout by default)."""
        if sink is None:
            sink = sys.stdout
        for line in self.lines(
            root,
            width=width,
            height=height,
            topology_only=topology_only,
            include_markup=include_markup,
        ):
            sink.write(line)
            sink.write("\n")

    def render(self, root: Any, **kwargs: Any) -> str:
        buffer = io.StringIO()
        self.describe(root, buffer, **kwargs)
        return buffer.getvalue()


def describe_tree(
    root: Any,
    width: int = 80,
    height: int = 20,
    topology_only: bool = False,
    sink: Optional[TextIO] = None,
) -> None:
    TextTreeDescriber(width, height, topology_only).describe(root, sink)
