from dataclasses import dataclass

from wcwidth import wcswidth


@dataclass
class TreeChars:

    horizontal: str = "-"
    vertical: str = "|"

    def __post_init__(self) -> None:
        # every connector must fill exactly one grid cell
        for role, glyph in (("horizontal", self.horizontal), ("vertical", self.vertical)):
            if not isinstance(glyph, str) or len(glyph) != 1 or wcswidth(glyph) != 1:
                raise ValueError(f"{role} connector must be a single-column glyph, got {glyph!r}")

    @classmethod
    def for_style(cls, style: str) -> "TreeChars":
        key = style.lower().strip()
        if key in {"ascii", "plain"}:
            return cls()
        if key in {"line", "box", "square"}:
            return cls(horizontal="─", vertical="│")
        if key in {"heavy", "bold"}:
            return cls(horizontal="━", vertical="┃")
        raise ValueError(f"Unknown tree style: {style}")


@dataclass
class LayoutRecord:
    """Grid coordinates of one node for a single render.

    ``x_parent``/``x_self`` are the columns where the node's branch starts
    and ends; ``y_parent``/``y_self`` are the row the branch is drawn on.
    """

    x_parent: float = 0.0
    x_self: float = 0.0
    y_parent: float = 0.0
    y_self: float = 0.0
