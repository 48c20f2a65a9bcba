"""Cell grid with per-cell overrides, path lines and sparse walls."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from ahc_vdsl.color import BLACK, WHITE, Color
from ahc_vdsl.protocol import EMPTY_TOKEN, header, join_tokens
from ahc_vdsl.shapes import GridPoint, ItemBounds


@dataclass(frozen=True)
class VisGridConf:
    border_color: Color = BLACK
    text_color: Color = BLACK
    default_cell_color: Color = WHITE


class VisGrid:
    """An ``h`` x ``w`` grid addressed by ``(x, y)`` = (column, row).

    Horizontal walls are keyed ``(column, grid line)``. Vertical walls are
    keyed ``(row, grid line)``, the grid line running over ``0..=w``.

    Every wall is present unless removed; only removals are tracked. The
    dense wall matrices exist only inside :meth:`to_vis_string`.
    """

    def __init__(
        self,
        h: int,
        w: int,
        bounds: Optional[ItemBounds] = None,
        conf: Optional[VisGridConf] = None,
    ):
        self.h = h
        self.w = w
        self.bounds = bounds
        self.conf = conf if conf is not None else VisGridConf()
        self.cell_colors: list[list[Color]] = [
            [self.conf.default_cell_color] * w for _ in range(h)
        ]
        self.cell_texts: list[list[str]] = [[""] * w for _ in range(h)]
        self.no_wall_vertical: set[GridPoint] = set()
        self.no_wall_horizontal: set[GridPoint] = set()
        self.lines: list[tuple[list[GridPoint], Color]] = []

    @classmethod
    def with_bounds(cls, h: int, w: int, bounds: ItemBounds) -> "VisGrid":
        return cls(h, w, bounds)

    @classmethod
    def from_cells(cls, rows: Sequence[Sequence[Any]]) -> "VisGrid":
        """Build a grid sized to ``rows`` with each value as cell text."""
        h = len(rows)
        w = len(rows[0]) if h > 0 else 0
        grid = cls(h, w)
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                grid.cell_texts[y][x] = str(value)
        return grid

    def set_bounds(self, bounds: ItemBounds) -> "VisGrid":
        self.bounds = bounds
        return self

    def update_cell_color(self, p: GridPoint, color: Color) -> "VisGrid":
        x, y = p
        self.cell_colors[y][x] = color
        return self

    def update_text(self, p: GridPoint, text: Any) -> "VisGrid":
        x, y = p
        self.cell_texts[y][x] = str(text)
        return self

    def add_line(self, points: Iterable[GridPoint], color: Color) -> "VisGrid":
        self.lines.append(([(x, y) for x, y in points], color))
        return self

    def remove_wall_vertical(self, p: GridPoint) -> "VisGrid":
        x, y = p
        self.no_wall_vertical.add((x, y))
        return self

    def add_wall_vertical(self, p: GridPoint) -> "VisGrid":
        x, y = p
        self.no_wall_vertical.discard((x, y))
        return self

    def remove_wall_horizontal(self, p: GridPoint) -> "VisGrid":
        x, y = p
        self.no_wall_horizontal.add((x, y))
        return self

    def add_wall_horizontal(self, p: GridPoint) -> "VisGrid":
        x, y = p
        self.no_wall_horizontal.discard((x, y))
        return self

    def _header_line(self, mode: str) -> str:
        return join_tokens(
            header(mode, "GRID", self.bounds),
            self.h,
            self.w,
            self.conf.border_color,
            self.conf.text_color,
            self.conf.default_cell_color,
        )

    def _cell_color_lines(self) -> list[str]:
        default = self.conf.default_cell_color
        positions: dict[Color, list[GridPoint]] = {}
        for y, row in enumerate(self.cell_colors):
            for x, color in enumerate(row):
                if color == default:
                    continue
                positions.setdefault(color, []).append((x, y))
        lines = ["CELL_COLORS_POS", str(len(positions))]
        for color, cells in positions.items():
            tokens: list[object] = [color, len(cells)]
            for x, y in cells:
                tokens.extend((x, y))
            lines.append(join_tokens(*tokens))
        return lines

    def _cell_text_lines(self) -> list[str]:
        if all(not text for row in self.cell_texts for text in row):
            return []
        lines = ["CELL_TEXT"]
        for row in self.cell_texts:
            last = max((x for x, text in enumerate(row) if text), default=-1)
            lines.append(
                " ".join(text if text else EMPTY_TOKEN for text in row[: last + 1])
            )
        return lines

    def _path_lines(self) -> list[str]:
        lines = ["LINES", str(len(self.lines))]
        for points, color in self.lines:
            tokens: list[object] = [color, len(points)]
            for x, y in points:
                tokens.extend((x, y))
            lines.append(join_tokens(*tokens))
        return lines

    def _wall_lines(self) -> list[str]:
        lines: list[str] = []
        if self.no_wall_horizontal:
            lines.append("WALL_HORIZONTAL")
            for y in range(self.h + 1):
                lines.append(
                    "".join(
                        "N" if (x, y) in self.no_wall_horizontal else "Y"
                        for x in range(self.w)
                    )
                )
        if self.no_wall_vertical:
            lines.append("WALL_VERTICAL")
            for y in range(self.h):
                lines.append(
                    "".join(
                        "N" if (y, line) in self.no_wall_vertical else "Y"
                        for line in range(self.w + 1)
                    )
                )
        return lines

    def to_vis_string(self, mode: str) -> str:
        lines = [self._header_line(mode)]
        lines.extend(self._cell_color_lines())
        lines.extend(self._cell_text_lines())
        lines.extend(self._path_lines())
        lines.extend(self._wall_lines())
        return "\n".join(lines) + "\n"
