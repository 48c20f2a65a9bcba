"""Bounded 2D plane holding grouped geometric primitives."""

from __future__ import annotations

import struct
from typing import Iterable, Optional

from ahc_vdsl.color import Color
from ahc_vdsl.protocol import header, join_tokens, quote_token
from ahc_vdsl.shapes import Circle, ItemBounds, Line, Point, Polygon, TextLabel


def _width_bits(width: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", float(width)))[0]


class Vis2DPlane:
    """A 2D canvas of size ``h`` x ``w``.

    Circles share a group when their (stroke, fill) pair matches, lines when
    their color and the bit pattern of their width match, and text labels
    when their color and font size match. Polygons are kept one per entry.
    Groups are emitted in first-insertion order.
    """

    def __init__(self, h: float, w: float, bounds: Optional[ItemBounds] = None):
        self.h = h
        self.w = w
        self.bounds = bounds
        self.circle_groups: dict[tuple[Color, Color], list[Circle]] = {}
        self.line_groups: dict[tuple[Color, int], tuple[float, list[Line]]] = {}
        self.polygons: list[Polygon] = []
        self.text_groups: dict[tuple[Color, float], list[TextLabel]] = {}

    @classmethod
    def with_bounds(cls, h: float, w: float, bounds: ItemBounds) -> "Vis2DPlane":
        return cls(h, w, bounds)

    def set_bounds(self, bounds: ItemBounds) -> "Vis2DPlane":
        self.bounds = bounds
        return self

    def add_circle(
        self, stroke: Color, fill: Color, x: float, y: float, r: float
    ) -> "Vis2DPlane":
        self.circle_groups.setdefault((stroke, fill), []).append(Circle(x, y, r))
        return self

    def add_circle_group(
        self, stroke: Color, fill: Color, circles: Iterable[Circle]
    ) -> "Vis2DPlane":
        self.circle_groups.setdefault((stroke, fill), []).extend(circles)
        return self

    def _line_group(self, color: Color, width: float) -> list[Line]:
        key = (color, _width_bits(width))
        if key not in self.line_groups:
            self.line_groups[key] = (width, [])
        return self.line_groups[key][1]

    def add_line(
        self,
        color: Color,
        width: float,
        ax: float,
        ay: float,
        bx: float,
        by: float,
    ) -> "Vis2DPlane":
        self._line_group(color, width).append(Line(ax, ay, bx, by))
        return self

    def add_line_group(
        self, color: Color, width: float, points: Iterable[Point]
    ) -> "Vis2DPlane":
        """Add segments from consecutive point pairs; an odd last point is dropped."""
        pts = list(points)
        segments = self._line_group(color, width)
        for idx in range(0, len(pts) - 1, 2):
            (ax, ay), (bx, by) = pts[idx], pts[idx + 1]
            segments.append(Line(ax, ay, bx, by))
        return self

    def add_polygon(
        self, stroke: Color, fill: Color, vertices: Iterable[Point]
    ) -> "Vis2DPlane":
        self.polygons.append(Polygon(stroke, fill, tuple(vertices)))
        return self

    def add_text(
        self, color: Color, font_size: float, x: float, y: float, text: str
    ) -> "Vis2DPlane":
        group = self.text_groups.setdefault((color, font_size), [])
        group.append(TextLabel(x, y, str(text)))
        return self

    def to_vis_string(self, mode: str) -> str:
        lines = [join_tokens(header(mode, "2D_PLANE", self.bounds), self.h, self.w)]

        if self.circle_groups:
            lines.append("CIRCLES")
            lines.append(str(len(self.circle_groups)))
            for (stroke, fill), circles in self.circle_groups.items():
                tokens: list[object] = [stroke, fill, len(circles)]
                for circle in circles:
                    tokens.extend((circle.x, circle.y, circle.r))
                lines.append(join_tokens(*tokens))

        if self.line_groups:
            lines.append("LINES")
            lines.append(str(len(self.line_groups)))
            for (color, _bits), (width, segments) in self.line_groups.items():
                tokens = [color, width, len(segments)]
                for seg in segments:
                    tokens.extend((seg.ax, seg.ay, seg.bx, seg.by))
                lines.append(join_tokens(*tokens))

        if self.polygons:
            lines.append("POLYGONS")
            lines.append(str(len(self.polygons)))
            for polygon in self.polygons:
                tokens = [polygon.stroke, polygon.fill, len(polygon.vertices)]
                for x, y in polygon.vertices:
                    tokens.extend((x, y))
                lines.append(join_tokens(*tokens))

        if self.text_groups:
            lines.append("TEXT")
            lines.append(str(len(self.text_groups)))
            for (color, font_size), labels in self.text_groups.items():
                tokens = [color, font_size, len(labels)]
                for label in labels:
                    tokens.extend((label.x, label.y, quote_token(label.text)))
                lines.append(join_tokens(*tokens))

        return "\n".join(lines) + "\n"
