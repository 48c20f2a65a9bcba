"""Plain value types for drawable primitives."""

from __future__ import annotations

from dataclasses import dataclass, field

from ahc_vdsl.color import Color

Point = tuple[float, float]
GridPoint = tuple[int, int]


@dataclass(frozen=True)
class ItemBounds:
    """Placement rectangle of an item inside the canvas. Not validated."""

    left: float
    top: float
    right: float
    bottom: float


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    r: float


@dataclass(frozen=True)
class Line:
    ax: float
    ay: float
    bx: float
    by: float


@dataclass(frozen=True)
class Polygon:
    stroke: Color
    fill: Color
    vertices: tuple[Point, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TextLabel:
    x: float
    y: float
    text: str


@dataclass(frozen=True)
class BarGraphItem:
    label: str
    value: float
