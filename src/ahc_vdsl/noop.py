"""Disabled visualization: the public API with nothing behind it.

Every type is a slot-less singleton, every builder call returns ``self``
and every serializer returns an empty string, so call sites written against
:mod:`ahc_vdsl.full` run unchanged at (almost) no cost.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Union


class _Noop:
    __slots__ = ()
    _instance: Any = None

    def __new__(cls, *_args: Any, **_kwargs: Any):
        instance = cls.__dict__.get("_instance")
        if instance is None:
            instance = super().__new__(cls)
            cls._instance = instance
        return instance

    def __init__(self, *_args: Any, **_kwargs: Any) -> None:
        pass

    def to_vis_string(self, mode: str) -> str:
        return ""


class Color(_Noop):
    __slots__ = ()

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        return cls()

    def to_hex_string(self) -> str:
        return ""

    def __str__(self) -> str:
        return ""


WHITE = BLACK = GRAY = RED = BLUE = GREEN = YELLOW = CYAN = MAGENTA = Color()


class ItemBounds(_Noop):
    __slots__ = ()


class Circle(_Noop):
    __slots__ = ()


class Line(_Noop):
    __slots__ = ()


class Polygon(_Noop):
    __slots__ = ()


class TextLabel(_Noop):
    __slots__ = ()


class BarGraphItem(_Noop):
    __slots__ = ()


class VisGridConf(_Noop):
    __slots__ = ()


class VisCanvas(_Noop):
    __slots__ = ()


class VisTextArea(_Noop):
    __slots__ = ()

    def set_height(self, height: int) -> "VisTextArea":
        return self

    def set_text_color(self, color: Any) -> "VisTextArea":
        return self

    def set_fill_color(self, color: Any) -> "VisTextArea":
        return self


class VisBarGraph(_Noop):
    __slots__ = ()

    def set_title(self, title: str) -> "VisBarGraph":
        return self

    def add_item(self, label: str, value: float) -> "VisBarGraph":
        return self

    def add_items(self, items: Any) -> "VisBarGraph":
        return self


class Vis2DPlane(_Noop):
    __slots__ = ()

    @classmethod
    def with_bounds(cls, h: float, w: float, bounds: Any) -> "Vis2DPlane":
        return cls()

    def set_bounds(self, bounds: Any) -> "Vis2DPlane":
        return self

    def add_circle(
        self, stroke: Any, fill: Any, x: float, y: float, r: float
    ) -> "Vis2DPlane":
        return self

    def add_circle_group(self, stroke: Any, fill: Any, circles: Any) -> "Vis2DPlane":
        return self

    def add_line(
        self,
        color: Any,
        width: float,
        ax: float,
        ay: float,
        bx: float,
        by: float,
    ) -> "Vis2DPlane":
        return self

    def add_line_group(self, color: Any, width: float, points: Any) -> "Vis2DPlane":
        return self

    def add_polygon(self, stroke: Any, fill: Any, vertices: Any) -> "Vis2DPlane":
        return self

    def add_text(
        self, color: Any, font_size: float, x: float, y: float, text: str
    ) -> "Vis2DPlane":
        return self


class VisGrid(_Noop):
    __slots__ = ()

    @classmethod
    def with_bounds(cls, h: int, w: int, bounds: Any) -> "VisGrid":
        return cls()

    @classmethod
    def from_cells(cls, rows: Any) -> "VisGrid":
        return cls()

    def set_bounds(self, bounds: Any) -> "VisGrid":
        return self

    def update_cell_color(self, p: Any, color: Any) -> "VisGrid":
        return self

    def update_text(self, p: Any, text: Any) -> "VisGrid":
        return self

    def add_line(self, points: Any, color: Any) -> "VisGrid":
        return self

    def remove_wall_vertical(self, p: Any) -> "VisGrid":
        return self

    def add_wall_vertical(self, p: Any) -> "VisGrid":
        return self

    def remove_wall_horizontal(self, p: Any) -> "VisGrid":
        return self

    def add_wall_horizontal(self, p: Any) -> "VisGrid":
        return self


VisItem = Union[VisGrid, Vis2DPlane]


class VisFrame(_Noop):
    __slots__ = ()

    @classmethod
    def new_grid(cls, grid: Any, score: Any = "") -> "VisFrame":
        return cls()

    @classmethod
    def new_2d_plane(cls, plane: Any, score: Any = "") -> "VisFrame":
        return cls()

    def set_canvas(self, canvas: Any) -> "VisFrame":
        return self

    def add_grid(self, grid: Any) -> "VisFrame":
        return self

    def add_2d_plane(self, plane: Any) -> "VisFrame":
        return self

    def add_item(self, item: Any) -> "VisFrame":
        return self

    def set_score(self, score: Any) -> "VisFrame":
        return self

    def add_textarea(self, textarea: Any) -> "VisFrame":
        return self

    def add_bar_graph(self, bar_graph: Any) -> "VisFrame":
        return self

    def enable_debug(self) -> "VisFrame":
        return self

    def disable_debug(self) -> "VisFrame":
        return self


class OutputDestination(Enum):
    STDERR = "stderr"
    FILE = "file"


class VisRoot(_Noop):
    __slots__ = ()

    @classmethod
    def with_file(cls, path: Any) -> "VisRoot":
        return cls()

    @classmethod
    def from_config(cls, cfg: Any) -> "VisRoot":
        return cls()

    @property
    def output_destination(self) -> OutputDestination:
        return OutputDestination.STDERR

    def add_frame(self, mode: str, frame: Any) -> "VisRoot":
        return self

    def add_frames(self, mode: str, frames: Any) -> "VisRoot":
        return self

    def get_frames(self, mode: str) -> Optional[list[Any]]:
        return None

    def modes(self) -> list[str]:
        return []

    def render_all(self) -> str:
        return ""

    def output_all(self) -> bool:
        return True


__all__ = [
    "BLACK",
    "BLUE",
    "BarGraphItem",
    "CYAN",
    "Circle",
    "Color",
    "GRAY",
    "GREEN",
    "ItemBounds",
    "Line",
    "MAGENTA",
    "OutputDestination",
    "Polygon",
    "RED",
    "TextLabel",
    "Vis2DPlane",
    "VisBarGraph",
    "VisCanvas",
    "VisFrame",
    "VisGrid",
    "VisGridConf",
    "VisItem",
    "VisRoot",
    "VisTextArea",
    "WHITE",
    "YELLOW",
]
