"""A single renderable visualization snapshot."""

from __future__ import annotations

from typing import Any, Optional, Union

from ahc_vdsl.grid import VisGrid
from ahc_vdsl.plane import Vis2DPlane
from ahc_vdsl.protocol import header, join_tokens
from ahc_vdsl.widgets import VisBarGraph, VisCanvas, VisTextArea

VisItem = Union[VisGrid, Vis2DPlane]


class VisFrame:
    """One animation step.

    A frame may hold any number of grids and planes; they are emitted in
    the order they were added, after the optional canvas line.
    """

    def __init__(self) -> None:
        self.canvas: Optional[VisCanvas] = None
        self.items: list[VisItem] = []
        self.score = ""
        self.textareas: list[VisTextArea] = []
        self.bar_graphs: list[VisBarGraph] = []
        self.with_debug = False

    @classmethod
    def new_grid(cls, grid: VisGrid, score: Any = "") -> "VisFrame":
        return cls().add_grid(grid).set_score(score)

    @classmethod
    def new_2d_plane(cls, plane: Vis2DPlane, score: Any = "") -> "VisFrame":
        return cls().add_2d_plane(plane).set_score(score)

    def set_canvas(self, canvas: VisCanvas) -> "VisFrame":
        self.canvas = canvas
        return self

    def add_grid(self, grid: VisGrid) -> "VisFrame":
        self.items.append(grid)
        return self

    def add_2d_plane(self, plane: Vis2DPlane) -> "VisFrame":
        self.items.append(plane)
        return self

    def add_item(self, item: VisItem) -> "VisFrame":
        if not isinstance(item, (VisGrid, Vis2DPlane)):
            raise TypeError(f"unsupported frame item: {type(item).__name__}")
        self.items.append(item)
        return self

    def set_score(self, score: Any) -> "VisFrame":
        self.score = str(score)
        return self

    def add_textarea(self, textarea: VisTextArea) -> "VisFrame":
        self.textareas.append(textarea)
        return self

    def add_bar_graph(self, bar_graph: VisBarGraph) -> "VisFrame":
        self.bar_graphs.append(bar_graph)
        return self

    def enable_debug(self) -> "VisFrame":
        self.with_debug = True
        return self

    def disable_debug(self) -> "VisFrame":
        self.with_debug = False
        return self

    def to_vis_string(self, mode: str) -> str:
        parts: list[str] = []
        if self.canvas is not None:
            parts.append(self.canvas.to_vis_string(mode))
        for item in self.items:
            parts.append(item.to_vis_string(mode))
        if self.score:
            parts.append(join_tokens(header(mode, "SCORE"), self.score) + "\n")
        for textarea in self.textareas:
            parts.append(textarea.to_vis_string(mode))
        for bar_graph in self.bar_graphs:
            parts.append(bar_graph.to_vis_string(mode))
        if self.with_debug:
            parts.append(header(mode, "DEBUG") + "\n")
        parts.append(header(mode, "COMMIT") + "\n")
        return "".join(parts)
