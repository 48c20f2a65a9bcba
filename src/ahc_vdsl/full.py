"""Enabled visualization: the data-carrying implementation."""

from __future__ import annotations

from ahc_vdsl.color import (
    BLACK,
    BLUE,
    CYAN,
    GRAY,
    GREEN,
    MAGENTA,
    RED,
    WHITE,
    YELLOW,
    Color,
)
from ahc_vdsl.frame import VisFrame, VisItem
from ahc_vdsl.grid import VisGrid, VisGridConf
from ahc_vdsl.plane import Vis2DPlane
from ahc_vdsl.root import OutputDestination, VisRoot
from ahc_vdsl.shapes import BarGraphItem, Circle, ItemBounds, Line, Polygon, TextLabel
from ahc_vdsl.widgets import VisBarGraph, VisCanvas, VisTextArea

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
