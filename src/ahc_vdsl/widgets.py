"""Auxiliary frame records: canvas, text areas and bar graphs."""

from __future__ import annotations

from typing import Iterable, Union

from ahc_vdsl.color import Color
from ahc_vdsl.protocol import EMPTY_TOKEN, header, join_tokens, quote_token
from ahc_vdsl.shapes import BarGraphItem

DEFAULT_CANVAS_SIZE = 800.0
DEFAULT_TEXTAREA_HEIGHT = 200
DEFAULT_TEXT_COLOR = "#000000"
DEFAULT_FILL_COLOR = "#ffffff"


class VisCanvas:
    def __init__(self, h: float = DEFAULT_CANVAS_SIZE, w: float = DEFAULT_CANVAS_SIZE):
        self.h = h
        self.w = w

    def to_vis_string(self, mode: str) -> str:
        return join_tokens(header(mode, "CANVAS"), self.h, self.w) + "\n"


class VisTextArea:
    """Titled free-text panel shown next to the stage."""

    def __init__(self, title: str, text: str = ""):
        self.title = title
        self.text = text
        self.height = DEFAULT_TEXTAREA_HEIGHT
        self.text_color = DEFAULT_TEXT_COLOR
        self.fill_color = DEFAULT_FILL_COLOR

    def set_height(self, height: int) -> "VisTextArea":
        self.height = height
        return self

    def set_text_color(self, color: Union[Color, str]) -> "VisTextArea":
        self.text_color = str(color)
        return self

    def set_fill_color(self, color: Union[Color, str]) -> "VisTextArea":
        self.fill_color = str(color)
        return self

    def to_vis_string(self, mode: str) -> str:
        return (
            join_tokens(
                header(mode, "TEXTAREA"),
                self.title,
                self.height,
                self.text_color,
                self.fill_color,
                self.text if self.text else EMPTY_TOKEN,
            )
            + "\n"
        )


class VisBarGraph:
    """Labelled bars drawn against a fixed ``[y_min, y_max]`` axis."""

    def __init__(self, fill_color: Color, y_min: float, y_max: float, title: str = ""):
        self.title = title
        self.fill_color = fill_color
        self.y_min = y_min
        self.y_max = y_max
        self.items: list[BarGraphItem] = []

    def set_title(self, title: str) -> "VisBarGraph":
        self.title = title
        return self

    def add_item(self, label: str, value: float) -> "VisBarGraph":
        self.items.append(BarGraphItem(str(label), value))
        return self

    def add_items(self, items: Iterable[BarGraphItem]) -> "VisBarGraph":
        self.items.extend(items)
        return self

    def to_vis_string(self, mode: str) -> str:
        head = join_tokens(
            header(mode, "BAR_GRAPH"),
            quote_token(self.title),
            self.fill_color,
            self.y_min,
            self.y_max,
        )
        tokens: list[object] = [len(self.items)]
        for item in self.items:
            tokens.extend((item.label, item.value))
        return f"{head}\n{join_tokens(*tokens)}\n"
