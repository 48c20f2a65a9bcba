"""Tests for canvas, text area and bar graph records."""

from __future__ import annotations

from ahc_vdsl.color import BLUE, RED
from ahc_vdsl.shapes import BarGraphItem
from ahc_vdsl.widgets import VisBarGraph, VisCanvas, VisTextArea


def test_canvas_defaults() -> None:
    assert VisCanvas().to_vis_string("m") == "$v(m) CANVAS 800 800\n"
    assert VisCanvas(600, 400.5).to_vis_string("m") == "$v(m) CANVAS 600 400.5\n"


def test_textarea_defaults_and_empty_body() -> None:
    area = VisTextArea("notes")
    assert area.to_vis_string("m") == '$v(m) TEXTAREA notes 200 #000000 #ffffff ""\n'


def test_textarea_setters_chain() -> None:
    area = (
        VisTextArea("info", "turn 3 of 10")
        .set_height(120)
        .set_text_color(RED)
        .set_fill_color("#eeeeee")
    )
    assert area.to_vis_string("m") == (
        "$v(m) TEXTAREA info 120 #FF0000 #eeeeee turn 3 of 10\n"
    )


def test_bar_graph_output() -> None:
    graph = VisBarGraph(BLUE, 0, 10, title="my bars").add_item("a", 1).add_item("b", 2.5)
    assert graph.to_vis_string("m") == (
        '$v(m) BAR_GRAPH "my bars" #0000FF 0 10\n2 a 1 b 2.5\n'
    )


def test_bar_graph_plain_title_not_quoted() -> None:
    graph = VisBarGraph(RED, -1.5, 1.5).set_title("costs")
    assert graph.to_vis_string("m").splitlines() == [
        "$v(m) BAR_GRAPH costs #FF0000 -1.5 1.5",
        "0",
    ]


def test_bar_graph_add_items_appends_in_order() -> None:
    graph = VisBarGraph(RED, 0, 1).add_item("x", 0.25)
    graph.add_items([BarGraphItem("y", 0.5), BarGraphItem("z", 1)])
    assert graph.to_vis_string("m").splitlines()[1] == "3 x 0.25 y 0.5 z 1"
