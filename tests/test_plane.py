"""Tests for the 2D plane builder."""

from __future__ import annotations

from ahc_vdsl.color import BLACK, BLUE, GREEN, RED, YELLOW
from ahc_vdsl.plane import Vis2DPlane
from ahc_vdsl.shapes import Circle, ItemBounds


def _section(output: str, name: str) -> list[str]:
    lines = output.splitlines()
    start = lines.index(name)
    count = int(lines[start + 1])
    return lines[start + 2 : start + 2 + count]


def test_empty_plane_is_header_only() -> None:
    assert Vis2DPlane(100.0, 100.0).to_vis_string("test") == (
        "$v(test) 2D_PLANE 100 100\n"
    )


def test_header_carries_bounds() -> None:
    plane = Vis2DPlane(10, 20, ItemBounds(0, 0, 1.5, 2))
    assert plane.to_vis_string("m").splitlines()[0] == "$v(m) 2D_PLANE(0, 0, 1.5, 2) 10 20"


def test_set_bounds_returns_plane() -> None:
    plane = Vis2DPlane(1, 1)
    assert plane.set_bounds(ItemBounds(1, 2, 3, 4)) is plane
    assert plane.to_vis_string("m").startswith("$v(m) 2D_PLANE(1, 2, 3, 4) 1 1")


def test_circles_grouped_by_color_pair() -> None:
    plane = (
        Vis2DPlane(100, 100)
        .add_circle(RED, BLUE, 1, 1, 1)
        .add_circle(GREEN, YELLOW, 4, 4, 4)
        .add_circle(RED, BLUE, 2, 2, 2)
        .add_circle(RED, BLUE, 3, 3, 3)
    )
    output = plane.to_vis_string("m")
    assert _section(output, "CIRCLES") == [
        "#FF0000 #0000FF 3 1 1 1 2 2 2 3 3 3",
        "#00FF00 #FFFF00 1 4 4 4",
    ]


def test_swapped_stroke_and_fill_is_a_new_group() -> None:
    plane = Vis2DPlane(10, 10).add_circle(RED, BLUE, 0, 0, 1).add_circle(BLUE, RED, 0, 0, 1)
    assert len(_section(plane.to_vis_string("m"), "CIRCLES")) == 2


def test_add_circle_group_extends_existing_group() -> None:
    plane = Vis2DPlane(10, 10).add_circle(RED, BLUE, 0, 0, 1)
    plane.add_circle_group(RED, BLUE, [Circle(1, 1, 0.5), Circle(2, 2, 0.25)])
    assert _section(plane.to_vis_string("m"), "CIRCLES") == [
        "#FF0000 #0000FF 3 0 0 1 1 1 0.5 2 2 0.25"
    ]


def test_lines_grouped_by_color_and_width() -> None:
    plane = (
        Vis2DPlane(100, 100)
        .add_line(GREEN, 1.0, 0, 0, 100, 100)
        .add_line(GREEN, 2.5, 0, 0, 1, 1)
        .add_line(GREEN, 1.0, 5, 5, 6, 6)
    )
    assert _section(plane.to_vis_string("m"), "LINES") == [
        "#00FF00 1 2 0 0 100 100 5 5 6 6",
        "#00FF00 2.5 1 0 0 1 1",
    ]


def test_line_width_groups_use_bit_pattern() -> None:
    plane = Vis2DPlane(10, 10).add_line(BLACK, 0.0, 0, 0, 1, 1).add_line(
        BLACK, -0.0, 0, 0, 1, 1
    )
    assert _section(plane.to_vis_string("m"), "LINES") == [
        "#000000 0 1 0 0 1 1",
        "#000000 -0 1 0 0 1 1",
    ]


def test_int_and_float_width_share_group() -> None:
    plane = Vis2DPlane(10, 10).add_line(BLACK, 2, 0, 0, 1, 1).add_line(
        BLACK, 2.0, 1, 1, 2, 2
    )
    assert len(_section(plane.to_vis_string("m"), "LINES")) == 1


def test_add_line_group_pairs_points_and_drops_odd_tail() -> None:
    plane = Vis2DPlane(10, 10).add_line_group(RED, 2, [(0, 0), (1, 1), (2, 2)])
    assert _section(plane.to_vis_string("m"), "LINES") == ["#FF0000 2 1 0 0 1 1"]


def test_polygons_are_never_grouped() -> None:
    triangle = [(10, 10), (30, 10), (20, 30)]
    plane = (
        Vis2DPlane(100, 100)
        .add_polygon(RED, YELLOW, triangle)
        .add_polygon(RED, YELLOW, [(0, 0), (1, 0), (1, 1), (0, 1)])
    )
    assert _section(plane.to_vis_string("m"), "POLYGONS") == [
        "#FF0000 #FFFF00 3 10 10 30 10 20 30",
        "#FF0000 #FFFF00 4 0 0 1 0 1 1 0 1",
    ]


def test_text_grouped_and_quoted_when_spaced() -> None:
    plane = (
        Vis2DPlane(100, 100)
        .add_text(BLACK, 12, 1, 2, "hello world")
        .add_text(BLACK, 12, 3, 4, "hi")
        .add_text(RED, 12, 5, 6, "x")
    )
    assert _section(plane.to_vis_string("m"), "TEXT") == [
        '#000000 12 2 1 2 "hello world" 3 4 hi',
        "#FF0000 12 1 5 6 x",
    ]


def test_multiline_text_stays_on_one_line() -> None:
    plane = Vis2DPlane(100, 100).add_text(BLACK, 12, 1, 2, "first\nsecond")
    assert _section(plane.to_vis_string("m"), "TEXT") == [
        '#000000 12 1 1 2 "first second"',
    ]


def test_sections_emitted_in_fixed_order() -> None:
    plane = (
        Vis2DPlane(10, 10)
        .add_text(BLACK, 8, 0, 0, "t")
        .add_polygon(RED, RED, [(0, 0)])
        .add_line(RED, 1, 0, 0, 1, 1)
        .add_circle(RED, RED, 0, 0, 1)
    )
    lines = plane.to_vis_string("m").splitlines()
    order = [lines.index(name) for name in ("CIRCLES", "LINES", "POLYGONS", "TEXT")]
    assert order == sorted(order)


def test_empty_sections_are_omitted() -> None:
    output = Vis2DPlane(10, 10).add_circle(RED, BLUE, 0, 0, 1).to_vis_string("m")
    assert "CIRCLES" in output
    for name in ("LINES", "POLYGONS", "TEXT"):
        assert name not in output.splitlines()
