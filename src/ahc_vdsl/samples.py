"""Demo frames used by the command line tool."""

from __future__ import annotations

from ahc_vdsl.color import BLACK, BLUE, Color, GREEN, RED, WHITE, YELLOW
from ahc_vdsl.frame import VisFrame
from ahc_vdsl.grid import VisGrid, VisGridConf
from ahc_vdsl.plane import Vis2DPlane
from ahc_vdsl.shapes import GridPoint, ItemBounds
from ahc_vdsl.widgets import VisBarGraph, VisCanvas, VisTextArea

SNAKE_BORDER = Color.from_hex("#333333")
SNAKE_HEAD = Color.from_hex("#FF8888")


def snake_path(size: int) -> list[GridPoint]:
    """Return the boustrophedon walk over a ``size`` x ``size`` grid."""
    path: list[GridPoint] = []
    for y in range(size):
        columns = range(size) if y % 2 == 0 else range(size - 1, -1, -1)
        path.extend((x, y) for x in columns)
    return path


def snake_frames(size: int = 5) -> list[VisFrame]:
    """One frame per step of the walk, head highlighted, trail drawn as a line."""
    conf = VisGridConf(
        border_color=SNAKE_BORDER, text_color=BLACK, default_cell_color=WHITE
    )
    path = snake_path(size)
    frames: list[VisFrame] = []
    for step, head in enumerate(path):
        grid = VisGrid(size, size, conf=conf)
        grid.update_cell_color(head, SNAKE_HEAD)
        grid.update_text(head, step)
        grid.add_line(path[: step + 1], BLUE)
        frame = VisFrame.new_grid(grid, step + 1)
        if step == len(path) - 1:
            frame.enable_debug()
        frames.append(frame)
    return frames


def shapes_frame() -> VisFrame:
    """A canvas mixing a plane, a small maze grid, a bar graph and a text area."""
    plane = (
        Vis2DPlane(100, 100, ItemBounds(0, 0, 400, 400))
        .add_circle(RED, BLUE, 50, 50, 10)
        .add_circle(RED, BLUE, 20, 80, 5)
        .add_circle(GREEN, YELLOW, 75, 25, 7.5)
        .add_line(BLACK, 1.5, 0, 0, 100, 100)
        .add_line(BLACK, 1.5, 0, 100, 100, 0)
        .add_polygon(RED, YELLOW, [(10, 10), (30, 10), (20, 30)])
        .add_text(BLACK, 12, 50, 95, "hello world")
    )
    maze = (
        VisGrid(3, 3, ItemBounds(420, 0, 780, 360))
        .remove_wall_vertical((0, 1))
        .remove_wall_horizontal((1, 1))
        .update_cell_color((2, 2), GREEN)
    )
    bars = (
        VisBarGraph(BLUE, 0, 100, title="step cost")
        .add_item("a", 30)
        .add_item("b", 72.5)
        .add_item("c", 55)
    )
    notes = VisTextArea("notes", "shapes demo").set_height(120)
    return (
        VisFrame()
        .set_canvas(VisCanvas(800, 800))
        .add_2d_plane(plane)
        .add_grid(maze)
        .set_score(158)
        .add_textarea(notes)
        .add_bar_graph(bars)
    )
