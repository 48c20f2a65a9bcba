"""Tests for the disabled implementation and its parity with the full one."""

from __future__ import annotations

import importlib
import inspect

import pytest

from ahc_vdsl import full, noop


def test_public_names_match() -> None:
    assert sorted(full.__all__) == sorted(noop.__all__)


FULL_CLASSES = [n for n in full.__all__ if inspect.isclass(getattr(full, n))]


@pytest.mark.parametrize("name", FULL_CLASSES)
def test_public_methods_match(name: str) -> None:
    full_cls = getattr(full, name)
    noop_cls = getattr(noop, name)
    for attr in dir(full_cls):
        if attr.startswith("_"):
            continue
        static = inspect.getattr_static(full_cls, attr)
        if callable(getattr(full_cls, attr)) or isinstance(static, property):
            assert hasattr(noop_cls, attr), f"{name}.{attr} missing from noop"


def test_builder_calls_return_same_instance() -> None:
    grid = noop.VisGrid(3, 3, bounds=noop.ItemBounds(0, 0, 1, 1))
    assert grid.update_cell_color((0, 0), noop.RED).update_text((0, 0), "x") is grid
    assert grid.remove_wall_vertical((0, 0)).add_wall_horizontal((1, 1)) is grid
    plane = noop.Vis2DPlane(10, 10)
    assert plane.add_circle(noop.RED, noop.BLUE, 1, 1, 1).add_text(
        noop.BLACK, 12, 0, 0, "t"
    ) is plane
    frame = noop.VisFrame.new_grid(grid, 10).add_2d_plane(plane).enable_debug()
    assert frame.set_score(3) is frame


def test_instances_are_shared_and_stateless() -> None:
    assert noop.VisGrid(3, 3) is noop.VisGrid(100, 100)
    assert noop.VisFrame() is noop.VisFrame()
    assert noop.VisGrid(1, 1) is not noop.VisFrame()
    assert not hasattr(noop.VisGrid(1, 1), "__dict__")
    with pytest.raises(AttributeError):
        noop.VisGrid(1, 1).h = 3  # type: ignore[attr-defined]


def test_serialization_is_empty(capsys: pytest.CaptureFixture[str]) -> None:
    root = noop.VisRoot()
    root.add_frame("main", noop.VisFrame().set_score(1))
    assert root.get_frames("main") is None
    assert root.modes() == []
    assert root.render_all() == ""
    assert root.output_all() is True
    assert capsys.readouterr().err == ""
    assert noop.VisFrame().to_vis_string("m") == ""
    assert noop.VisBarGraph(noop.RED, 0, 1).to_vis_string("m") == ""


def test_file_root_writes_nothing(tmp_path) -> None:
    target = tmp_path / "vis.txt"
    noop.VisRoot.with_file(target).add_frame("m", noop.VisFrame()).output_all()
    assert not target.exists()


def test_colors_collapse() -> None:
    assert noop.Color.from_hex("#123456") is noop.RED
    assert str(noop.WHITE) == ""
    assert noop.WHITE.to_hex_string() == ""


def test_package_selects_implementation_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    import ahc_vdsl

    try:
        monkeypatch.setenv("AHC_VDSL_VIS", "0")
        importlib.reload(ahc_vdsl)
        assert ahc_vdsl.VIS_ENABLED is False
        assert ahc_vdsl.VisGrid is noop.VisGrid
        monkeypatch.setenv("AHC_VDSL_VIS", "1")
        importlib.reload(ahc_vdsl)
        assert ahc_vdsl.VIS_ENABLED is True
        assert ahc_vdsl.VisGrid is full.VisGrid
    finally:
        monkeypatch.delenv("AHC_VDSL_VIS", raising=False)
        importlib.reload(ahc_vdsl)


def test_same_call_sites_work_for_both() -> None:
    def build(api):
        grid = api.VisGrid(2, 2).update_cell_color((1, 1), api.RED)
        frame = api.VisFrame.new_grid(grid, 5).add_bar_graph(
            api.VisBarGraph(api.BLUE, 0, 1).add_item("a", 0.5)
        )
        root = api.VisRoot()
        root.add_frame("main", frame)
        return root.render_all()

    assert build(noop) == ""
    assert build(full).endswith("$v(main) COMMIT\n")
