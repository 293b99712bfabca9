import pytest

from backend.ridemap.layout.grid_layout import GridFallbackLayout
from backend.ridemap.layout.metrics import node_overlaps, positions_in_bounds

from .conftest import make_places


def test_grid_shape():
    assert GridFallbackLayout.grid_shape(25) == (5, 5)
    assert GridFallbackLayout.grid_shape(21) == (5, 5)
    assert GridFallbackLayout.grid_shape(30) == (5, 6)
    assert GridFallbackLayout.grid_shape(0) == (0, 0)


def test_25_places_form_centred_5x5_grid():
    places = make_places(25)
    positions = GridFallbackLayout().layout(places, 1000, 800)

    # cells are 920/5 x 720/5
    assert positions["P0"].x == pytest.approx(40 + 92)
    assert positions["P0"].y == pytest.approx(40 + 72)
    assert positions["P6"].x == pytest.approx(40 + 184 + 92)
    assert positions["P6"].y == pytest.approx(40 + 144 + 72)
    assert positions["P24"].x == pytest.approx(868)
    assert positions["P24"].y == pytest.approx(688)

    xs = sorted({round(p.x, 6) for p in positions.values()})
    ys = sorted({round(p.y, 6) for p in positions.values()})
    assert len(xs) == 5 and len(ys) == 5
    assert node_overlaps(positions, 12) == []


def test_row_major_order():
    positions = GridFallbackLayout().layout(make_places(7), 600, 600)
    # 3 columns: P3 starts the second row
    assert positions["P3"].x == pytest.approx(positions["P0"].x)
    assert positions["P3"].y > positions["P2"].y
    assert positions["P1"].y == pytest.approx(positions["P0"].y)


def test_grid_is_deterministic():
    places = make_places(40)
    grid = GridFallbackLayout()
    assert grid.layout(places, 1280, 800) == grid.layout(places, 1280, 800)


def test_grid_positions_are_inside_padding():
    positions = GridFallbackLayout().layout(make_places(57), 1280, 800)
    assert len(positions) == 57
    assert positions_in_bounds(positions, 1280, 800, 40)


def test_accepts_bare_names():
    positions = GridFallbackLayout().layout(["x", "y", "z"], 300, 300)
    assert list(positions) == ["x", "y", "z"]
