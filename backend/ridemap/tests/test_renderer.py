import numpy as np
import pytest

from backend.ridemap.layout.engine import LayoutEngine
from backend.ridemap.pipeline import render_frame
from backend.ridemap.render.renderer import (
    GID_PLACE, GID_PLACE_LABEL, GID_ROAD, GID_ROAD_COST, GID_ROUTE, Renderer, route_runs
)
from backend.ridemap.render.surface import RasterSurface
from backend.ridemap.schemas.graph import GraphSnapshot, NodePosition, Place

from .conftest import artists_by_gid, make_graph, make_road, polyline_points

BACKGROUND_RGBA = [10, 10, 10, 255]


def test_empty_graph_renders_background_only():
    surface = RasterSurface(400, 300)
    Renderer().render(surface, [], [], {}, [])

    pixels = surface.to_rgba()
    assert pixels.shape == (300, 400, 4)
    assert np.all(pixels == BACKGROUND_RGBA)


def test_abc_route_and_cost_labels(abc_graph, abc_positions):
    surface = RasterSurface(400, 300)
    Renderer().render(surface, abc_graph.places, abc_graph.roads, abc_positions, ["A", "B", "C"])

    routes = list(artists_by_gid(surface, GID_ROUTE))
    assert len(routes) == 1
    assert polyline_points(routes[0]) == [(100.0, 100.0), (300.0, 100.0), (300.0, 250.0)]

    roads = list(artists_by_gid(surface, GID_ROAD))
    assert len(roads) == 2
    assert routes[0].get_linewidth() > roads[0].get_linewidth()
    assert routes[0].get_color() != roads[0].get_color()

    labels = [t.get_text() for t in artists_by_gid(surface, GID_ROAD_COST)]
    assert labels == ["4", "2"]

    names = [t.get_text() for t in artists_by_gid(surface, GID_PLACE_LABEL)]
    assert names == ["A", "B", "C"]
    assert len(list(artists_by_gid(surface, GID_PLACE))) == 3


def test_layers_are_ordered(abc_graph, abc_positions):
    surface = RasterSurface(400, 300)
    Renderer().render(surface, abc_graph.places, abc_graph.roads, abc_positions, ["A", "B"])

    road = artists_by_gid(surface, GID_ROAD)[0]
    route = artists_by_gid(surface, GID_ROUTE)[0]
    place = artists_by_gid(surface, GID_PLACE)[0]
    assert road.get_zorder() < route.get_zorder() < place.get_zorder()


def test_route_pixels_are_highlighted(abc_graph, abc_positions):
    surface = RasterSurface(400, 300)
    Renderer().render(surface, abc_graph.places, abc_graph.roads, abc_positions, ["A", "B", "C"])
    pixels = surface.to_rgba()

    # a quarter of the way along A-B, clear of node discs and the cost label
    r, g, b, _ = pixels[100, 150]
    assert b > 200 and r < 100


def test_unknown_route_name_drops_only_its_segments(abc_graph, abc_positions):
    surface = RasterSurface(400, 300)
    Renderer().render(surface, abc_graph.places, abc_graph.roads, abc_positions, ["A", "X", "B", "C"])

    routes = list(artists_by_gid(surface, GID_ROUTE))
    assert len(routes) == 1
    assert polyline_points(routes[0]) == [(300.0, 100.0), (300.0, 250.0)]


def test_roads_with_missing_endpoints_are_skipped(abc_graph, abc_positions):
    roads = list(abc_graph.roads) + [make_road("C", "Ghost", 9)]
    surface = RasterSurface(400, 300)
    Renderer().render(surface, abc_graph.places, roads, abc_positions, [])

    assert len(list(artists_by_gid(surface, GID_ROAD))) == 2
    assert "9" not in [t.get_text() for t in artists_by_gid(surface, GID_ROAD_COST)]
    assert list(artists_by_gid(surface, GID_ROUTE)) == []


def test_single_entry_route_draws_nothing(abc_graph, abc_positions):
    surface = RasterSurface(400, 300)
    Renderer().render(surface, abc_graph.places, abc_graph.roads, abc_positions, ["A"])
    assert list(artists_by_gid(surface, GID_ROUTE)) == []


def test_rerender_replaces_previous_frame(abc_graph, abc_positions):
    surface = RasterSurface(400, 300)
    renderer = Renderer()
    renderer.render(surface, abc_graph.places, abc_graph.roads, abc_positions, ["A", "B", "C"])
    renderer.render(surface, abc_graph.places, abc_graph.roads, abc_positions, [])

    assert len(list(artists_by_gid(surface, GID_ROAD))) == 2
    assert list(artists_by_gid(surface, GID_ROUTE)) == []


def test_route_runs():
    positions = {n: NodePosition(i, i) for i, n in enumerate("ABCD")}
    assert route_runs([], positions) == []
    assert route_runs(["A"], positions) == []
    assert len(route_runs(["A", "B", "C"], positions)) == 1
    runs = route_runs(["A", "B", "X", "C", "D"], positions)
    assert [len(r) for r in runs] == [2, 2]
    assert route_runs(["A", "X", "B"], positions) == []


def test_large_graph_pipeline_is_pixel_identical():
    graph = make_graph(30)
    first, _ = render_frame(graph, ["P0", "P1", "P2"], 640, 480)
    second, _ = render_frame(graph, ["P0", "P1", "P2"], 640, 480)
    assert np.array_equal(first.to_rgba(), second.to_rgba())


def test_small_graph_pipeline_respects_bounds():
    graph = make_graph(5)
    for seed in range(3):
        surface, result = render_frame(graph, ["P0", "P1"], 640, 480, engine=LayoutEngine(seed=seed))
        assert result.algorithm == "force"
        for pos in result.positions.values():
            assert 40 <= pos.x <= 600
            assert 40 <= pos.y <= 440


def test_surface_png_and_resize(tmp_path):
    surface = RasterSurface(200, 100)
    Renderer().render(surface, [], [], {}, [])
    assert surface.to_png().startswith(b"\x89PNG")

    surface.resize(300, 200)
    assert surface.to_rgba().shape == (200, 300, 4)
    saved = surface.save(tmp_path / "frame.png")
    assert saved.read_bytes().startswith(b"\x89PNG")


def test_surface_rejects_empty_dimensions():
    with pytest.raises(ValueError):
        RasterSurface(0, 100)


def test_unpositioned_places_are_not_drawn(abc_graph):
    surface = RasterSurface(400, 300)
    Renderer().render(surface, abc_graph.places, abc_graph.roads, {"A": NodePosition(50, 50)}, ["A", "B"])
    assert len(list(artists_by_gid(surface, GID_PLACE))) == 1
    assert list(artists_by_gid(surface, GID_ROAD)) == []


def test_empty_snapshot_through_pipeline():
    surface, result = render_frame(GraphSnapshot(), [], 400, 300)
    assert result.positions == {}
    assert np.all(surface.to_rgba() == BACKGROUND_RGBA)


def test_dollar_signs_render_as_literal_labels():
    graph = GraphSnapshot(
        places=[Place(name="Stop $1 to $2"), Place(name="Gate $^$ East")],
        roads=[make_road("Stop $1 to $2", "Gate $^$ East", 3)],
    )
    positions = {"Stop $1 to $2": NodePosition(100.0, 100.0), "Gate $^$ East": NodePosition(300.0, 200.0)}
    surface = RasterSurface(400, 300)
    Renderer().render(surface, graph.places, graph.roads, positions, [])

    names = [t.get_text() for t in artists_by_gid(surface, GID_PLACE_LABEL)]
    assert names == ["Stop $1 to $2", "Gate $^$ East"]
    assert surface.to_png().startswith(b"\x89PNG")
    assert surface.to_rgba().shape == (300, 400, 4)
