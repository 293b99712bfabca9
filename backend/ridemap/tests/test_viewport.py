from backend.ridemap.layout.engine import LayoutEngine
from backend.ridemap.viewport import ViewportController

from .conftest import make_graph


def make_controller(**kwargs):
    return ViewportController(engine=LayoutEngine(seed=11), **kwargs)


def test_nothing_computed_until_graph_and_size_known():
    vc = make_controller()
    assert vc.set_route(["P0", "P1"]) is False
    assert vc.set_graph(make_graph(4)) is False
    assert vc.pass_count == 0
    assert vc.resize(400, 300) is True
    assert vc.pass_count == 1
    assert set(vc.positions) == {"P0", "P1", "P2", "P3"}


def test_one_pass_per_observed_change():
    vc = make_controller()
    vc.update(graph=make_graph(4), size=(400, 300))
    assert vc.pass_count == 1

    vc.set_route(["P0", "P2"])
    assert vc.pass_count == 2
    vc.resize(500, 300)
    assert vc.pass_count == 3
    vc.set_graph(make_graph(5))
    assert vc.pass_count == 4


def test_unchanged_inputs_do_not_recompute():
    vc = make_controller()
    vc.update(graph=make_graph(4), route=["P0", "P1"], size=(400, 300))
    assert vc.pass_count == 1

    assert vc.set_graph(make_graph(4)) is False
    assert vc.set_route(("P0", "P1")) is False
    assert vc.resize(400, 300) is False
    assert vc.update() is False
    assert vc.pass_count == 1


def test_batched_update_runs_a_single_pass():
    vc = make_controller()
    vc.update(graph=make_graph(4), size=(400, 300))
    vc.update(graph=make_graph(6), route=["P0", "P5"], size=(640, 480))
    assert vc.pass_count == 2
    assert (vc.surface.width, vc.surface.height) == (640, 480)


def test_graph_change_discards_stale_positions():
    vc = make_controller()
    vc.update(graph=make_graph(8), size=(400, 300))
    vc.set_graph(make_graph(2))
    assert set(vc.positions) == {"P0", "P1"}


def test_clearing_route_is_a_change():
    vc = make_controller()
    vc.update(graph=make_graph(3), route=["P0", "P1"], size=(400, 300))
    assert vc.set_route(None) is True
    assert vc.route == ()


def test_on_frame_callback_receives_each_pass():
    frames = []
    vc = make_controller(on_frame=lambda surface, result: frames.append(result.algorithm))
    vc.update(graph=make_graph(3), size=(400, 300))
    vc.set_graph(make_graph(25))
    assert frames == ["force", "grid"]
