import pytest
from backend.ridemap.schemas.graph import GraphSnapshot, NodePosition, Place, Road


def make_places(n, prefix="P"):
    return [Place(name=f"{prefix}{i}", lat=0.0, lng=0.0) for i in range(n)]


def make_road(a, b, cost):
    return Road(**{"from": a, "to": b, "cost": cost})


def make_graph(n, ring=True):
    places = make_places(n)
    roads = []
    if ring and n > 1:
        roads = [make_road(f"P{i}", f"P{(i + 1) % n}", i + 1) for i in range(n)]
    return GraphSnapshot(places=places, roads=roads)


@pytest.fixture
def abc_graph():
    # A-B (4), B-C (2)
    return GraphSnapshot(
        places=[Place(name="A"), Place(name="B"), Place(name="C")],
        roads=[make_road("A", "B", 4), make_road("B", "C", 2)],
    )


@pytest.fixture
def abc_positions():
    return {
        "A": NodePosition(100.0, 100.0),
        "B": NodePosition(300.0, 100.0),
        "C": NodePosition(300.0, 250.0),
    }


def artists_by_gid(surface, gid):
    """Drawn lines, patches and texts tagged with the given group id, in draw order"""
    return [a for a in surface.ax.get_children() if a.get_gid() == gid]


def polyline_points(artist):
    return list(zip(artist.get_xdata(), artist.get_ydata()))
