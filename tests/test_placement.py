import pytest

from levelgraph import (
    DegenerateGeometryError,
    GraphView,
    InvalidCountError,
    LevelMap,
    decompose_edges,
    distance_plan,
    plan_placements,
)


def _plan(level, count):
    view = GraphView.from_edge_selection(level)
    return plan_placements(view, decompose_edges(view), count)


def test_distance_plan_uses_bucket_midpoints():
    assert distance_plan(300.0, 3) == pytest.approx([50.0, 150.0, 250.0])
    assert distance_plan(10.0, 1) == pytest.approx([5.0])


@pytest.mark.parametrize("count", [0, -2])
def test_distance_plan_rejects_non_positive_count(count):
    with pytest.raises(InvalidCountError):
        distance_plan(100.0, count)


def test_distance_plan_rejects_zero_length():
    with pytest.raises(DegenerateGeometryError):
        distance_plan(0.0, 3)


def test_three_markers_on_straight_chain():
    level = LevelMap()
    chain = level.add_chain([(0, 0), (100, 0), (200, 0), (300, 0)])
    level.select_edges(chain)

    placements = _plan(level, 3)

    assert [p.position for p in placements] == [
        pytest.approx((50.0, 0.0)),
        pytest.approx((150.0, 0.0)),
        pytest.approx((250.0, 0.0)),
    ]
    assert [p.edge for p in placements] == chain
    assert [p.t for p in placements] == pytest.approx([0.5, 0.5, 0.5])


def test_walk_direction_follows_path_start():
    level = LevelMap()
    chain = level.add_chain([(0, 0), (100, 0), (200, 0), (300, 0)])
    level.select_edges(list(reversed(chain)))

    placements = _plan(level, 3)

    assert [p.position for p in placements] == [
        pytest.approx((250.0, 0.0)),
        pytest.approx((150.0, 0.0)),
        pytest.approx((50.0, 0.0)),
    ]


def test_running_length_carries_across_components():
    level = LevelMap()
    lower = level.add_chain([(0, 0), (100, 0)])
    upper = level.add_chain([(0, 10), (100, 10)])
    level.select_edges(lower + upper)

    placements = _plan(level, 4)

    assert [p.component for p in placements] == [0, 0, 1, 1]
    assert [p.distance for p in placements] == pytest.approx([25.0, 75.0, 125.0, 175.0])
    assert [p.position for p in placements] == [
        pytest.approx((25.0, 0.0)),
        pytest.approx((75.0, 0.0)),
        pytest.approx((25.0, 10.0)),
        pytest.approx((75.0, 10.0)),
    ]


def test_closed_loop_gets_one_marker_per_side():
    level = LevelMap()
    square = level.add_chain([(0, 0), (100, 0), (100, 100), (0, 100)], closed=True)
    level.select_edges(square)

    placements = _plan(level, 4)

    assert [p.position for p in placements] == [
        pytest.approx((50.0, 0.0)),
        pytest.approx((100.0, 50.0)),
        pytest.approx((50.0, 100.0)),
        pytest.approx((0.0, 50.0)),
    ]


def test_branching_component_places_on_every_spoke():
    level = LevelMap()
    center = level.add_vertex(0, 0)
    spokes = [level.add_edge(center, level.add_vertex(x, y)) for x, y in [(10, 0), (0, 10), (-10, 0)]]
    level.select_edges(spokes)

    placements = _plan(level, 3)

    assert [p.edge for p in placements] == spokes
    assert [p.position for p in placements] == [
        pytest.approx((5.0, 0.0)),
        pytest.approx((0.0, 5.0)),
        pytest.approx((-5.0, 0.0)),
    ]


def test_marker_on_shared_vertex_lands_on_earlier_edge():
    level = LevelMap()
    chain = level.add_chain([(0, 0), (50, 0), (100, 0)])
    level.select_edges(chain)

    (placement,) = _plan(level, 1)

    assert placement.edge is chain[0]
    assert placement.t == pytest.approx(1.0)
    assert placement.position == pytest.approx((50.0, 0.0))


def test_placement_is_deterministic():
    def build():
        level = LevelMap()
        center = level.add_vertex(0, 0)
        spokes = [level.add_edge(level.add_vertex(x, y), center) for x, y in [(30, 0), (0, 20), (-5, -5)]]
        level.select_edges([spokes[1], spokes[0], spokes[2]])
        return level

    first = [p.position for p in _plan(build(), 7)]
    second = [p.position for p in _plan(build(), 7)]

    assert first == second
    assert len(first) == 7


def test_zero_length_selection_is_rejected():
    level = LevelMap()
    a = level.add_vertex(5, 5)
    b = level.add_vertex(5, 5)
    level.select_edges([level.add_edge(a, b)])

    with pytest.raises(DegenerateGeometryError):
        _plan(level, 2)


def test_zero_length_edge_inside_chain_gets_no_marker():
    level = LevelMap()
    chain = level.add_chain([(0, 0), (10, 0), (10, 0), (20, 0)])
    level.select_edges(chain)

    placements = _plan(level, 2)

    assert chain[1] not in [p.edge for p in placements]
    assert [p.position for p in placements] == [pytest.approx((5.0, 0.0)), pytest.approx((15.0, 0.0))]
