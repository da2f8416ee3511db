import math

import pytest

from levelgraph import (
    AmbiguousDirectionError,
    DistributeOptions,
    ExtrudeOptions,
    InvalidCountError,
    LevelMap,
    NoSelectionError,
    distribute,
    extrude,
    plan_extrusions,
)


def _positions(level):
    return sorted(v.position for v in level.vertices)


def test_distribute_creates_markers_of_requested_kind():
    level = LevelMap()
    level.select_edges(level.add_chain([(0, 0), (100, 0), (200, 0), (300, 0)]))

    result = distribute(level, DistributeOptions(thing_type=3004, count=3))

    assert [m.kind for m in level.markers] == [3004, 3004, 3004]
    assert [m.position for m in level.markers] == [
        pytest.approx((50.0, 0.0)),
        pytest.approx((150.0, 0.0)),
        pytest.approx((250.0, 0.0)),
    ]
    assert result.markers == level.markers
    assert result.message == "Distributed along 1 component(s)."


def test_distribute_uses_default_options():
    level = LevelMap()
    level.select_edges(level.add_chain([(0, 0), (80, 0)]))

    distribute(level)

    assert len(level.markers) == 8
    assert {m.kind for m in level.markers} == {2014}


def test_distribute_without_selected_edges_fails():
    level = LevelMap()
    chain = level.add_chain([(0, 0), (10, 0)])
    level.select_vertices([chain[0].start])

    with pytest.raises(NoSelectionError, match="No linedefs selected."):
        distribute(level)


def test_distribute_rejects_zero_count_before_touching_map():
    level = LevelMap()
    level.select_edges(level.add_chain([(0, 0), (10, 0)]))

    with pytest.raises(InvalidCountError, match="No things to distribute."):
        distribute(level, DistributeOptions(count=0))
    assert level.markers == []


def test_extrude_without_selection_fails():
    level = LevelMap()
    level.add_chain([(0, 0), (10, 0)])

    with pytest.raises(NoSelectionError):
        extrude(level)


def test_move_splits_edges_at_endpoints():
    level = LevelMap()
    (edge,) = level.add_chain([(0, 0), (100, 0)])
    a, b = edge.start, edge.end
    level.select_edges([edge])

    result = extrude(level, ExtrudeOptions(distance=10))

    assert result.message == "Extruded 1 section(s)."
    assert a.position == (0.0, 0.0)
    assert b.position == (100.0, 0.0)
    assert _positions(level) == [(0.0, -10.0), (0.0, 0.0), (100.0, -10.0), (100.0, 0.0)]
    assert len(level.edges) == 3
    near_a = level.find_vertex((0, -10))
    near_b = level.find_vertex((100, -10))
    assert level.edge_between(a, near_a) is not None
    assert level.edge_between(near_a, near_b) is not None
    assert level.edge_between(near_b, b) is not None
    assert level.edge_between(a, b) is None


def test_move_translates_inner_vertices():
    level = LevelMap()
    chain = level.add_chain([(0, 0), (50, 0), (100, 0)])
    middle = chain[0].end
    level.select_edges(chain)

    extrude(level, ExtrudeOptions(distance=10))

    assert middle.position == pytest.approx((50.0, -10.0))
    assert len(level.edges) == 4
    assert level.edge_between(level.find_vertex((0, -10)), middle) is not None
    assert level.edge_between(middle, level.find_vertex((100, -10))) is not None


def test_moving_lone_vertex_goes_perpendicular_to_neighbours():
    level = LevelMap()
    chain = level.add_chain([(-50, 0), (0, 0), (50, 0)])
    vertex = chain[0].end
    level.select_vertices([vertex])

    result = extrude(level, ExtrudeOptions(distance=10))

    assert vertex.position == pytest.approx((0.0, -10.0))
    assert result.plans[0].endpoints.synthesized
    assert len(level.vertices) == 3
    assert len(level.edges) == 2


def test_copying_lone_vertex_draws_two_edges():
    level = LevelMap()
    chain = level.add_chain([(-50, 0), (0, 0), (50, 0)])
    vertex = chain[0].end
    level.select_vertices([vertex])

    extrude(level, ExtrudeOptions(distance=10, copy=True))

    assert vertex.position == (0.0, 0.0)
    copy = level.find_vertex((0, -10))
    assert copy is not None
    assert len(level.vertices) == 4
    assert len(level.edges) == 4
    assert level.edge_between(chain[0].start, copy) is not None
    assert level.edge_between(copy, chain[1].end) is not None
    assert level.edge_between(vertex, copy) is None


def test_copy_duplicates_edges_and_joins_endpoints():
    level = LevelMap()
    (edge,) = level.add_chain([(0, 0), (100, 0)])
    level.select_edges([edge])

    extrude(level, ExtrudeOptions(distance=10, copy=True))

    assert edge.start.position == (0.0, 0.0)
    assert edge.end.position == (100.0, 0.0)
    near_a = level.find_vertex((0, -10))
    near_b = level.find_vertex((100, -10))
    duplicate = level.edge_between(near_a, near_b)
    assert duplicate is not None
    assert duplicate.start is near_a
    assert level.edge_between(edge.start, near_a).start is edge.start
    assert level.edge_between(near_b, edge.end).start is near_b
    assert len(level.edges) == 4
    assert len(level.vertices) == 4


def test_vertex_mode_move_reselects_inserted_vertices():
    level = LevelMap()
    (edge,) = level.add_chain([(0, 0), (100, 0)])
    level.select_vertices([edge.start, edge.end])

    extrude(level, ExtrudeOptions(distance=10))

    assert sorted(v.position for v in level.selected_vertices()) == [(0.0, -10.0), (100.0, -10.0)]


def test_radial_origin_vertex_is_excluded_and_used_as_centre():
    level = LevelMap()
    chain = level.add_chain([(10, 0), (0, 10), (-10, 0)])
    a, b, c = chain[0].start, chain[0].end, chain[1].end
    origin = level.add_vertex(0, 0)
    level.select_vertices([a, b, c, origin])

    result = extrude(level, ExtrudeOptions(distance=5, radial_vertex_select=True))

    assert result.radial_origin is origin
    assert result.section_count == 1
    assert origin.position == (0.0, 0.0)
    assert b.position == pytest.approx((0.0, 15.0))
    assert level.find_vertex((15, 0)) is not None
    assert level.find_vertex((-15, 0)) is not None
    assert a.position == (10.0, 0.0)
    assert c.position == (-10.0, 0.0)


def test_arc_extrusion_moves_endpoints_off_circle():
    level = LevelMap()
    (edge,) = level.add_chain([(0, 0), (100, 0)])
    a, b = edge.start, edge.end
    level.select_edges([edge])

    result = extrude(level, ExtrudeOptions(distance=10, arc_angle=90))

    model = result.plans[0].model
    created = [v for v in level.vertices if v is not a and v is not b]
    assert len(created) == 2
    for vertex in created:
        assert math.dist(vertex.position, (50.0, 50.0)) == pytest.approx(100 / math.sqrt(2) + 10)
    assert model.mode == "arc"


def test_failed_component_leaves_map_untouched():
    level = LevelMap()
    (edge,) = level.add_chain([(0, 0), (100, 0)])
    stray = level.add_vertex(500, 500)
    level.select_vertices([edge.start, edge.end, stray])

    with pytest.raises(AmbiguousDirectionError):
        extrude(level, ExtrudeOptions(distance=10))

    assert _positions(level) == [(0.0, 0.0), (100.0, 0.0), (500.0, 500.0)]
    assert level.edges == [edge]


def test_plan_extrusions_does_not_mutate():
    level = LevelMap()
    chain = level.add_chain([(0, 0), (50, 0), (100, 0)])
    level.select_edges(chain)

    result = plan_extrusions(level, ExtrudeOptions(distance=10))

    assert _positions(level) == [(0.0, 0.0), (50.0, 0.0), (100.0, 0.0)]
    (plan,) = result.plans
    assert sorted(plan.positions.values()) == [
        pytest.approx((0.0, -10.0)),
        pytest.approx((50.0, -10.0)),
        pytest.approx((100.0, -10.0)),
    ]
