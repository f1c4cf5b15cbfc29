import pytest

from cseskit.graphs import (
    UNREACHABLE,
    ImpossibleError,
    UnionFind,
    building_roads,
    can_finish,
    course_schedule,
    flight_routes_check,
    game_routes,
    planets_queries,
    round_trip,
    shortest_paths_all_pairs,
    shortest_routes,
)


def _reachable(n, edges, start):
    adj = {node: [] for node in range(1, n + 1)}
    for a, b in edges:
        adj[a].append(b)
    seen = {start}
    stack = [start]
    while stack:
        for nxt in adj[stack.pop()]:
            if nxt not in seen:
                seen.add(nxt)
                stack.append(nxt)
    return seen


def test_union_find_merges_sets():
    sets = UnionFind(5)
    sets.union(0, 1)
    sets.union(3, 4)
    sets.union(1, 4)
    assert sets.find(0) == sets.find(3)
    assert sets.find(2) != sets.find(0)
    assert sets.find(2) == 2


def test_union_find_is_idempotent():
    sets = UnionFind(3)
    sets.union(0, 1)
    root = sets.find(0)
    sets.union(1, 0)
    assert sets.find(1) == root


def test_can_finish():
    assert can_finish(2, [[1, 0]]) is True
    assert can_finish(2, [[1, 0], [0, 1]]) is False
    assert can_finish(3, []) is True


def test_course_schedule_respects_edges():
    edges = [(1, 2), (3, 1), (4, 5), (2, 5)]
    order = course_schedule(5, edges)
    assert sorted(order) == [1, 2, 3, 4, 5]
    position = {node: index for index, node in enumerate(order)}
    for a, b in edges:
        assert position[a] < position[b]


def test_course_schedule_cycle_raises():
    with pytest.raises(ImpossibleError):
        course_schedule(3, [(1, 2), (2, 3), (3, 1)])


def test_course_schedule_rejects_bad_node():
    with pytest.raises(ValueError):
        course_schedule(2, [(1, 3)])


def test_flight_routes_strongly_connected():
    assert flight_routes_check(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_flight_routes_single_edge():
    assert flight_routes_check(2, [(1, 2)]) == (2, 1)


def test_flight_routes_counterexample_is_unreachable():
    edges = [(1, 2), (2, 3), (3, 2), (4, 1)]
    result = flight_routes_check(4, edges)
    assert result is not None
    source, target = result
    assert target not in _reachable(4, edges, source)


def test_building_roads_connects_everything():
    edges = [(1, 2), (3, 4)]
    roads = building_roads(6, edges)
    assert roads == [(1, 3), (3, 5), (5, 6)]
    sets = UnionFind(7)
    for a, b in edges + roads:
        sets.union(a, b)
    assert len({sets.find(node) for node in range(1, 7)}) == 1


def test_building_roads_already_connected():
    assert building_roads(3, [(1, 2), (2, 3)]) == []


def test_game_routes_diamond():
    assert game_routes(4, [(1, 2), (1, 3), (2, 4), (3, 4)]) == 2


def test_game_routes_unreachable_and_single():
    assert game_routes(3, [(2, 3)]) == 0
    assert game_routes(1, []) == 1


def test_planets_queries_zero_and_one_step():
    successors = [3, 1, 2, 4]
    answers = planets_queries(successors, [(1, 0), (2, 1), (4, 5)])
    assert answers == [1, successors[1], 4]


def test_planets_queries_full_cycle_returns_home():
    successors = [2, 3, 4, 5, 1]
    queries = [(x, 5 * 1000) for x in range(1, 6)]
    assert planets_queries(successors, queries) == [1, 2, 3, 4, 5]


def test_planets_queries_negative_steps():
    with pytest.raises(ValueError):
        planets_queries([1], [(1, -1)])


def test_round_trip_is_a_cycle():
    edges = [(1, 2), (2, 3), (3, 4), (4, 2), (5, 1)]
    cycle = round_trip(5, edges)
    assert cycle[0] == cycle[-1]
    assert len(set(cycle[:-1])) == len(cycle) - 1
    edge_set = set(edges)
    for a, b in zip(cycle, cycle[1:]):
        assert (a, b) in edge_set


def test_round_trip_impossible_on_dag():
    with pytest.raises(ImpossibleError):
        round_trip(4, [(1, 2), (2, 3), (1, 3), (3, 4)])


def test_all_pairs_basic_properties():
    edges = [(1, 2, 5), (1, 2, 3), (2, 3, 4)]
    answers = shortest_paths_all_pairs(4, edges, [(1, 2), (2, 1), (1, 1), (1, 4), (2, 3)])
    assert answers[0] == 3
    assert answers[1] == answers[0]
    assert answers[2] == 0
    assert answers[3] == -1
    assert answers[4] == 4


def test_all_pairs_triangle_inequality():
    edges = [(1, 2, 2), (2, 3, 2), (1, 3, 10), (3, 4, 1)]
    nodes = range(1, 5)
    pairs = [(a, b) for a in nodes for b in nodes]
    values = dict(zip(pairs, shortest_paths_all_pairs(4, edges, pairs)))
    for a in nodes:
        for b in nodes:
            for c in nodes:
                assert values[a, c] <= values[a, b] + values[b, c]
    assert values[1, 3] < 10


def test_shortest_routes_properties():
    edges = [(1, 2, 6), (1, 3, 2), (3, 2, 3), (2, 4, 1)]
    dist = shortest_routes(5, edges)
    assert dist[0] == 0
    assert dist[2] == 2
    assert dist[4] == UNREACHABLE
    for a, b, weight in edges:
        assert dist[b - 1] <= dist[a - 1] + weight
    assert dist[1] < 6