"""Generic breadth-first search tests on small hand-built graphs."""

from __future__ import annotations

import pytest

from backend.engine.graphsearch import SearchLimitExceeded, bfs


# -- helpers ------------------------------------------------------------------


def _edges(graph: dict[str, list[str]]):
    return lambda node: graph.get(node, [])


_DIAMOND = {
    "root": ["left", "right"],
    "left": ["deep"],
    "right": ["goal"],
    "deep": ["goal"],
}


# -- paths --------------------------------------------------------------------


def test_root_goal_returns_single_state_path() -> None:
    assert bfs("root", lambda n: n == "root", _edges(_DIAMOND)) == ("root",)


def test_returns_shortest_path() -> None:
    path = bfs("root", lambda n: n == "goal", _edges(_DIAMOND))
    assert path == ("root", "right", "goal")


def test_path_is_a_tuple_ordered_root_first() -> None:
    path = bfs(0, lambda n: n == 3, lambda n: [n + 1])
    assert path == (0, 1, 2, 3)


def test_unreachable_goal_returns_none() -> None:
    assert bfs("root", lambda n: n == "nowhere", _edges(_DIAMOND)) is None


def test_dead_end_root_returns_none() -> None:
    assert bfs("root", lambda n: False, lambda n: []) is None


def test_ties_go_to_first_enumerated_successor() -> None:
    graph = {"root": ["b", "a"]}
    path = bfs("root", lambda n: n in ("a", "b"), _edges(graph))
    assert path == ("root", "b")


def test_goal_found_at_minimum_depth_even_if_deeper_goal_enumerated_first() -> None:
    graph = {"root": ["x", "near"], "x": ["far"]}
    path = bfs("root", lambda n: n in ("near", "far"), _edges(graph))
    assert path == ("root", "near")


# -- termination --------------------------------------------------------------


def test_cycles_and_self_loops_terminate() -> None:
    graph = {"a": ["a", "b"], "b": ["a", "b", "c"], "c": ["a"]}
    assert bfs("a", lambda n: n == "z", _edges(graph)) is None
    assert bfs("a", lambda n: n == "c", _edges(graph)) == ("a", "b", "c")


def test_each_state_expanded_once() -> None:
    expanded: list[int] = []

    def transitions(n: int) -> list[int]:
        expanded.append(n)
        return [(n + 1) % 5, (n + 2) % 5, n]

    assert bfs(0, lambda n: False, transitions) is None
    assert sorted(expanded) == [0, 1, 2, 3, 4]


def test_parent_recorded_at_first_discovery() -> None:
    # "shared" is reachable from both; the first parent to find it wins
    graph = {"root": ["p1", "p2"], "p1": ["shared"], "p2": ["shared"]}
    path = bfs("root", lambda n: n == "shared", _edges(graph))
    assert path == ("root", "p1", "shared")


# -- limits -------------------------------------------------------------------


def test_max_states_stops_infinite_search() -> None:
    with pytest.raises(SearchLimitExceeded) as excinfo:
        bfs(0, lambda n: False, lambda n: [n + 1], max_states=10)
    assert excinfo.value.limit == 10
    assert excinfo.value.explored == 11


def test_max_states_not_hit_on_small_space() -> None:
    path = bfs("root", lambda n: n == "goal", _edges(_DIAMOND), max_states=5)
    assert path == ("root", "right", "goal")


def test_search_limit_is_a_runtime_error() -> None:
    assert issubclass(SearchLimitExceeded, RuntimeError)
