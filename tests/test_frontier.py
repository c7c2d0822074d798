from __future__ import annotations

from tubesort.frontier import Frontier, SearchNode
from tubesort.state import Arrangement

_STATE = Arrangement.from_units([["A", "B"], ["B", "A"], []])


def _node(g: int, h: float) -> SearchNode:
    return SearchNode(state=_STATE, moves=(), g=g, h=h)


def test_pop_returns_lowest_f() -> None:
    frontier = Frontier()
    for g, h in [(3, 4.0), (1, 0.5), (2, 9.0)]:
        frontier.push(_node(g, h))
    assert frontier.best_f() == 1.5
    assert [frontier.pop().f for _ in range(3)] == [1.5, 7.0, 11.0]
    assert not frontier
    assert frontier.best_f() is None


def test_ties_pop_in_insertion_order() -> None:
    frontier = Frontier()
    first = _node(1, 2.0)
    second = _node(2, 1.0)
    frontier.push(first)
    frontier.push(second)
    assert frontier.pop() is first
    assert frontier.pop() is second


def test_bound_keeps_lowest_f_nodes() -> None:
    frontier = Frontier()
    for value in range(12):
        frontier.push(_node(value, 0.0))
    dropped = frontier.bound(ceiling=10, keep=5)
    assert dropped == 7
    assert len(frontier) == 5
    assert [frontier.pop().g for _ in range(5)] == [0, 1, 2, 3, 4]


def test_bound_is_noop_below_ceiling() -> None:
    frontier = Frontier()
    for value in range(10):
        frontier.push(_node(value, 0.0))
    assert frontier.bound(ceiling=10, keep=5) == 0
    assert len(frontier) == 10


def test_zero_ceiling_disables_bound() -> None:
    frontier = Frontier()
    for value in range(50):
        frontier.push(_node(value, 0.0))
    assert frontier.bound(ceiling=0, keep=1) == 0
    assert len(frontier) == 50
