"""Smoke tests for the public package surface."""

import isapflow
from isapflow import (
    ResidualGraph,
    calc_max_flow,
    has_feasible_flow,
    max_weight_closure,
)


def test_public_names_exported():
    for name in isapflow.__all__:
        assert hasattr(isapflow, name), name


def test_max_flow_scenarios():
    g = ResidualGraph(4)
    for u, v, cap in [(0, 1, 10), (0, 2, 2), (1, 2, 6), (1, 3, 8), (2, 3, 10)]:
        g.add_edge(u, v, cap)
    assert calc_max_flow(g, 0, 3) == 12

    g = ResidualGraph(3)
    g.add_edge(0, 1, 10)
    assert calc_max_flow(g, 0, 2) == 0


def test_feasibility_scenarios():
    feasible = [(0, 1, 5, 10), (0, 2, 2, 8), (1, 3, 3, 6), (2, 3, 4, 9)]
    assert has_feasible_flow(4, 0, 3, feasible)
    assert not has_feasible_flow(3, 0, 2, [(0, 1, 5, 3), (1, 2, 1, 4)])
    short = [(0, 1, 6, 10), (0, 2, 4, 8), (1, 3, 1, 3), (2, 3, 2, 3)]
    assert not has_feasible_flow(4, 0, 3, short)


def test_closure_exported():
    assert max_weight_closure([2, -1], [(0, 1)]).weight == 1
