import pytest

from isapflow.lib.graph import ResidualGraph


@pytest.fixture
def diamond4():
    # Capacity:
    #        [10]      [8]
    #    0 ──────► 1 ──────► 3
    #    │         │         ▲
    #    │ [2]     │ [6]     │ [10]
    #    ▼         ▼         │
    #    2 ◄───────┘─────────┘
    #
    # Max flow 0 -> 3 is 12.
    g = ResidualGraph(4)
    g.add_edge(0, 1, 10)
    g.add_edge(0, 2, 2)
    g.add_edge(1, 2, 6)
    g.add_edge(1, 3, 8)
    g.add_edge(2, 3, 10)
    return g


@pytest.fixture
def clrs6():
    # The classic six-node textbook network. Max flow 0 -> 5 is 23.
    g = ResidualGraph(6)
    g.add_edge(0, 1, 16)
    g.add_edge(0, 2, 13)
    g.add_edge(1, 2, 10)
    g.add_edge(1, 3, 12)
    g.add_edge(2, 1, 4)
    g.add_edge(2, 4, 14)
    g.add_edge(3, 2, 9)
    g.add_edge(3, 5, 20)
    g.add_edge(4, 3, 7)
    g.add_edge(4, 5, 4)
    return g


@pytest.fixture
def dangling3():
    # 0 ──[10]──► 1      2
    #
    # Node 2 has no incoming edge; max flow 0 -> 2 is 0.
    g = ResidualGraph(3)
    g.add_edge(0, 1, 10)
    return g


@pytest.fixture
def bottleneck5():
    # Two branches merge into a narrow edge:
    #
    #    0 ─[5]─► 1 ─[5]─┐
    #    │               ▼
    #    └─[5]─► 2 ─[5]─► 3 ─[3]─► 4
    #
    # Max flow 0 -> 4 is 3; the min cut is the single edge 3 -> 4.
    g = ResidualGraph(5)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 2, 5)
    g.add_edge(1, 3, 5)
    g.add_edge(2, 3, 5)
    g.add_edge(3, 4, 3)
    return g


@pytest.fixture
def parallel3():
    # Parallel and antiparallel edges between the same pairs:
    #
    #    0 ═[4,6]═► 1 ═[3,2]═► 2,  plus 1 ─[7]─► 0
    #
    # Max flow 0 -> 2 is 5.
    g = ResidualGraph(3)
    g.add_edge(0, 1, 4)
    g.add_edge(0, 1, 6)
    g.add_edge(1, 0, 7)
    g.add_edge(1, 2, 3)
    g.add_edge(1, 2, 2)
    return g
