from fractions import Fraction

import pytest

from cycleratio.lib.graph import StrictDiGraph


@pytest.fixture
def two_cycle():
    # cost/time:
    #      [2/1]
    #   A───────►B
    #   ▲        │
    #   └────────┘
    #      [4/1]
    #
    g = StrictDiGraph()
    g.add_node("A")
    g.add_node("B")

    g.add_edge("A", "B", cost=2, time=1)
    g.add_edge("B", "A", cost=4, time=1)
    return g


@pytest.fixture
def disjoint_cycles():
    # cost/time:
    #      [5/1]              [2/1]
    #   X◄───────►Y        P◄───────►Q
    #      [5/1]              [2/1]
    #
    # Ratio 5 on the left component, 2 on the right one.
    g = StrictDiGraph()
    for node in ("X", "Y", "P", "Q"):
        g.add_node(node)

    g.add_edge("X", "Y", cost=5, time=1)
    g.add_edge("Y", "X", cost=5, time=1)
    g.add_edge("P", "Q", cost=2, time=1)
    g.add_edge("Q", "P", cost=2, time=1)
    return g


@pytest.fixture
def dag1():
    # cost/time, no cycles:
    #      [1/1]       [1/1]
    #   A───────►B────────►C
    #   │                  ▲
    #   └──────────────────┘
    #         [3/2]
    #
    g = StrictDiGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_node("C")

    g.add_edge("A", "B", cost=1, time=1)
    g.add_edge("B", "C", cost=1, time=1)
    g.add_edge("A", "C", cost=3, time=2)
    return g


@pytest.fixture
def zero_time_cycle():
    # cost/time:
    #      [1/0]
    #   A───────►B
    #   ▲        │
    #   │        │[1/0]
    #   │  [1/0] ▼
    #   └────────C
    #
    g = StrictDiGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_node("C")

    g.add_edge("A", "B", cost=1, time=0)
    g.add_edge("B", "C", cost=1, time=0)
    g.add_edge("C", "A", cost=1, time=0)
    return g


@pytest.fixture
def ring5():
    # cost, unit time:
    #       [5]      [1]      [1]      [1]
    #   A───────►B───────►C───────►D───────►E
    #   ▲                                   │
    #   └───────────────────────────────────┘
    #                   [1]
    #
    # Single cycle, ratio 9/5.
    g = StrictDiGraph()
    for node in "ABCDE":
        g.add_node(node)

    g.add_edge("A", "B", cost=5, time=1)
    g.add_edge("B", "C", cost=1, time=1)
    g.add_edge("C", "D", cost=1, time=1)
    g.add_edge("D", "E", cost=1, time=1)
    g.add_edge("E", "A", cost=1, time=1)
    return g


@pytest.fixture
def timing1():
    # cost, unit time, both directions between every pair:
    #   A->B 7, B->A -1, B->C 3, C->B 0, C->A 2, A->C 4.
    # Cycle ratios: ABA 3, BCB 3/2, ACA 3, ABCA 4, ACBA 1.
    g = StrictDiGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_node("C")

    g.add_edge("A", "B", cost=7, time=1)
    g.add_edge("B", "A", cost=-1, time=1)
    g.add_edge("B", "C", cost=3, time=1)
    g.add_edge("C", "B", cost=0, time=1)
    g.add_edge("C", "A", cost=2, time=1)
    g.add_edge("A", "C", cost=4, time=1)
    return g


@pytest.fixture
def probe_trap():
    # weight:
    #      [-1]       [-1]
    #   B◄───────A───────►C   (C is a dead end)
    #   │        ▲
    #   └────────┘
    #      [0]
    #
    # A->C is scanned after A->B, so the chain probe walks into the dead end
    # and never sees the negative cycle A->B->A.
    g = StrictDiGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_node("C")

    g.add_edge("A", "B", weight=-1)
    g.add_edge("B", "A", weight=0)
    g.add_edge("A", "C", weight=-1)
    return g


@pytest.fixture
def self_loop():
    # cost/time:
    #   ┌──┐[3/2]      [5/1]
    #   └─►A──────────►B
    #      ▲           │
    #      └───────────┘
    #          [5/1]
    #
    g = StrictDiGraph()
    g.add_node("A")
    g.add_node("B")

    g.add_edge("A", "A", cost=3, time=2)
    g.add_edge("A", "B", cost=5, time=1)
    g.add_edge("B", "A", cost=5, time=1)
    return g


@pytest.fixture
def fractional_ring():
    # Triangle with mixed times; ratio (1 + 2 + 4) / (2 + 3 + 1) = 7/6.
    g = StrictDiGraph()
    g.add_node(0)
    g.add_node(1)
    g.add_node(2)

    g.add_edge(0, 1, cost=1, time=2)
    g.add_edge(1, 2, cost=2, time=3)
    g.add_edge(2, 0, cost=4, time=1)
    return g


@pytest.fixture
def exact_r0():
    return Fraction(100)
