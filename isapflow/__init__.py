"""isapflow: maximum flow with ISAP and bounded-flow feasibility.

Primary API:
    ResidualGraph - Index-based graph of paired residual edges
    calc_max_flow() - Max flow via ISAP with the gap heuristic
    has_feasible_flow() - Feasibility of a network with lower/upper bounds
    max_weight_closure() - Maximum-weight closure via minimum cut
    from_networkx() / to_networkx() - NetworkX conversion

Example:
    from isapflow import ResidualGraph, calc_max_flow, has_feasible_flow

    g = ResidualGraph(4)
    g.add_edge(0, 1, 10)
    g.add_edge(1, 3, 8)
    flow = calc_max_flow(g, 0, 3)

    feasible = has_feasible_flow(3, 0, 2, [(0, 1, 1, 4), (1, 2, 1, 4)])
"""

from __future__ import annotations

from isapflow import logging
from isapflow.config import FLOW_CONFIG, FlowConfig
from isapflow.lib.algorithms.closure import max_weight_closure
from isapflow.lib.algorithms.feasibility import (
    build_feasibility_graph,
    has_feasible_flow,
    node_demands,
)
from isapflow.lib.algorithms.isap import calc_max_flow, label_distances
from isapflow.lib.algorithms.types import BoundedEdge, ClosureResult, FlowSummary
from isapflow.lib.graph import Edge, ResidualGraph
from isapflow.lib.nx import NodeMap, from_networkx, to_networkx

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Graph
    "Edge",
    "ResidualGraph",
    # Algorithms
    "calc_max_flow",
    "label_distances",
    "has_feasible_flow",
    "build_feasibility_graph",
    "node_demands",
    "max_weight_closure",
    # Types
    "BoundedEdge",
    "ClosureResult",
    "FlowSummary",
    # Configuration
    "FlowConfig",
    "FLOW_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
