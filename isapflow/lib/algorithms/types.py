"""Types and data structures for algorithm analytics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, NamedTuple, Set

from isapflow.lib.graph import EdgeRef, NodeID


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation with min-cut analysis.

    Attributes:
        total_flow: Flow pushed by this computation.
        edge_flow: Flow on each forward edge, indexed by (src, dst, edge_id).
            Includes flow left by earlier computations on the same graph.
        residual_cap: Remaining capacity on each forward edge.
        reachable: Nodes reachable from the source in the residual graph.
        min_cut: Forward edges leaving `reachable`; all of them are saturated.
        augmentations: Number of augmenting paths applied.
        gap_terminated: True if the search ended because a label level emptied.
    """

    total_flow: int
    edge_flow: Dict[EdgeRef, int]
    residual_cap: Dict[EdgeRef, int]
    reachable: Set[NodeID]
    min_cut: List[EdgeRef]
    augmentations: int = 0
    gap_terminated: bool = False


class BoundedEdge(NamedTuple):
    """A directed edge whose flow must stay within [lower, upper]."""

    u: NodeID
    v: NodeID
    lower: int
    upper: int


class ClosureResult(NamedTuple):
    """Result of a maximum-weight closure computation."""

    weight: int
    nodes: Set[NodeID]
