"""Feasible-flow check for networks with lower and upper edge bounds.

The bounded network is reduced to a plain max-flow instance. Every edge is
given its mandatory lower bound up front, which leaves each node with an
imbalance (its demand). A supersource feeds nodes that received more than
they sent, a supersink drains nodes that sent more than they received, and an
uncapacitated edge ``t -> s`` lets the s-t flow circulate. A feasible flow
exists exactly when the max flow saturates every supersource edge.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from isapflow.config import FLOW_CONFIG, FlowConfig
from isapflow.lib.algorithms.isap import calc_max_flow
from isapflow.lib.algorithms.types import BoundedEdge
from isapflow.lib.graph import NodeID, ResidualGraph
from isapflow.logging import get_logger

logger = get_logger(__name__)


def _as_bounded(edges: Iterable[Sequence[int]]) -> List[BoundedEdge]:
    return [BoundedEdge(*edge) for edge in edges]


def node_demands(num_nodes: int, edges: Iterable[Sequence[int]]) -> List[int]:
    """Compute the imbalance each node gets once all lower bounds are routed.

    ``demand[v]`` is the sum of lower bounds on edges entering ``v`` minus the
    sum of lower bounds on edges leaving it.

    Args:
        num_nodes: Number of nodes in the bounded network.
        edges: Bounded edges as ``(u, v, lower, upper)``.

    Returns:
        List[int]: Demand per node.
    """
    demand = [0] * num_nodes
    for edge in _as_bounded(edges):
        demand[edge.u] -= edge.lower
        demand[edge.v] += edge.lower
    return demand


def build_feasibility_graph(
    num_nodes: int,
    src_node: NodeID,
    dst_node: NodeID,
    edges: Iterable[Sequence[int]],
    *,
    infinite_capacity: Optional[int] = None,
) -> Tuple[ResidualGraph, int]:
    """Build the auxiliary max-flow graph for a bounded network.

    Nodes ``0..n-1`` are the original nodes, ``n`` is the supersource and
    ``n + 1`` the supersink. Edges are added in this order:

      1. ``u -> v`` with capacity ``upper - lower`` for every edge with slack.
      2. ``SS -> v`` for each node with positive demand, or ``v -> TT`` for
         each node with negative demand, scanning nodes in index order.
      3. ``t -> s`` with the infinite sentinel capacity.

    Args:
        num_nodes: Number of nodes in the bounded network.
        src_node: Original source.
        dst_node: Original sink.
        edges: Bounded edges as ``(u, v, lower, upper)``; lower <= upper is
            assumed.
        infinite_capacity: Capacity of the ``t -> s`` edge. Defaults to
            ``FLOW_CONFIG.infinite_capacity``.

    Returns:
        Tuple[ResidualGraph, int]: The auxiliary graph and the total positive
        demand the supersource has to push.
    """
    if infinite_capacity is None:
        infinite_capacity = FLOW_CONFIG.infinite_capacity

    bounded = _as_bounded(edges)
    demand = node_demands(num_nodes, bounded)
    super_src = num_nodes
    super_dst = num_nodes + 1
    aux = ResidualGraph(num_nodes + 2)

    for edge in bounded:
        if edge.upper - edge.lower > 0:
            aux.add_edge(edge.u, edge.v, edge.upper - edge.lower)

    total_positive_demand = 0
    for node, node_demand in enumerate(demand):
        if node_demand > 0:
            aux.add_edge(super_src, node, node_demand)
            total_positive_demand += node_demand
        elif node_demand < 0:
            aux.add_edge(node, super_dst, -node_demand)

    aux.add_edge(dst_node, src_node, infinite_capacity)
    return aux, total_positive_demand


def has_feasible_flow(
    num_nodes: int,
    src_node: NodeID,
    dst_node: NodeID,
    edges: Iterable[Sequence[int]],
    *,
    config: Optional[FlowConfig] = None,
) -> bool:
    """Check whether a flow respecting every edge's lower and upper bound exists.

    Args:
        num_nodes: Number of nodes in the network.
        src_node: The source node.
        dst_node: The sink node.
        edges: Bounded edges, each a `BoundedEdge` or a ``(u, v, lower, upper)``
            tuple.
        config: Numeric configuration; defaults to ``FLOW_CONFIG``.

    Returns:
        bool: True if a feasible flow exists. An edge with ``lower > upper``
        makes the network infeasible without running any flow computation.
    """
    config = config or FLOW_CONFIG
    bounded = _as_bounded(edges)

    for edge in bounded:
        if edge.lower > edge.upper:
            logger.debug(
                "Edge %s -> %s has lower bound %d above upper bound %d",
                edge.u,
                edge.v,
                edge.lower,
                edge.upper,
            )
            return False

    aux, total_positive_demand = build_feasibility_graph(
        num_nodes,
        src_node,
        dst_node,
        bounded,
        infinite_capacity=config.infinite_capacity,
    )
    max_flow = calc_max_flow(aux, num_nodes, num_nodes + 1)
    feasible = max_flow == total_positive_demand
    logger.debug(
        "Feasibility check on %r: routed %d of %d mandatory units, feasible=%s",
        aux,
        max_flow,
        total_positive_demand,
        feasible,
    )
    return feasible
