from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from isapflow.config import FLOW_CONFIG, FlowConfig
from isapflow.lib.algorithms.isap import calc_max_flow, residual_reachable
from isapflow.lib.algorithms.types import ClosureResult
from isapflow.lib.graph import NodeID, ResidualGraph
from isapflow.logging import get_logger

logger = get_logger(__name__)


def max_weight_closure(
    weights: Sequence[int],
    edges: Iterable[Tuple[NodeID, NodeID]],
    *,
    config: Optional[FlowConfig] = None,
) -> ClosureResult:
    """Find a maximum-weight closure of a directed graph via a minimum cut.

    A closure is a node set that contains every successor of each of its
    members. Positive-weight nodes hang off a source ``S = n``, negative-weight
    nodes drain into a sink ``T = n + 1`` and every original edge becomes
    uncapacitated. The closure weight is the sum of positive weights minus the
    max flow, and the closure itself is the set of original nodes still
    reachable from ``S`` in the residual graph.

    Args:
        weights: Weight of each node; ``len(weights)`` is the node count.
        edges: Directed edges ``(u, v)``: choosing ``u`` forces choosing ``v``.
        config: Numeric configuration; the infinite sentinel must exceed the
            sum of positive weights.

    Returns:
        ClosureResult: The closure weight and its nodes. An empty closure
        (weight 0) is returned when no closure has positive weight.

    Raises:
        ValueError: If the positive weights do not fit below the sentinel.
    """
    config = config or FLOW_CONFIG
    num_nodes = len(weights)
    source = num_nodes
    sink = num_nodes + 1
    graph = ResidualGraph(num_nodes + 2)

    positive_total = 0
    for node, weight in enumerate(weights):
        if weight > 0:
            graph.add_edge(source, node, weight)
            positive_total += weight
        elif weight < 0:
            graph.add_edge(node, sink, -weight)

    if not config.fits(positive_total):
        raise ValueError(
            f"Total positive weight {positive_total} does not fit below the "
            f"infinite capacity {config.infinite_capacity}."
        )

    for u, v in edges:
        graph.add_edge(u, v, config.infinite_capacity)

    cut = calc_max_flow(graph, source, sink)
    nodes = residual_reachable(graph, source) - {source}
    weight = positive_total - cut
    logger.debug(
        "Closure over %d nodes: weight=%d, size=%d", num_nodes, weight, len(nodes)
    )
    return ClosureResult(weight=weight, nodes=nodes)
