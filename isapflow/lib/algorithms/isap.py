from __future__ import annotations

from collections import deque
from typing import List, Literal, Set, Tuple, Union, overload

from isapflow.lib.algorithms.types import FlowSummary
from isapflow.lib.graph import UNREACHED, EdgeRef, NodeID, ResidualGraph
from isapflow.logging import get_logger

logger = get_logger(__name__)


def label_distances(graph: ResidualGraph, dst_node: NodeID) -> List[int]:
    """Compute exact distance labels towards `dst_node` in the residual graph.

    Runs a breadth-first search from the sink over reversed residual edges:
    a neighbor ``v`` of ``u`` is labeled only if the record paired with the
    edge ``u -> v`` (that is, ``v -> u``) still has residual capacity.
    Resets and fills ``graph.level`` and ``graph.gap`` in place.

    Args:
        graph: The residual graph.
        dst_node: The sink node.

    Returns:
        List[int]: ``graph.level``; nodes with no residual path to the sink
        hold ``UNREACHED`` (-1).
    """
    level = graph.level
    gap = graph.gap
    level[:] = [UNREACHED] * graph.num_nodes
    gap[:] = [0] * (graph.num_nodes + 1)

    adj = graph.adj
    level[dst_node] = 0
    gap[0] = 1
    queue = deque([dst_node])
    while queue:
        u = queue.popleft()
        for edge in adj[u]:
            v = edge.to
            if level[v] == UNREACHED and adj[v][edge.rev].residual > 0:
                level[v] = level[u] + 1
                gap[level[v]] += 1
                queue.append(v)
    return level


@overload
def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[False] = False,
    copy_graph: bool = False,
    reset_flow_graph: bool = False,
) -> int: ...


@overload
def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: Literal[True],
    copy_graph: bool = False,
    reset_flow_graph: bool = False,
) -> Tuple[int, FlowSummary]: ...


def calc_max_flow(
    graph: ResidualGraph,
    src_node: NodeID,
    dst_node: NodeID,
    *,
    return_summary: bool = False,
    copy_graph: bool = False,
    reset_flow_graph: bool = False,
) -> Union[int, Tuple[int, FlowSummary]]:
    """Compute the maximum flow from `src_node` to `dst_node` with ISAP.

    The search walks admissible edges (residual capacity left and label
    exactly one above the neighbor's), keeping a current-arc pointer per node
    for the whole computation. A dead end relabels the node to one more than
    its lowest residual neighbor and retreats one step. When the last node
    holding some label is relabeled away, no augmenting path can exist any
    more and the search stops (gap heuristic).

    After every augmentation the search restarts from the source instead of
    resuming at the saturated edge. The flow value is the same either way.

    Flow already present on the graph is kept: a second call on the same graph
    only finds flow beyond what earlier calls pushed.

    Args:
        graph: The residual graph. Edge flows are mutated in place.
        src_node: The source node.
        dst_node: The sink node.
        return_summary: If True, also return a FlowSummary with residual
            reachability and min-cut edges.
        copy_graph: If True, work on a copy so `graph` stays unmodified.
        reset_flow_graph: If True, clear existing flow before computing.

    Returns:
        Union[int, Tuple[int, FlowSummary]]:
            - If return_summary is False: the flow pushed by this call.
            - Otherwise: a tuple of (flow, FlowSummary).

    Examples:
        >>> g = ResidualGraph(3)
        >>> g.add_edge(0, 1, 5)
        >>> g.add_edge(1, 2, 3)
        >>> calc_max_flow(g, 0, 2)
        3
    """
    flow_graph = graph.copy() if copy_graph else graph
    if reset_flow_graph:
        flow_graph.reset_flow()

    # Degenerate case (s == t): conservation forces the net surplus at the
    # single terminal to zero, so the only feasible flow value is 0.
    if src_node == dst_node:
        return _build_return_value(0, flow_graph, src_node, return_summary, 0, False)

    level = label_distances(flow_graph, dst_node)
    if level[src_node] == UNREACHED:
        logger.debug(
            "Sink %s is unreachable from source %s; max flow is 0",
            dst_node,
            src_node,
        )
        return _build_return_value(0, flow_graph, src_node, return_summary, 0, False)

    n = flow_graph.num_nodes
    adj = flow_graph.adj
    gap = flow_graph.gap
    # Label n marks "cannot reach the sink" for the rest of the search
    for node in range(n):
        if level[node] == UNREACHED:
            level[node] = n

    total_flow = 0
    augmentations = 0
    gap_terminated = False
    cur = [0] * n
    path: List[NodeID] = []
    u = src_node
    while level[src_node] < n:
        if u == dst_node:
            pushed = min(adj[p][cur[p]].residual for p in path)
            for p in path:
                edge = adj[p][cur[p]]
                edge.flow += pushed
                adj[edge.to][edge.rev].flow -= pushed
            total_flow += pushed
            augmentations += 1
            u = src_node
            path.clear()
            continue

        edges = adj[u]
        i = cur[u]
        while i < len(edges):
            edge = edges[i]
            if edge.capacity > edge.flow and level[u] == level[edge.to] + 1:
                break
            i += 1
        cur[u] = i

        if i < len(edges):
            path.append(u)
            u = edges[i].to
            continue

        # Dead end: relabel u and retreat
        min_level = min((level[e.to] for e in edges if e.capacity > e.flow), default=n)
        gap[level[u]] -= 1
        if gap[level[u]] == 0:
            gap_terminated = True
            logger.debug("Label %d emptied at node %s; stopping search", level[u], u)
            break
        level[u] = min(min_level + 1, n)
        gap[level[u]] += 1
        cur[u] = 0
        if path:
            u = path.pop()

    logger.debug(
        "Max flow %s -> %s: flow=%d, augmentations=%d",
        src_node,
        dst_node,
        total_flow,
        augmentations,
    )
    return _build_return_value(
        total_flow,
        flow_graph,
        src_node,
        return_summary,
        augmentations,
        gap_terminated,
    )


def residual_reachable(graph: ResidualGraph, src_node: NodeID) -> Set[NodeID]:
    """Return the nodes reachable from `src_node` over edges with residual capacity."""
    reachable = {src_node}
    stack = [src_node]
    while stack:
        u = stack.pop()
        for edge in graph.adj[u]:
            if edge.residual > 0 and edge.to not in reachable:
                reachable.add(edge.to)
                stack.append(edge.to)
    return reachable


def _build_return_value(
    total_flow: int,
    flow_graph: ResidualGraph,
    src_node: NodeID,
    return_summary: bool,
    augmentations: int,
    gap_terminated: bool,
) -> Union[int, Tuple[int, FlowSummary]]:
    """Build the appropriate return value based on the requested flags."""
    if not return_summary:
        return total_flow
    summary = _build_flow_summary(
        total_flow, flow_graph, src_node, augmentations, gap_terminated
    )
    return total_flow, summary


def _build_flow_summary(
    total_flow: int,
    flow_graph: ResidualGraph,
    src_node: NodeID,
    augmentations: int,
    gap_terminated: bool,
) -> FlowSummary:
    """Build a FlowSummary from the flow graph state."""
    edge_flow = {}
    residual_cap = {}
    for u, edge_id, edge in flow_graph.edges():
        ref: EdgeRef = (u, edge.to, edge_id)
        edge_flow[ref] = edge.flow
        residual_cap[ref] = edge.residual

    reachable = residual_reachable(flow_graph, src_node)
    min_cut = [
        (u, v, edge_id)
        for (u, v, edge_id) in edge_flow
        if u in reachable and v not in reachable
    ]

    return FlowSummary(
        total_flow=total_flow,
        edge_flow=edge_flow,
        residual_cap=residual_cap,
        reachable=reachable,
        min_cut=min_cut,
        augmentations=augmentations,
        gap_terminated=gap_terminated,
    )
