from __future__ import annotations

from dataclasses import dataclass
from pickle import dumps, loads
from typing import Iterator, List, Tuple

NodeID = int
EdgeID = int

#: Edge identifier tuple: (source_node, destination_node, edge_id)
EdgeRef = Tuple[NodeID, NodeID, EdgeID]

#: Label of a node the labeling pass could not reach from the sink.
UNREACHED = -1


@dataclass
class Edge:
    """
    A single residual edge record.

    Every call to `ResidualGraph.add_edge` creates two paired records: the
    forward edge carrying the capacity and a reverse edge with capacity 0.
    `rev` is the position of the paired record in the destination node's
    edge list, so either record can be reached from the other in O(1).

    Attributes:
        to: Destination node.
        capacity: Edge capacity (0 for reverse records).
        flow: Current flow; the paired record always holds the negated value.
        rev: Index of the paired record in ``adj[to]``.
    """

    to: NodeID
    capacity: int
    flow: int = 0
    rev: int = 0

    @property
    def residual(self) -> int:
        """Remaining pushable capacity (`capacity - flow`)."""
        return self.capacity - self.flow


class ResidualGraph:
    """
    A directed capacitated graph stored as per-node lists of paired edges.

    This class enforces:
      - A fixed node count set at construction; nodes are the integers [0, n).
      - Edges are only ever added, never removed.
      - Insertion order of each node's edge list is preserved, since it decides
        which admissible edge a traversal tries first.

    Besides the edges, the graph owns the scratch arrays used by the max-flow
    engine: ``level`` (distance label per node) and ``gap`` (number of nodes
    per label, with one extra slot for the "disconnected" label ``n``).
    Node indices passed to `add_edge` are not validated.
    """

    def __init__(self, num_nodes: int) -> None:
        """
        Initialize a ResidualGraph.

        Args:
            num_nodes: Number of nodes. Must be non-negative.

        Raises:
            ValueError: If num_nodes is negative.
        """
        if num_nodes < 0:
            raise ValueError(f"Node count must be non-negative, got {num_nodes}.")
        self.num_nodes: int = num_nodes
        self.adj: List[List[Edge]] = [[] for _ in range(num_nodes)]
        self.level: List[int] = [UNREACHED] * num_nodes
        self.gap: List[int] = [0] * (num_nodes + 1)
        # (src_node, index into adj[src_node]) per add_edge call
        self._forward: List[Tuple[NodeID, int]] = []

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_nodes={self.num_nodes}, "
            f"num_edges={self.num_edges})"
        )

    @property
    def num_edges(self) -> int:
        """Number of forward edges added so far."""
        return len(self._forward)

    def add_edge(self, u: NodeID, v: NodeID, capacity: int) -> None:
        """
        Add a directed edge u -> v together with its zero-capacity reverse edge.

        Args:
            u: The source node, in [0, n).
            v: The target node, in [0, n).
            capacity: Non-negative edge capacity.

        Raises:
            ValueError: If capacity is negative.
        """
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity}.")
        fwd_index = len(self.adj[u])
        # On a self-loop the reverse record lands right after the forward one
        rev_index = len(self.adj[v]) + (1 if u == v else 0)
        self.adj[u].append(Edge(v, capacity, 0, rev_index))
        self.adj[v].append(Edge(u, 0, 0, fwd_index))
        self._forward.append((u, fwd_index))

    def edges(self) -> Iterator[Tuple[NodeID, EdgeID, Edge]]:
        """
        Iterate forward edges in insertion order.

        Yields:
            Tuples of (source_node, edge_id, edge), where edge_id is the
            0-based ordinal of the `add_edge` call that created the edge.
        """
        for edge_id, (u, index) in enumerate(self._forward):
            yield u, edge_id, self.adj[u][index]

    def reset_flow(self) -> None:
        """Zero the flow on every edge record, forward and reverse."""
        for edge_list in self.adj:
            for edge in edge_list:
                edge.flow = 0

    def copy(self) -> ResidualGraph:
        """
        Create an independent deep copy of this graph, flows included.

        Returns:
            ResidualGraph: A new graph sharing no state with this one.
        """
        return loads(dumps(self))
