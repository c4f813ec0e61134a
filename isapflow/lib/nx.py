"""NetworkX graph conversion utilities.

This module converts between NetworkX graphs and the index-based
`ResidualGraph` used by the flow algorithms.

Example:
    >>> import networkx as nx
    >>> from isapflow.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", capacity=100)
    >>> G.add_edge("B", "C", capacity=50)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> calc_max_flow(graph, node_map.to_index["A"], node_map.to_index["C"])
    50
    >>> G_out = to_networkx(graph, node_map)  # carries per-edge flow
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from isapflow.lib.graph import ResidualGraph

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Node names (any hashable) are mapped to contiguous indices starting at 0.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    capacity_attr: str = "capacity",
    default_capacity: int = 0,
) -> Tuple[ResidualGraph, NodeMap]:
    """Convert a NetworkX graph to a `ResidualGraph`.

    Nodes are sorted by their string form for deterministic indexing, and
    edges are added in NetworkX iteration order. Undirected graphs contribute
    one directed edge per direction.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        capacity_attr: Edge attribute name for capacity (default: "capacity")
        default_capacity: Capacity when the attribute is missing (default: 0)

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph
        ValueError: If a capacity is negative or not integral
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    graph = ResidualGraph(len(node_map))

    for u, v, data in G.edges(data=True):
        cap = data.get(capacity_attr, default_capacity)
        if isinstance(cap, float):
            if not cap.is_integer():
                raise ValueError(
                    f"Edge {u!r} -> {v!r} has non-integral capacity {cap}"
                )
            cap = int(cap)
        if cap < 0:
            raise ValueError(f"Edge {u!r} -> {v!r} has negative capacity {cap}")

        src_idx = node_map.to_index[u]
        dst_idx = node_map.to_index[v]
        graph.add_edge(src_idx, dst_idx, cap)
        if not G.is_directed():
            graph.add_edge(dst_idx, src_idx, cap)

    return graph, node_map


def to_networkx(
    graph: ResidualGraph,
    node_map: Optional[NodeMap] = None,
    *,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> "nx.MultiDiGraph":
    """Convert a `ResidualGraph` back to a NetworkX MultiDiGraph.

    Only forward edges are exported; each is keyed by its edge id and carries
    its capacity and current flow. Without a NodeMap nodes are labeled with
    their integer indices.

    Args:
        graph: ResidualGraph to convert
        node_map: Optional NodeMap to restore original node names.
        capacity_attr: Edge attribute name for capacity (default: "capacity")
        flow_attr: Edge attribute name for flow (default: "flow")

    Returns:
        nx.MultiDiGraph with one edge per forward edge of `graph`
    """
    import networkx as nx

    def name(idx: int) -> Hashable:
        if node_map is None:
            return idx
        return node_map.to_name.get(idx, idx)

    G = nx.MultiDiGraph()
    G.add_nodes_from(name(idx) for idx in range(graph.num_nodes))
    for u, edge_id, edge in graph.edges():
        G.add_edge(
            name(u),
            name(edge.to),
            key=edge_id,
            **{capacity_attr: edge.capacity, flow_attr: edge.flow},
        )
    return G
