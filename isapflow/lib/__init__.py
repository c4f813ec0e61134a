"""Graph primitives, flow algorithms and NetworkX integration for isapflow."""

from isapflow.lib.nx import NodeMap, from_networkx, to_networkx

__all__ = [
    "NodeMap",
    "from_networkx",
    "to_networkx",
]
