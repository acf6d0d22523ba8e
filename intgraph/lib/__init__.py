"""Library utilities for intgraph.

This package contains integration modules for external libraries.
"""

from intgraph.lib.nx import NodeMap, from_networkx, to_networkx

__all__ = [
    "NodeMap",
    "from_networkx",
    "to_networkx",
]
