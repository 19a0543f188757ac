"""Experiments package for finite-topology.

Scripts that drive the library and print their results:
- enumerate_topologies: List every topology on a set, with neighbourhood systems
"""

__all__ = [
    "enumerate_topologies",
]
