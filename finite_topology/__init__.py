"""Finite topology - enumeration and verification of topologies on small sets.

A topology on a finite set X is a family of subsets of X that contains the
empty set and X and is closed under union and intersection. This package
checks candidate families, enumerates every topology on a set of up to five
elements, and computes neighbourhood systems.

Subsets are frozensets and families are frozensets of frozensets, so two
values with the same members are interchangeable however they were built.

Key exports:
- power_set: All subsets of a finite set
- is_topology: Topology axiom check
- topologies: Lazy, cancellable enumeration of all topologies on a set
- neighbourhood_system: All neighbourhoods of a point
- summarize: Minimal basis and specialization preorder statistics
"""

from .errors import (
    TopologyError,
    InvalidInputError,
    SizeLimitError,
    InvalidTopologyError,
    PointNotInSetError,
    EnumerationCancelled,
)
from .set_comparer import (
    Subset,
    Family,
    SubsetCodec,
    as_subset,
    as_family,
    canonical,
    equal,
    structural_hash,
)
from .power_set import power_set
from .verifier import is_topology
from .enumerator import (
    CancellationToken,
    EnumerationConfig,
    KNOWN_TOPOLOGY_COUNTS,
    MAX_SET_SIZE,
    count_topologies,
    topologies,
)
from .neighbourhood import minimal_open_set, neighbourhood_system
from .specialization import (
    TopologySummary,
    minimal_basis,
    specialization_matrix,
    summarize,
)

__version__ = "0.1.0"

__all__ = [
    "TopologyError",
    "InvalidInputError",
    "SizeLimitError",
    "InvalidTopologyError",
    "PointNotInSetError",
    "EnumerationCancelled",
    "Subset",
    "Family",
    "SubsetCodec",
    "as_subset",
    "as_family",
    "canonical",
    "equal",
    "structural_hash",
    "power_set",
    "is_topology",
    "CancellationToken",
    "EnumerationConfig",
    "KNOWN_TOPOLOGY_COUNTS",
    "MAX_SET_SIZE",
    "count_topologies",
    "topologies",
    "minimal_open_set",
    "neighbourhood_system",
    "TopologySummary",
    "minimal_basis",
    "specialization_matrix",
    "summarize",
]
