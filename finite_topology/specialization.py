"""Structure of a finite topology: minimal basis and specialization preorder.

Every point x of a finite space has a smallest open set U_x. The sets U_x
form the minimal basis of the topology: every open set is a union of them.
The relation "y is in U_x" is a preorder on the points (reflexive and
transitive), the specialization preorder, and a finite topology is fully
determined by it.

Properties read off the preorder:
- Discrete: U_x = {x} for every x (the preorder is the identity)
- Trivial: U_x = X for every x (the preorder relates all pairs)
- T0: distinct points have distinct U_x (the preorder is antisymmetric)
"""

from __future__ import annotations
import numpy as np
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, Optional, Tuple

from .errors import InvalidInputError, InvalidTopologyError
from .neighbourhood import minimal_open_set
from .set_comparer import Family, Subset, SubsetCodec, as_family, as_subset
from .verifier import is_topology


def _checked(base, topology) -> Tuple[Subset, Family]:
    base = as_subset(base, name="base")
    topology = as_family(topology, name="topology")
    if not is_topology(topology, base):
        raise InvalidTopologyError("The given family is not a topology on the set.")
    return base, topology


def minimal_basis(
    base: Iterable[Hashable],
    topology: Iterable[Iterable[Hashable]],
) -> Dict[Hashable, Subset]:
    """Map each point of ``base`` to its smallest open set."""
    base, topology = _checked(base, topology)
    return {x: minimal_open_set(topology, x) for x in base}


def specialization_matrix(
    base: Iterable[Hashable],
    topology: Iterable[Iterable[Hashable]],
    elements: Optional[Tuple[Hashable, ...]] = None,
) -> Tuple[np.ndarray, Tuple[Hashable, ...]]:
    """Boolean matrix of the specialization preorder.

    Args:
        base: The set the topology is defined on
        topology: A topology on ``base``
        elements: Row/column order (defaults to the set's iteration order)

    Returns:
        (R, elements) where R[i, j] is True iff elements[j] lies in the
        smallest open set around elements[i]
    """
    return _preorder_matrix(minimal_basis(base, topology), elements)


def _preorder_matrix(
    basis: Dict[Hashable, Subset],
    elements: Optional[Tuple[Hashable, ...]] = None,
) -> Tuple[np.ndarray, Tuple[Hashable, ...]]:
    codec = SubsetCodec(elements=tuple(elements) if elements is not None else tuple(basis))
    if len(codec) != len(basis) or set(codec.elements) != set(basis):
        raise InvalidInputError("elements must list every point of the set exactly once")

    n = len(codec)
    R = np.zeros((n, n), dtype=bool)
    for i, x in enumerate(codec.elements):
        mask = codec.encode(basis[x])
        for j in range(n):
            R[i, j] = bool(mask >> j & 1)
    return R, codec.elements


@dataclass(frozen=True)
class TopologySummary:
    """Summary statistics for a finite topology.

    Attributes:
        n_points: Size of the base set
        n_open_sets: Number of members of the topology
        n_basis_sets: Number of distinct smallest open sets
        discrete: Whether the topology is the full power set
        trivial: Whether the topology is {empty set, X}
        t0: Whether distinct points have distinct smallest open sets
    """
    n_points: int
    n_open_sets: int
    n_basis_sets: int
    discrete: bool
    trivial: bool
    t0: bool


def summarize(
    base: Iterable[Hashable],
    topology: Iterable[Iterable[Hashable]],
) -> TopologySummary:
    """Compute a TopologySummary for ``topology`` on ``base``."""
    base, topology = _checked(base, topology)
    basis = {x: minimal_open_set(topology, x) for x in base}
    R, _ = _preorder_matrix(basis)
    n = R.shape[0]

    # Antisymmetric: R and its transpose only agree on the diagonal.
    both = R & R.T
    t0 = bool(np.array_equal(both, np.eye(n, dtype=bool)))

    return TopologySummary(
        n_points=len(base),
        n_open_sets=len(topology),
        n_basis_sets=len(set(basis.values())),
        discrete=len(topology) == 2 ** len(base),
        trivial=topology == frozenset({frozenset(), base}),
        t0=t0,
    )
