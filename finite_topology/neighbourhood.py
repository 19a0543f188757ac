"""Neighbourhood systems of points in a finite topological space.

If X is a topological space and p is in X, a neighbourhood of p is any
subset N of X containing an open set O with p in O. The neighbourhood
system of p is the family of all its neighbourhoods.

In a finite space the open sets containing p are finitely many, so their
intersection is open and is the smallest open set containing p. The
neighbourhood system is then every subset of X that contains it.
"""

from __future__ import annotations
from typing import Hashable, Iterable

from .errors import InvalidInputError, InvalidTopologyError, PointNotInSetError
from .power_set import power_set
from .set_comparer import Family, Subset, as_family, as_subset
from .verifier import is_topology


def _contains(subset: Subset, point: Hashable) -> bool:
    try:
        return point in subset
    except TypeError as e:
        raise InvalidInputError(f"point must be hashable: {e}") from e


def minimal_open_set(topology: Iterable[Iterable[Hashable]], point: Hashable) -> Subset:
    """Smallest member of ``topology`` containing ``point``.

    The result is a new frozenset; no member of ``topology`` is modified.
    ``topology`` is assumed to be a verified topology that covers ``point``.
    """
    open_sets = [s for s in as_family(topology, name="topology") if _contains(s, point)]
    if not open_sets:
        raise PointNotInSetError(f"No open set contains {point!r}.")
    return frozenset.intersection(*open_sets)


def neighbourhood_system(
    base: Iterable[Hashable],
    topology: Iterable[Iterable[Hashable]],
    point: Hashable,
) -> Family:
    """Compute the neighbourhood system of ``point`` under ``topology``.

    Args:
        base: The set the topology is defined on
        topology: A topology on ``base``
        point: Element of ``base``

    Returns:
        Family of every subset of ``base`` that contains the smallest open
        set around ``point``. Always includes ``base`` itself.

    Raises:
        InvalidInputError: If ``base`` or ``topology`` is None, or ``point``
            is unhashable
        InvalidTopologyError: If ``topology`` is not a topology on ``base``
        PointNotInSetError: If ``point`` is not an element of ``base``
    """
    base = as_subset(base, name="base")
    topology = as_family(topology, name="topology")

    if not is_topology(topology, base):
        raise InvalidTopologyError("The given family is not a topology on the set.")
    if not _contains(base, point):
        raise PointNotInSetError(f"The set does not contain the point {point!r}.")

    smallest = minimal_open_set(topology, point)
    return frozenset(s for s in power_set(base) if smallest <= s)
