"""Topology axiom verification.

A family t of subsets of X is a topology on X when:
    1. Both the empty set and X belong to t.
    2. Any union of members of t belongs to t.
    3. Any finite intersection of members of t belongs to t.

For a finite family, closure under pairwise union and intersection
implies both closure axioms by induction, so checking every pair is
enough. Subsets are compared as bitmasks over a fixed element order,
which makes each membership test a single integer set lookup.
"""

from __future__ import annotations
from typing import AbstractSet, Hashable, Iterable

from .set_comparer import SubsetCodec, as_family, as_subset


def is_closed(masks: AbstractSet[int], full: int) -> bool:
    """Check the topology axioms on a family given as subset masks.

    Args:
        masks: Members of the candidate family, one mask per subset
        full: Mask of the base set

    Returns:
        True iff ``masks`` contains 0 and ``full`` and is closed under
        pairwise ``|`` and ``&``
    """
    if full not in masks or 0 not in masks:
        return False
    for a in masks:
        for b in masks:
            if a | b not in masks or a & b not in masks:
                return False
    return True


def is_topology(
    candidate: Iterable[Iterable[Hashable]],
    base: Iterable[Hashable],
) -> bool:
    """Determine whether ``candidate`` is a topology on ``base``.

    Runs in O(len(candidate)**2) mask operations.

    Args:
        candidate: Family of subsets to check (any iterable of iterables)
        base: The set the candidate is defined on

    Returns:
        True if ``candidate`` is a topology on ``base``. A candidate with a
        member that is not a subset of ``base`` is not a topology.

    Raises:
        InvalidInputError: If either argument is None or holds unhashable
            elements
    """
    base = as_subset(base, name="base")
    candidate = as_family(candidate, name="candidate")

    codec = SubsetCodec.for_set(base)
    if not all(codec.covers(member) for member in candidate):
        return False
    return is_closed({codec.encode(member) for member in candidate}, codec.full)
