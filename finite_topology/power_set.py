"""Power set generation over a finite base set."""

from __future__ import annotations
from typing import Hashable, Iterable, Iterator

from .set_comparer import Family, Subset, SubsetCodec, as_subset


def iter_subsets(codec: SubsetCodec) -> Iterator[Subset]:
    """Yield every subset of the codec's base set in mask order.

    Subset ``i`` holds ``elements[j]`` iff bit ``j`` of ``i`` is set, so the
    first subset is empty and the last one is the whole base set.
    """
    for i in codec.masks():
        yield codec.decode(i)


def power_set(base: Iterable[Hashable]) -> Family:
    """Return the family of all ``2**len(base)`` subsets of ``base``.

    Args:
        base: Finite collection of hashable elements

    Returns:
        Family containing the empty subset, ``base`` itself and every
        subset in between

    Raises:
        InvalidInputError: If ``base`` is None
    """
    codec = SubsetCodec.for_set(as_subset(base))
    return frozenset(iter_subsets(codec))
