"""Structural equality for subsets and families of subsets.

A Subset is a ``frozenset`` of hashable elements and a Family is a
``frozenset`` of Subsets. Two values built from the same members compare
equal and hash equal regardless of construction order, on both levels.
The helpers here turn arbitrary caller input (lists, sets, nested sets)
into those canonical values.

SubsetCodec gives the bitmask view of subsets over a fixed element order,
which turns family membership into integer set lookups.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Hashable, Iterable, Iterator, Tuple

from .errors import InvalidInputError

Subset = FrozenSet[Hashable]
Family = FrozenSet[Subset]

# Containers that are compared by their members; anything else is an element.
_CONTAINER_TYPES = (set, frozenset, list)


def canonical(value: Any) -> Any:
    """Recursively convert nested containers into frozensets."""
    if isinstance(value, _CONTAINER_TYPES):
        return frozenset(canonical(v) for v in value)
    return value


def equal(a: Any, b: Any) -> bool:
    """True iff ``a`` and ``b`` hold exactly the same members, recursively."""
    return canonical(a) == canonical(b)


def structural_hash(value: Any) -> int:
    """Order-independent hash consistent with :func:`equal`."""
    return hash(canonical(value))


def as_subset(values: Iterable[Hashable], name: str = "set") -> Subset:
    """Normalize an iterable of elements into a Subset.

    Raises:
        InvalidInputError: If ``values`` is None or holds unhashable elements
    """
    if values is None:
        raise InvalidInputError(f"{name} must not be None")
    try:
        return frozenset(values)
    except TypeError as e:
        raise InvalidInputError(f"{name} must contain hashable elements: {e}") from e


def as_family(values: Iterable[Iterable[Hashable]], name: str = "family") -> Family:
    """Normalize an iterable of iterables into a Family."""
    if values is None:
        raise InvalidInputError(f"{name} must not be None")
    return frozenset(as_subset(v, name=f"member of {name}") for v in values)


@dataclass(frozen=True)
class SubsetCodec:
    """Bijection between subsets of a base set and integer bitmasks.

    Bit ``j`` of a mask stands for ``elements[j]``. The element order is
    fixed for the lifetime of the codec only and carries no meaning.

    Attributes:
        elements: Base set elements in bit order
        full: Mask of the whole base set
    """
    elements: Tuple[Hashable, ...]
    full: int = field(init=False)
    _index: Dict[Hashable, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'full', (1 << len(self.elements)) - 1)
        object.__setattr__(self, '_index', {e: j for j, e in enumerate(self.elements)})

    @classmethod
    def for_set(cls, base: Iterable[Hashable]) -> "SubsetCodec":
        return cls(elements=tuple(as_subset(base)))

    def __len__(self) -> int:
        return len(self.elements)

    def covers(self, subset: Iterable[Hashable]) -> bool:
        """True iff every element of ``subset`` belongs to the base set."""
        return all(e in self._index for e in subset)

    def encode(self, subset: Iterable[Hashable]) -> int:
        """Mask of ``subset``. Raises KeyError for elements outside the base set."""
        mask = 0
        for e in subset:
            mask |= 1 << self._index[e]
        return mask

    def decode(self, mask: int) -> Subset:
        return frozenset(e for j, e in enumerate(self.elements) if mask >> j & 1)

    def bit(self, element: Hashable) -> int:
        return 1 << self._index[element]

    def masks(self) -> Iterator[int]:
        """All masks of the base set, from the empty subset to the full one."""
        return iter(range(self.full + 1))
