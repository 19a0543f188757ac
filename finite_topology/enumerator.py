"""Brute-force enumeration of all topologies on a finite set.

Every topology on S contains the empty set and S, so the search runs over
the remaining 2**|S| - 2 subsets only. Candidate ``i`` holds reduced
power set member ``j`` iff bit ``j`` of ``i`` is set; the two trivial
members are added back to every candidate before it is verified.

Search space by set size (reduced / full):
    |S| = 3:  64 / 256
    |S| = 4:  16,384 / 65,536
    |S| = 5:  1,073,741,824 / 4,294,967,296

Distinct ``i`` give distinct families, so no deduplication is needed.
The order of the yielded topologies is deterministic for a given input
but carries no meaning.

Usage:
    token = CancellationToken()
    for t in topologies({'a', 'b', 'c'}, progress=print, token=token):
        ...
    token.cancel()  # from another thread, stops the loop at its next check
"""

from __future__ import annotations
import logging
import threading
import warnings
from dataclasses import dataclass
from typing import Callable, Hashable, Iterable, Iterator, List, Optional

from .errors import EnumerationCancelled, InvalidInputError, SizeLimitError
from .power_set import iter_subsets
from .set_comparer import Family, SubsetCodec, as_subset
from .verifier import is_closed

logger = logging.getLogger(__name__)

# 2**(2**6 - 2) candidates is far beyond reach.
MAX_SET_SIZE = 5

# Number of topologies on an n-point set, n = 0..5 (OEIS A000798).
KNOWN_TOPOLOGY_COUNTS = (1, 1, 4, 29, 355, 6942)

ProgressSink = Callable[[float], None]


@dataclass(frozen=True)
class EnumerationConfig:
    """Parameters for topology enumeration.

    Attributes:
        max_size: Largest base set accepted (at most MAX_SET_SIZE)
        progress_interval: Report progress once every this many candidates
    """
    max_size: int = MAX_SET_SIZE
    progress_interval: int = 100

    def __post_init__(self):
        if not 0 <= self.max_size <= MAX_SET_SIZE:
            raise InvalidInputError(
                f"max_size must be between 0 and {MAX_SET_SIZE}, got {self.max_size}"
            )
        if self.progress_interval < 1:
            raise InvalidInputError(
                f"progress_interval must be positive, got {self.progress_interval}"
            )


class CancellationToken:
    """One-shot cancellation flag shared between a caller and an enumeration.

    Once cancelled, a token stays cancelled. Safe to trigger from another
    thread.
    """

    def __init__(self):
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self, iterations: int = 0) -> None:
        if self._event.is_set():
            raise EnumerationCancelled(iterations)

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"


def _reduced_power_set(codec: SubsetCodec) -> List[int]:
    """Masks of every subset except the empty set and the base set."""
    return [
        codec.encode(s) for s in iter_subsets(codec)
        if 0 < len(s) < len(codec)
    ]


def _search(
    codec: SubsetCodec,
    progress: Optional[ProgressSink],
    token: Optional[CancellationToken],
    interval: int,
) -> Iterator[Family]:
    if progress is not None:
        progress(0.0)

    members = _reduced_power_set(codec)
    trivial = {0, codec.full}
    n = 1 << len(members)
    logger.debug("Searching %d candidate families on %d elements", n, len(codec))

    found = 0
    try:
        for i in range(n):
            if token is not None:
                token.raise_if_cancelled(i)
            if progress is not None and i % interval == 0:
                progress(100.0 * i / n)

            candidate = set(trivial)
            for j, mask in enumerate(members):
                if i >> j & 1:
                    candidate.add(mask)

            if is_closed(candidate, codec.full):
                found += 1
                yield frozenset(codec.decode(m) for m in candidate)
    except EnumerationCancelled as e:
        logger.debug("Enumeration cancelled after %d candidates", e.iterations)
        raise
    else:
        logger.debug("Enumeration finished: %d topologies", found)
    finally:
        if progress is not None:
            progress(0.0)


def topologies(
    base: Iterable[Hashable],
    progress: Optional[ProgressSink] = None,
    token: Optional[CancellationToken] = None,
    config: Optional[EnumerationConfig] = None,
) -> Iterator[Family]:
    """Generate every topology on ``base``.

    Arguments are validated immediately; the search itself runs lazily
    as the returned iterator is consumed. Each call starts a fresh search.

    Args:
        base: Finite set of hashable elements (at most config.max_size)
        progress: Optional sink receiving percent complete in [0, 100].
            Receives 0 before the search, every ``progress_interval``
            candidates, and 0 again once the search ends for any reason.
        token: Optional cancellation token checked before every candidate
        config: Enumeration parameters (defaults if None)

    Returns:
        Iterator over the topologies on ``base``, each a Family

    Raises:
        InvalidInputError: If ``base`` is None
        SizeLimitError: If ``base`` has more than ``config.max_size`` elements
        EnumerationCancelled: While iterating, once ``token`` is cancelled
    """
    base = as_subset(base, name="base")
    config = config or EnumerationConfig()
    if len(base) > config.max_size:
        raise SizeLimitError(len(base), config.max_size)
    if len(base) == MAX_SET_SIZE:
        warnings.warn(
            f"Enumerating topologies on {MAX_SET_SIZE} elements examines "
            f"2**{2 ** MAX_SET_SIZE - 2} candidates and is very slow.",
            RuntimeWarning,
            stacklevel=2,
        )
    codec = SubsetCodec.for_set(base)
    return _search(codec, progress, token, config.progress_interval)


def count_topologies(
    base: Iterable[Hashable],
    progress: Optional[ProgressSink] = None,
    token: Optional[CancellationToken] = None,
    config: Optional[EnumerationConfig] = None,
) -> int:
    """Count the topologies on ``base`` without keeping them."""
    return sum(1 for _ in topologies(base, progress, token, config))
