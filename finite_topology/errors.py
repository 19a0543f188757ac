"""Error taxonomy for finite topology computations.

Every error is raised at the boundary of the operation that receives the
bad input, before any computation starts. A ``False`` result from
``is_topology`` always means "not a topology", never "bad input".

- InvalidInputError: missing argument, unhashable element, bad config
- SizeLimitError: base set too large to enumerate
- InvalidTopologyError: family fails the topology axioms where one is required
- PointNotInSetError: point is not an element of the base set
- EnumerationCancelled: cooperative cancellation of an enumeration
"""

from __future__ import annotations


class TopologyError(Exception):
    """Base class for all finite topology errors."""
    pass


class InvalidInputError(TopologyError, ValueError):
    """Raised when a required argument is missing or malformed."""
    pass


class SizeLimitError(TopologyError, ValueError):
    """Raised when a base set exceeds the supported enumeration size."""

    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Set has {size} elements; enumeration supports at most {limit}."
        )
        self.size = size
        self.limit = limit


class InvalidTopologyError(TopologyError, ValueError):
    """Raised when a family is not a topology on the given set."""
    pass


class PointNotInSetError(TopologyError, KeyError):
    """Raised when a point is not an element of the base set."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class EnumerationCancelled(TopologyError):
    """Raised when an enumeration stops because cancellation was requested.

    Attributes:
        iterations: Number of candidate families examined before stopping
    """

    def __init__(self, iterations: int = 0):
        super().__init__(f"Enumeration cancelled after {iterations} candidates.")
        self.iterations = iterations
