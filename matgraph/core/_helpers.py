import numbers
from typing import Any, NamedTuple

import numpy as np

from ._errors import InvalidArgumentError

_MAX_WEIGHT = np.iinfo(np.int64).max


class Edge(NamedTuple):
    """A weighted directed edge, as returned by ``DirectedGraph.edges()``."""

    source: Any
    destination: Any
    weight: int


def _check_weight(weight) -> int:
    """Validate an edge weight: a non-negative integer (``bool`` excluded)."""
    if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
        raise InvalidArgumentError(f"Edge weight must be an integer, got {type(weight).__name__}")
    if weight < 0:
        raise InvalidArgumentError(f"Negative edge weights are not supported: {weight}")
    if weight > _MAX_WEIGHT:
        raise InvalidArgumentError(f"Edge weight {weight} does not fit in int64")
    return int(weight)


def _check_capacity(capacity) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, numbers.Integral):
        raise InvalidArgumentError(f"Capacity must be an integer, got {type(capacity).__name__}")
    if capacity < 0:
        raise InvalidArgumentError(f"Capacity must be non-negative: {capacity}")
    return int(capacity)
