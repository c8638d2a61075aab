from ._errors import InvalidArgumentError


class IndexPool:
    """Free-list allocator over a dense ``0..n`` row index space.

    Released indices are reused last-in first-out; when none are free the
    next never-used index (the high-water mark) is handed out. Keeping reuse
    ahead of fresh allocation bounds how far the weight matrix has to grow.
    """

    def __init__(self):
        self._free: list[int] = []
        self._free_set: set[int] = set()
        self._high_water = 0

    def acquire(self) -> int:
        """Return a free index, preferring the most recently released one."""
        if self._free:
            index = self._free.pop()
            self._free_set.discard(index)
            return index
        index = self._high_water
        self._high_water += 1
        return index

    def release(self, index: int) -> None:
        """Give ``index`` back to the pool.

        Raises
        --
        InvalidArgumentError
            If the index was never handed out or is already free.

        """
        if not 0 <= index < self._high_water:
            raise InvalidArgumentError(f"Index {index} was never allocated")
        if index in self._free_set:
            raise InvalidArgumentError(f"Index {index} is already free")
        self._free.append(index)
        self._free_set.add(index)

    def peek(self) -> int:
        """Index the next ``acquire()`` would return (no allocation)."""
        return self._free[-1] if self._free else self._high_water

    def reset(self) -> None:
        self._free.clear()
        self._free_set.clear()
        self._high_water = 0

    def copy(self) -> "IndexPool":
        new = IndexPool()
        new._free = list(self._free)
        new._free_set = set(self._free_set)
        new._high_water = self._high_water
        return new

    @property
    def high_water(self) -> int:
        return self._high_water

    @property
    def free_count(self) -> int:
        return len(self._free)

    @property
    def live_count(self) -> int:
        """Indices handed out and not yet released."""
        return self._high_water - len(self._free)

    def __repr__(self):
        return f"IndexPool(high_water={self._high_water}, free={self._free})"
