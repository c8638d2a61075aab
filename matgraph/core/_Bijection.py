from collections.abc import Hashable
from typing import Generic, TypeVar

from ._errors import DuplicateKeyError, NotFoundError

V = TypeVar("V", bound=Hashable)


class Bijection(Generic[V]):
    """Two-way mapping between vertex labels and matrix row indices.

    Parameters
    --
    None

    Notes
    -
    - ``label_to_idx`` and ``idx_to_label`` are kept mutually consistent: every
      ``(label, idx)`` pair in one has ``(idx, label)`` in the other.
    - Pairs are never rebound in place. Remove a label, then add it again.
    - Accessors that expose the key set return fresh containers.

    """

    def __init__(self):
        self.label_to_idx: dict[V, int] = {}  # label -> row index
        self.idx_to_label: dict[int, V] = {}  # row index -> label

    # ==================== Mutation ====================

    def add(self, label: V, index: int) -> None:
        """Bind ``label`` to ``index``.

        Raises
        --
        DuplicateKeyError
            If either the label or the index is already bound.

        """
        if label in self.label_to_idx:
            raise DuplicateKeyError(f"Label {label!r} already bound to {self.label_to_idx[label]}")
        if index in self.idx_to_label:
            raise DuplicateKeyError(f"Index {index} already bound to {self.idx_to_label[index]!r}")
        self.label_to_idx[label] = index
        self.idx_to_label[index] = label

    def remove_by_label(self, label: V) -> int:
        """Unbind ``label`` and return the index it held.

        Raises
        --
        NotFoundError
            If the label is not bound.

        """
        if label not in self.label_to_idx:
            raise NotFoundError(f"Label {label!r} not found")
        index = self.label_to_idx.pop(label)
        del self.idx_to_label[index]
        return index

    def clear(self) -> None:
        """Drop every pair, both directions."""
        self.label_to_idx.clear()
        self.idx_to_label.clear()

    # ==================== Lookup ====================

    def get_index(self, label: V) -> int:
        """Map label to row index."""
        if label not in self.label_to_idx:
            raise NotFoundError(f"Label {label!r} not found")
        return self.label_to_idx[label]

    def get_label(self, index: int) -> V:
        """Map row index to label."""
        if index not in self.idx_to_label:
            raise NotFoundError(f"Index {index} not found")
        return self.idx_to_label[index]

    def contains_label(self, label: V) -> bool:
        return label in self.label_to_idx

    def contains_index(self, index: int) -> bool:
        return index in self.idx_to_label

    def keys(self) -> set[V]:
        """Snapshot of the bound labels."""
        return set(self.label_to_idx)

    def indices(self) -> set[int]:
        """Snapshot of the bound indices."""
        return set(self.idx_to_label)

    def items(self) -> list[tuple[V, int]]:
        """Snapshot of ``(label, index)`` pairs, in insertion order."""
        return list(self.label_to_idx.items())

    # ==================== Dunder ====================

    def __contains__(self, label) -> bool:
        return label in self.label_to_idx

    def __len__(self) -> int:
        return len(self.label_to_idx)

    def __iter__(self):
        return iter(list(self.label_to_idx))

    def __repr__(self):
        pairs = ", ".join(f"{k!r}<->{v}" for k, v in self.label_to_idx.items())
        return f"Bijection({{{pairs}}})"
