import copy
from collections.abc import Hashable
from typing import Generic, TypeVar

import numpy as np

from ._Bijection import Bijection
from ._CacheManager import CacheManager
from ._History import History
from ._IndexManager import IndexManager
from ._IndexPool import IndexPool
from ._Views import ViewsClass
from ._helpers import Edge, _check_capacity, _check_weight

V = TypeVar("V", bound=Hashable)

# ===================================


class DirectedGraph(History, ViewsClass, Generic[V]):
    """Dense adjacency-matrix directed graph over arbitrary hashable labels.

    Labels are translated to matrix rows through a ``Bijection``; rows freed by
    vertex removal go back to an ``IndexPool`` and are reused before the matrix
    is grown. The matrix is a square ``numpy.int64`` array.

    Parameters
    --
    capacity : int, optional
        Initial matrix dimension (default 10). Must be a non-negative integer.
    history : bool, optional
        Record mutations in the in-memory history log (default True).

    Notes
    -
    - A zero cell means "no edge". A weight of 0 therefore cannot be stored:
      ``add_edge(u, v, 0)`` succeeds but the edge reads as absent.
    - Capacity grows by exactly one, and only when every row is in use.
    - ``clear()`` keeps the capacity.
    - Boolean operations return False for "not applicable" (duplicate vertex,
      absent endpoint, existing or missing edge); only invalid input and
      lookups on absent vertices raise.

    See Also

    add_vertex, add_edge, remove_vertex, remove_edge, edges_view, history

    """

    DEFAULT_CAPACITY = 10

    # Construction

    def __init__(self, capacity: int = DEFAULT_CAPACITY, *, history: bool = True):
        capacity = _check_capacity(capacity)

        self._bijection: Bijection[V] = Bijection()
        self._pool = IndexPool()
        self._matrix = np.zeros((capacity, capacity), dtype=np.int64)
        self._edge_count = 0

        # History and Timeline
        self._init_history(history)

    @property
    def capacity(self) -> int:
        """Current matrix dimension (never shrinks)."""
        return self._matrix.shape[0]

    def _grow(self):
        # copy into a (n+1)x(n+1) matrix; every weight keeps its (row, col)
        n = self.capacity
        grown = np.zeros((n + 1, n + 1), dtype=self._matrix.dtype)
        grown[:n, :n] = self._matrix
        self._matrix = grown

    def _rows(self, source, destination):
        """Row indices of both endpoints, or None if either is absent."""
        b = self._bijection
        if source not in b or destination not in b:
            return None
        return b.get_index(source), b.get_index(destination)

    # Vertices

    def add_vertex(self, vertex: V) -> bool:
        """Add a vertex.

        Parameters
        --
        vertex : hashable
            Vertex label.

        Returns
        ---
        bool
            False if the label was already present (no change), True otherwise.

        """
        if vertex in self._bijection:
            return False

        if self.capacity == self.vertex_size():
            self._grow()

        row = self._pool.acquire()
        self._bijection.add(vertex, row)
        return True

    def remove_vertex(self, vertex: V) -> bool:
        """Remove a vertex and every edge into or out of it.

        Returns
        ---
        bool
            False if the vertex is absent.

        Notes
        -
        - The row and column are zeroed before the row goes back to the pool,
          so a vertex that later reuses the row starts with no edges.

        """
        if vertex not in self._bijection:
            return False

        row = self._bijection.remove_by_label(vertex)
        M = self._matrix
        incident = np.count_nonzero(M[row, :]) + np.count_nonzero(M[:, row])
        if M[row, row] != 0:
            incident -= 1  # self-loop counted in both
        M[row, :] = 0
        M[:, row] = 0
        self._pool.release(row)
        self._edge_count -= int(incident)
        return True

    def contains_vertex(self, label: V) -> bool:
        return self._bijection.contains_label(label)

    def vertices(self) -> set[V]:
        """Independent copy of the live vertex labels."""
        return self._bijection.keys()

    def vertex_size(self) -> int:
        return len(self._bijection)

    # Edges

    def add_edge(self, source: V, destination: V, weight: int) -> bool:
        """Add a directed weighted edge ``source -> destination``.

        Parameters
        --
        source, destination : hashable
            Existing vertex labels. ``source == destination`` is a self-loop.
        weight : int
            Non-negative integer weight.

        Returns
        ---
        bool
            False if an endpoint is missing or the edge already exists. Remove
            the edge first to change its weight.

        Raises
        --
        InvalidArgumentError
            If ``weight`` is negative or not an integer. Checked before anything else.

        Notes
        -
        - ``weight == 0`` returns True but stores nothing: the edge stays absent
          and the edge count is unchanged.

        """
        weight = _check_weight(weight)
        rows = self._rows(source, destination)
        if rows is None:
            return False
        i, j = rows
        if self._matrix[i, j] != 0:
            return False
        if weight:
            self._matrix[i, j] = weight
            self._edge_count += 1
        return True

    def remove_edge(self, source: V, destination: V) -> bool:
        rows = self._rows(source, destination)
        if rows is None:
            return False
        i, j = rows
        if self._matrix[i, j] == 0:
            return False
        self._matrix[i, j] = 0
        self._edge_count -= 1
        return True

    def contains_edge(self, source: V, destination: V) -> bool:
        rows = self._rows(source, destination)
        if rows is None:
            return False
        return bool(self._matrix[rows] != 0)

    def edge_weight(self, source: V, destination: V) -> int:
        """Weight of ``source -> destination``; 0 when both exist but no edge does.

        Raises
        --
        NotFoundError
            If either endpoint is not a vertex.

        """
        i = self._bijection.get_index(source)
        j = self._bijection.get_index(destination)
        return int(self._matrix[i, j])

    def edge_size(self) -> int:
        return self._edge_count

    def edges(self) -> set[Edge]:
        """All edges as ``Edge(source, destination, weight)`` triples.

        Notes
        -
        - Visits every ordered pair of live vertices: O(vertex_count**2), which
          is inherent to dense-matrix storage.
        - The returned set is a fresh container.

        """
        rows, labels = self._live_rows()
        if not rows:
            return set()
        sub = self._matrix[np.ix_(rows, rows)]
        ii, jj = np.nonzero(sub)
        return {Edge(labels[i], labels[j], int(sub[i, j])) for i, j in zip(ii, jj)}

    # Neighbourhood

    def successors(self, label: V) -> set[V]:
        """Labels reachable over one outgoing edge."""
        row = self._bijection.get_index(label)
        return {self._bijection.get_label(int(c)) for c in np.flatnonzero(self._matrix[row, :])}

    def predecessors(self, label: V) -> set[V]:
        """Labels with an edge into ``label``."""
        col = self._bijection.get_index(label)
        return {self._bijection.get_label(int(r)) for r in np.flatnonzero(self._matrix[:, col])}

    def out_degree(self, label: V) -> int:
        return int(np.count_nonzero(self._matrix[self._bijection.get_index(label), :]))

    def in_degree(self, label: V) -> int:
        return int(np.count_nonzero(self._matrix[:, self._bijection.get_index(label)]))

    # Whole graph

    def clear(self) -> None:
        """Remove every vertex and edge. Capacity is retained."""
        self._bijection.clear()
        self._pool.reset()
        self._matrix[:, :] = 0
        self._edge_count = 0

    def copy(self, history: bool = False) -> "DirectedGraph[V]":
        """Deep copy of the graph.

        Parameters
        --
        history : bool, default False
            Also copy the mutation log, the snapshots and the version counter.

        Notes
        -
        - The copy gets its own history hooks, so its mutators act on the copy.
          ``copy.copy`` and ``copy.deepcopy`` go through here with ``history=True``.

        """
        new = type(self)(0, history=self._history_enabled)
        new._matrix = self._matrix.copy()
        for label, row in self._bijection.items():
            new._bijection.add(label, row)
        new._pool = self._pool.copy()
        new._edge_count = self._edge_count
        if history:
            new._history = copy.deepcopy(self._history)
            new._snapshots = [
                {**snap, "vertices": set(snap["vertices"]), "edges": set(snap["edges"])}
                for snap in self._snapshots
            ]
            new._version = self._version
        return new

    def __copy__(self):
        return self.copy(history=True)

    def __deepcopy__(self, memo):
        new = self.copy(history=True)
        memo[id(self)] = new
        return new

    # Namespaces

    @property
    def idx(self):
        """Index lookups (label <-> row)."""
        if not hasattr(self, "_index_manager"):
            self._index_manager = IndexManager(self)
        return self._index_manager

    @property
    def cache(self):
        """Cache management (CSR/CSC materialization)."""
        if not hasattr(self, "_cache_manager"):
            self._cache_manager = CacheManager(self)
        return self._cache_manager

    # Dunder

    def __contains__(self, label) -> bool:
        return label in self._bijection

    def __len__(self) -> int:
        return len(self._bijection)

    def __repr__(self):
        # debug only; not a serialization format
        matrix = np.array2string(self._matrix, separator=", ")
        return (
            f"DirectedGraph(bijection={self._bijection!r}, pool={self._pool!r}, "
            f"matrix={matrix}, edge_count={self._edge_count})"
        )
