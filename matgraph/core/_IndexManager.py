class IndexManager:
    """Namespace for index operations.
    Provides clean API over the graph's bijection and index pool.
    """

    def __init__(self, graph):
        self._G = graph

    # ==================== Label <-> Row ====================

    def label_to_row(self, label):
        """Map vertex label to matrix row index."""
        return self._G._bijection.get_index(label)

    def row_to_label(self, row):
        """Map matrix row index to vertex label."""
        return self._G._bijection.get_label(row)

    def labels_to_rows(self, labels):
        """Batch convert labels to row indices."""
        return [self._G._bijection.get_index(lbl) for lbl in labels]

    def rows_to_labels(self, rows):
        """Batch convert row indices to labels."""
        return [self._G._bijection.get_label(r) for r in rows]

    # ==================== Utilities ====================

    def has_label(self, label) -> bool:
        return self._G._bijection.contains_label(label)

    def has_row(self, row) -> bool:
        """True if ``row`` currently belongs to a live vertex."""
        return self._G._bijection.contains_index(row)

    def next_row(self) -> int:
        """Row the next inserted vertex will receive."""
        return self._G._pool.peek()

    def stats(self):
        """Get index statistics."""
        rows = self._G._bijection.indices()
        return {
            "n_vertices": self._G.vertex_size(),
            "n_edges": self._G.edge_size(),
            "capacity": self._G.capacity,
            "high_water": self._G._pool.high_water,
            "n_free": self._G._pool.free_count,
            "max_row": max(rows) if rows else -1,
        }
