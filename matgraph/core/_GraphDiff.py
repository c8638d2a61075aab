class GraphDiff:
    """Vertex and edge changes between two snapshots of a ``DirectedGraph``.

    Attributes
    --
    vertices_added, vertices_removed : set
        Labels present only in the newer / only in the older snapshot.
    edges_added, edges_removed : set[Edge]
        ``Edge`` triples present only in the newer / only in the older snapshot.

    Notes
    -
    - Edges compare as ``(source, destination, weight)``, so an edge whose
      weight changed shows up once as removed and once as added.

    """

    def __init__(self, snapshot_a, snapshot_b):
        self.snapshot_a = snapshot_a
        self.snapshot_b = snapshot_b

        old_v, new_v = snapshot_a["vertices"], snapshot_b["vertices"]
        old_e, new_e = snapshot_a["edges"], snapshot_b["edges"]
        self.vertices_added = new_v - old_v
        self.vertices_removed = old_v - new_v
        self.edges_added = new_e - old_e
        self.edges_removed = old_e - new_e

    def summary(self):
        """Three-line report: header, vertex delta, edge delta."""
        a, b = self.snapshot_a["label"], self.snapshot_b["label"]
        return "\n".join(
            [
                f"Diff: {a} - {b}",
                f"Vertices: {len(self.vertices_added):+d} added, {len(self.vertices_removed)} removed",
                f"Edges: {len(self.edges_added):+d} added, {len(self.edges_removed)} removed",
            ]
        )

    def is_empty(self):
        return not (
            self.vertices_added or self.vertices_removed or self.edges_added or self.edges_removed
        )

    def __repr__(self):
        return self.summary()

    def to_dict(self):
        """Lists instead of sets; edges become plain ``(source, destination, weight)`` tuples."""
        return {
            "snapshot_a": self.snapshot_a["label"],
            "snapshot_b": self.snapshot_b["label"],
            "vertices_added": list(self.vertices_added),
            "vertices_removed": list(self.vertices_removed),
            "edges_added": [tuple(e) for e in self.edges_added],
            "edges_removed": [tuple(e) for e in self.edges_removed],
        }
