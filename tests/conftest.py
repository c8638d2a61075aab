"""Shared fixtures and helpers for graph tests."""

import pathlib
import sys

import numpy as np
import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from matgraph.core.graph import DirectedGraph  # noqa: E402

# ======================================================================
# FIXTURES
# ======================================================================


@pytest.fixture
def empty_graph():
    """Graph with the default capacity and nothing in it."""
    return DirectedGraph()


@pytest.fixture
def abc_graph():
    """A -> B (5), B -> C (3), plus a self-loop on C (1)."""
    G = DirectedGraph()
    for v in ("A", "B", "C"):
        G.add_vertex(v)
    G.add_edge("A", "B", 5)
    G.add_edge("B", "C", 3)
    G.add_edge("C", "C", 1)
    return G


# ======================================================================
# HELPERS
# ======================================================================


def assert_consistent(G):
    """Assert the structural invariants of a graph hold."""
    b = G._bijection
    # bijection is two-way consistent
    assert len(b.label_to_idx) == len(b.idx_to_label)
    for label, row in b.label_to_idx.items():
        assert b.idx_to_label[row] == label

    # matrix is large enough, rows are in range
    assert G.capacity >= G.vertex_size()
    for row in b.indices():
        assert 0 <= row < G.capacity

    # no live row is in the free list
    assert not (b.indices() & set(G._pool._free))
    assert G._pool.live_count == G.vertex_size()

    # non-zero cells only on live rows/cols
    live = b.indices()
    rows, cols = np.nonzero(G._matrix)
    for r, c in zip(rows, cols):
        assert r in live and c in live, f"stale cell at ({r}, {c})"

    # edge count matches the matrix
    assert G.edge_size() == int(np.count_nonzero(G._matrix))
    assert G.edge_size() == len(G.edges())


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
