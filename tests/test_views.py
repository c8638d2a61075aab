import numpy as np
import polars as pl
import pytest
import scipy.sparse as sp

from matgraph.core._errors import NotFoundError
from matgraph.core.graph import DirectedGraph


class TestDataFrameViews:
    def test_vertices_view(self, abc_graph):
        df = abc_graph.vertices_view()
        assert isinstance(df, pl.DataFrame)
        assert df.columns == ["vertex", "row"]
        assert df["vertex"].to_list() == ["A", "B", "C"]
        assert df["row"].to_list() == [0, 1, 2]

    def test_edges_view(self, abc_graph):
        df = abc_graph.edges_view()
        assert df.columns == ["source", "target", "weight"]
        assert df.height == 3
        triples = list(zip(df["source"].to_list(), df["target"].to_list(), df["weight"].to_list()))
        # ordered by source row, then target row
        assert triples == [("A", "B", 5), ("B", "C", 3), ("C", "C", 1)]

    def test_empty_views(self, empty_graph):
        assert empty_graph.vertices_view().height == 0
        assert empty_graph.edges_view().height == 0
        assert empty_graph.edges_view().columns == ["source", "target", "weight"]

    def test_views_follow_reused_rows(self, abc_graph):
        abc_graph.remove_vertex("A")
        abc_graph.add_vertex("Z")  # takes row 0
        df = abc_graph.vertices_view()
        assert df["vertex"].to_list() == ["Z", "B", "C"]
        assert abc_graph.edges_view().height == 2


class TestAdjacencyExport:
    def test_dense_adjacency_is_copy(self, abc_graph):
        labels, M = abc_graph.adjacency_matrix()
        assert labels == ["A", "B", "C"]
        np.testing.assert_array_equal(M, np.array([[0, 5, 0], [0, 0, 3], [0, 0, 1]]))
        M[0, 1] = 99
        assert abc_graph.edge_weight("A", "B") == 5

    def test_sparse_adjacency(self, abc_graph):
        labels, M = abc_graph.adjacency_matrix(sparse=True)
        assert sp.issparse(M)
        assert M.nnz == 3
        assert M[1, 2] == 3

    def test_adjacency_skips_freed_rows(self, abc_graph):
        abc_graph.remove_vertex("B")
        labels, M = abc_graph.adjacency_matrix()
        assert labels == ["A", "C"]
        assert M.shape == (2, 2)
        assert M[1, 1] == 1

    def test_empty_adjacency(self, empty_graph):
        labels, M = empty_graph.adjacency_matrix()
        assert labels == []
        assert M.shape == (0, 0)


class TestIndexManager:
    def test_lookups(self, abc_graph):
        idx = abc_graph.idx
        assert idx is abc_graph.idx
        assert idx.label_to_row("B") == 1
        assert idx.row_to_label(2) == "C"
        assert idx.rows_to_labels([2, 0]) == ["C", "A"]
        assert idx.has_label("A") and not idx.has_label("Q")
        assert idx.has_row(0) and not idx.has_row(5)
        with pytest.raises(NotFoundError):
            idx.label_to_row("Q")
        with pytest.raises(NotFoundError):
            idx.row_to_label(5)

    def test_next_row_and_stats(self, abc_graph):
        assert abc_graph.idx.next_row() == 3
        abc_graph.remove_vertex("B")
        assert abc_graph.idx.next_row() == 1
        assert abc_graph.idx.stats() == {
            "n_vertices": 2,
            "n_edges": 1,
            "capacity": 10,
            "high_water": 3,
            "n_free": 1,
            "max_row": 2,
        }

    def test_stats_empty(self, empty_graph):
        assert empty_graph.idx.stats()["max_row"] == -1


class TestCacheManager:
    def test_csr_cached_until_mutation(self, abc_graph):
        cache = abc_graph.cache
        assert not cache.has_csr()
        csr = cache.csr
        assert cache.has_csr()
        assert cache.csr is csr
        assert csr.shape == (3, 3)
        assert csr[0, 1] == 5

        abc_graph.add_edge("A", "C", 8)
        assert not cache.has_csr()
        assert cache.csr[0, 2] == 8

    def test_csc_and_invalidate(self, abc_graph):
        cache = abc_graph.cache
        csc = cache.csc
        assert sp.issparse(csc)
        assert csc[1, 2] == 3
        cache.invalidate()
        assert not cache.has_csc()

    def test_removed_rows_are_empty(self, abc_graph):
        abc_graph.remove_vertex("A")
        csr = abc_graph.cache.csr
        assert csr.shape == (3, 3)  # dimension is the high-water mark
        assert csr.getrow(0).nnz == 0
        assert csr.nnz == abc_graph.edge_size()

    def test_cache_on_empty_graph(self):
        G = DirectedGraph(0)
        assert G.cache.csr.shape == (0, 0)
