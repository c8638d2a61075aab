import numpy as np
import polars as pl
import scipy.sparse as sp


class ViewsClass:
    # Materialized views

    def _live_rows(self):
        """Live row indices in ascending order, with their labels."""
        rows = sorted(self._bijection.indices())
        labels = [self._bijection.get_label(r) for r in rows]
        return rows, labels

    def vertices_view(self):
        """Polars DF [DataFrame] of live vertices.

        Returns
        ---
        polars.DataFrame
            Columns: ``vertex`` (Object, the label) and ``row`` (Int64), ordered by row.

        """
        rows, labels = self._live_rows()
        return pl.DataFrame(
            [
                pl.Series("vertex", labels, dtype=pl.Object),
                pl.Series("row", rows, dtype=pl.Int64),
            ]
        )

    def edges_view(self):
        """Polars DF [DataFrame] of edges.

        Returns
        ---
        polars.DataFrame
            Columns: ``source``, ``target`` (Object) and ``weight`` (Int64),
            ordered by source row then target row.

        Notes
        -
        - Scans the live sub-matrix, so cost is quadratic in the vertex count.
        - Zero-weight edges are absent by construction.

        """
        rows, labels = self._live_rows()
        src, tgt, w = [], [], []
        if rows:
            sub = self._matrix[np.ix_(rows, rows)]
            ii, jj = np.nonzero(sub)
            src = [labels[i] for i in ii]
            tgt = [labels[j] for j in jj]
            w = sub[ii, jj].tolist()
        return pl.DataFrame(
            [
                pl.Series("source", src, dtype=pl.Object),
                pl.Series("target", tgt, dtype=pl.Object),
                pl.Series("weight", w, dtype=pl.Int64),
            ]
        )

    def adjacency_matrix(self, sparse: bool = False):
        """Weight matrix restricted to live vertices.

        Parameters
        --
        sparse : bool, optional (default=False)
            - If `True`, return a SciPy CSR (compressed sparse row) matrix.
            - If `False`, return a dense NumPy ndarray.

        Returns
        ---
        tuple[list, numpy.ndarray | scipy.sparse.csr_matrix]
            ``(labels, M)`` where ``labels[k]`` is the vertex of row/column ``k``
            of ``M``. ``M`` never shares memory with the graph.

        """
        rows, labels = self._live_rows()
        if rows:
            M = self._matrix[np.ix_(rows, rows)]  # fancy indexing copies
        else:
            M = np.zeros((0, 0), dtype=self._matrix.dtype)
        if sparse:
            return labels, sp.csr_matrix(M)
        return labels, M
