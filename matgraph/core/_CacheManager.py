import scipy.sparse as sp


class CacheManager:
    """Cache manager for materialized sparse views (CSR/CSC) of the adjacency."""

    def __init__(self, graph):
        self._G = graph
        self._csr = None
        self._csc = None
        self._csr_version = None
        self._csc_version = None

    def _live_coo(self):
        # Dimension is the high-water mark so every live row keeps its index;
        # freed rows are all-zero.
        G = self._G
        n = G._pool.high_water
        return sp.coo_matrix(G._matrix[:n, :n])

    # ==================== CSR/CSC Properties ====================

    @property
    def csr(self):
        """Get CSR (Compressed Sparse Row) format.
        Builds and caches on first access.
        """
        if self._csr is None or self._csr_version != self._G._version:
            self._csr = self._live_coo().tocsr()
            self._csr_version = self._G._version
        return self._csr

    @property
    def csc(self):
        """Get CSC (Compressed Sparse Column) format.
        Builds and caches on first access.
        """
        if self._csc is None or self._csc_version != self._G._version:
            self._csc = self._live_coo().tocsc()
            self._csc_version = self._G._version
        return self._csc

    def has_csr(self) -> bool:
        """True if CSR cache exists and matches current graph version."""
        return self._csr is not None and self._csr_version == self._G._version

    def has_csc(self) -> bool:
        """True if CSC cache exists and matches current graph version."""
        return self._csc is not None and self._csc_version == self._G._version

    def invalidate(self):
        """Drop every cached matrix."""
        self._csr = None
        self._csc = None
        self._csr_version = None
        self._csc_version = None
