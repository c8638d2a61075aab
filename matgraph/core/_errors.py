class MatGraphError(Exception):
    """Base class for every error raised by matgraph."""


class InvalidArgumentError(MatGraphError, ValueError):
    """Invalid input, e.g. a negative edge weight or a bad capacity."""


class NotFoundError(MatGraphError, KeyError):
    """Lookup against a label, index or snapshot that is not bound."""

    def __str__(self):
        # KeyError repr()s its message; keep it readable
        return str(self.args[0]) if self.args else ""


class DuplicateKeyError(MatGraphError, KeyError):
    """Insertion would bind a label or an index twice."""

    def __str__(self):
        return str(self.args[0]) if self.args else ""
