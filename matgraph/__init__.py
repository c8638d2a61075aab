# matgraph/__init__.py
"""matgraph: single import, full API."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "core": "matgraph.core",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "DirectedGraph": ("matgraph.core.graph", "DirectedGraph"),
    "Bijection": ("matgraph.core._Bijection", "Bijection"),
    "IndexPool": ("matgraph.core._IndexPool", "IndexPool"),
    "Edge": ("matgraph.core._helpers", "Edge"),
    "GraphDiff": ("matgraph.core._GraphDiff", "GraphDiff"),
    # Errors
    "MatGraphError": ("matgraph.core._errors", "MatGraphError"),
    "InvalidArgumentError": ("matgraph.core._errors", "InvalidArgumentError"),
    "NotFoundError": ("matgraph.core._errors", "NotFoundError"),
    "DuplicateKeyError": ("matgraph.core._errors", "DuplicateKeyError"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("matgraph")
except PackageNotFoundError:
    __version__ = "0.0.0"
