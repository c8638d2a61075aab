import inspect
import time
from datetime import UTC, datetime
from functools import wraps

import numpy as np
import polars as pl

from ._GraphDiff import GraphDiff
from ._errors import NotFoundError


class History:
    # History and Timeline

    # Mutating methods to wrap. Add here if you add new mutators.
    _MUTATORS = (
        "add_vertex",
        "add_edge",
        "remove_vertex",
        "remove_edge",
        "clear",
    )

    # Event fields that carry vertex labels; any hashable, so no fixed dtype
    _LABEL_FIELDS = frozenset({"vertex", "source", "destination"})

    def _init_history(self, enabled: bool = True):
        self._history_enabled = bool(enabled)
        self._history = []  # list[dict]
        self._version = 0
        self._history_clock0 = time.perf_counter_ns()
        self._snapshots = []
        self._install_history_hooks()

    def _utcnow_iso(self) -> str:
        return datetime.now(UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _jsonify(self, x):
        # Make args/return JSON-safe & compact.

        if x is None or isinstance(x, (bool, int, float, str)):
            return x
        if isinstance(x, (set, frozenset)):
            return sorted((self._jsonify(v) for v in x), key=repr)
        if isinstance(x, (list, tuple)):
            return [self._jsonify(v) for v in x]
        if isinstance(x, dict):
            return {str(k): self._jsonify(v) for k, v in x.items()}
        # NumPy scalars
        if isinstance(x, (np.generic,)):
            return x.item()
        # anything else -> just a tag
        t = type(x).__name__
        return f"<<{t}>>"

    def _log_event(self, op: str, **fields):
        # version moves even when recording is paused; caches key off it
        self._version += 1
        if not self._history_enabled:
            return
        evt = {
            "version": self._version,
            "ts_utc": self._utcnow_iso(),  # ISO-8601 with Z
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        # sanitize
        for k, v in fields.items():
            evt[k] = self._jsonify(v)
        self._history.append(evt)

    def _log_mutation(self, name=None):
        def deco(fn):
            op = name or fn.__name__
            sig = inspect.signature(fn)

            @wraps(fn)
            def wrapper(*args, **kwargs):
                bound = sig.bind(*args, **kwargs)
                bound.apply_defaults()
                result = fn(*args, **kwargs)
                payload = {}
                # record all call args except 'self'
                for k, v in bound.arguments.items():
                    if k != "self":
                        payload[k] = v
                payload["result"] = result
                self._log_event(op, **payload)
                return result

            return wrapper

        return deco

    def _install_history_hooks(self):
        for name in self._MUTATORS:
            if hasattr(self, name):
                fn = getattr(self, name)
                # Avoid double-wrapping
                if getattr(fn, "__wrapped__", None) is None:
                    setattr(self, name, self._log_mutation(name)(fn))

    def history(self, as_df: bool = False):
        """Return the append-only mutation history.

        Parameters
        --
        as_df : bool, default False
            If True, return a Polars DF [DataFrame]; otherwise return a list of dicts.

        Returns
        ---
        list[dict] or polars.DataFrame
            Each event includes: 'version', 'ts_utc' (UTC ISO-8601), 'mono_ns'
            (monotonic nanoseconds since logger start), 'op', call snapshot fields,
            and 'result'.

        Notes
        -
        Ordering is guaranteed by 'version' and 'mono_ns'. The log lives in memory
        only. Calls that raise are not recorded. In the DataFrame form the
        label-valued fields ('vertex', 'source', 'destination') are Object
        columns, since labels of different types can share a column.

        """
        if as_df:
            return self._history_frame()
        return [dict(evt) for evt in self._history]

    def _history_frame(self):
        columns = {}
        for evt in self._history:
            for k in evt:
                columns.setdefault(k, None)
        series = []
        for k in columns:
            values = [evt.get(k) for evt in self._history]
            if k in self._LABEL_FIELDS:
                series.append(pl.Series(k, values, dtype=pl.Object))
            else:
                series.append(pl.Series(k, values, strict=False))
        return pl.DataFrame(series)

    def enable_history(self, flag: bool = True):
        """Enable or disable in-memory mutation logging.

        Parameters
        --
        flag : bool, default True
            When True, start/continue logging; when False, pause logging.

        """
        self._history_enabled = bool(flag)

    def clear_history(self):
        """Clear the in-memory mutation log. The version counter keeps going."""
        self._history.clear()

    def mark(self, label: str):
        """Insert a manual marker event (``op='mark'``) into the history."""
        self._log_event("mark", label=label)

    # Snapshots

    def snapshot(self, label=None):
        """Create a named snapshot of current graph state.

        Parameters
        --
        label : str, optional
            Human-readable label for snapshot (auto-generated if None)

        Returns
        ---
        dict
            ``label``, ``version``, ``timestamp``, ``counts``, plus the vertex
            set and the ``Edge`` set at this point.

        """
        if label is None:
            label = f"snapshot_{len(self._snapshots)}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"

        snapshot = {
            "label": label,
            "version": self._version,
            "timestamp": datetime.now(UTC).isoformat(),
            "counts": {
                "vertices": self.vertex_size(),
                "edges": self.edge_size(),
            },
            "vertices": self.vertices(),
            "edges": self.edges(),
        }

        self._snapshots.append(snapshot)
        return snapshot

    def list_snapshots(self):
        """Snapshot metadata (no vertex/edge sets)."""
        return [
            {
                "label": snap["label"],
                "timestamp": snap["timestamp"],
                "version": snap["version"],
                "counts": dict(snap["counts"]),
            }
            for snap in self._snapshots
        ]

    def diff(self, a, b=None):
        """Compare two snapshots or compare snapshot with current state.

        Parameters
        --
        a : str | dict | DirectedGraph
            First snapshot (label, snapshot dict, or graph instance)
        b : str | dict | DirectedGraph | None
            Second snapshot. If None, compare with current state.

        Returns
        ---
        GraphDiff

        """
        snap_a = self._resolve_snapshot(a)
        snap_b = self._resolve_snapshot(b) if b is not None else self._current_snapshot()

        return GraphDiff(snap_a, snap_b)

    def _resolve_snapshot(self, ref):
        """Resolve snapshot reference (label, dict, or graph)."""
        if isinstance(ref, dict):
            return ref
        elif isinstance(ref, str):
            for snap in self._snapshots:
                if snap["label"] == ref:
                    return snap
            raise NotFoundError(f"Snapshot '{ref}' not found")
        elif isinstance(ref, History):
            snap = ref._current_snapshot()
            snap["label"] = "external"
            return snap
        else:
            raise TypeError(f"Invalid snapshot reference: {type(ref)}")

    def _current_snapshot(self):
        return {
            "label": "current",
            "version": self._version,
            "vertices": self.vertices(),
            "edges": self.edges(),
        }
