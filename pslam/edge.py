"""Scene graph edge with fused relationship predictions."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import ClassVar, Mapping

_MAX_WEIGHT = 100.0
_NEW_WEIGHT = 1.0


@dataclass
class Edge:
    """Directed edge between two segment nodes holding per-label probabilities."""

    NONE: ClassVar[str] = "none"
    SAME: ClassVar[str] = "same part"

    node_from: int = 0
    node_to: int = 0
    label_prop: dict[str, float] = field(default_factory=dict)
    cls_weight: dict[str, float] = field(default_factory=dict)
    label: str = "none"
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)
    _label_lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )

    def copy(self) -> Edge:
        """Copy the endpoints and predictions; the label starts again at ``none``."""
        return Edge(
            node_from=self.node_from,
            node_to=self.node_to,
            label_prop=dict(self.label_prop),
            cls_weight=dict(self.cls_weight),
        )

    def get_label(self) -> str:
        with self._label_lock:
            return self.label

    def update_prediction(self, prop: Mapping[str, float], fusion: bool) -> None:
        """Merge new label probabilities and pick the most probable label."""
        with self._lock:
            if not prop:
                return
            for name, new_value in prop.items():
                if name not in self.label_prop:
                    self.label_prop[name] = new_value
                    self.cls_weight[name] = 1.0
                elif fusion:
                    old_value = self.label_prop[name]
                    old_weight = self.cls_weight[name]
                    total = old_weight + _NEW_WEIGHT
                    self.label_prop[name] = (
                        old_value * old_weight + new_value * _NEW_WEIGHT
                    ) / total
                    self.cls_weight[name] = min(_MAX_WEIGHT, total)
                else:
                    self.label_prop[name] = new_value

            if not self.label_prop:
                return
            ordered = sorted(self.label_prop.items())
            max_prop = ordered[0][1]
            best = ""
            for name, value in ordered:
                if value >= max_prop:
                    max_prop = value
                    best = name
            with self._label_lock:
                self.label = best