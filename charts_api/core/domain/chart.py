"""Chart entity: one metric's accumulated series.

Labels and values are parallel lists. Values only grow by addition while
records are merged; sort_labels() is the single permutation applied at
the end of a run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Tuple

from ..errors import InternalConsistencyError, ValueCoercionError
from .record import GeneralMetric
from .values import coerce_int, numeric_label

SUMMARY_CHART_ID = 0
SUMMARY_CHART_TITLE = "Tick Classification"


@dataclass
class Chart:
    """A titled series of (label, value) pairs."""

    id: int
    title: str
    labels: List[str] = field(default_factory=list)
    data: List[int] = field(default_factory=list)

    # label -> position, kept in step with `labels`
    _index: Dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.labels) != len(self.data):
            raise ValueError(f"chart {self.title!r}: {len(self.labels)} labels for {len(self.data)} values")
        self._index = {label: i for i, label in enumerate(self.labels)}

    @property
    def is_summary(self) -> bool:
        return self.id == SUMMARY_CHART_ID

    def __len__(self) -> int:
        return len(self.labels)

    def pairs(self) -> List[Tuple[str, int]]:
        return list(zip(self.labels, self.data))

    def add_line(self, metric: GeneralMetric) -> List[str]:
        """Merge a metric's points into this chart.

        Existing labels accumulate, new labels are appended. A metric for a
        different title is ignored. Returns the labels whose values were
        dropped because they were not numbers.
        """
        if metric.title != self.title:
            return []

        dropped: List[str] = []
        for label, raw in metric.points.items():
            try:
                value = coerce_int(raw)
            except ValueCoercionError:
                dropped.append(label)
                continue
            self._accumulate(label, value)
        return dropped

    def add_point(self, index: int, title: str, value: int) -> None:
        """Add `value` into the slot at `index`, padding empty slots as needed."""
        if index < 0:
            raise IndexError(f"slot index must be >= 0, got {index}")
        self.pad_to(index + 1)

        previous = self.labels[index]
        if previous != title:
            if self._index.get(previous) == index:
                del self._index[previous]
            self.labels[index] = title
            self._index[title] = index
        self.data[index] += value

    def pad_to(self, size: int) -> None:
        while len(self.labels) < size:
            self.labels.append("")
            self.data.append(0)

    def sort_labels(self) -> None:
        """Reorder labels by numeric value (ascending, stable) and carry values along."""
        labels = sorted(self.labels, key=numeric_label)

        data: List[int] = []
        for label in labels:
            idx = self._index.get(label)
            if idx is None or self.labels[idx] != label:
                raise InternalConsistencyError(f"label {label!r} lost from chart {self.title!r}")
            data.append(self.data[idx])

        self.labels = labels
        self.data = data
        self._index = {label: i for i, label in enumerate(labels)}

    def total(self) -> int:
        return sum(self.data)

    def _accumulate(self, label: str, value: int) -> None:
        idx = self._index.get(label)
        if idx is None:
            self._index[label] = len(self.labels)
            self.labels.append(label)
            self.data.append(value)
        else:
            self.data[idx] += value

    @classmethod
    def from_pairs(cls, id: int, title: str, pairs: Iterable[Tuple[str, int]]) -> "Chart":
        """Build a chart by merging (label, value) pairs in order."""
        chart = cls(id=id, title=title)
        for label, value in pairs:
            chart._accumulate(label, value)
        return chart
