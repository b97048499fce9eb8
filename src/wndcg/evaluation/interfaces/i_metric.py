from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, Sequence

from wndcg.evaluation.instance import Instance


class IMetric(ABC):
    """Contract for dataset-level metrics computed over a flat instance sequence."""

    @abstractmethod
    def compute(self, instances: Sequence[Instance]) -> float:
        """Reduce the whole dataset to a single score."""
        pass

    @abstractmethod
    def describe(self) -> Dict[str, str]:
        """Return metadata about the metric (name, type, short description)."""
        pass

    def __call__(self, instances: Sequence[Instance]) -> float:
        return self.compute(instances)
