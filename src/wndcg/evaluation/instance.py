# src/wndcg/evaluation/instance.py
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Instance:
    """One scored item of a ranked-retrieval dataset."""
    query_id: int
    weight: float
    relevancy: float
    score: float


@dataclass(frozen=True)
class WeightedValue:
    """Pair of (value, weight) used for per-query results and running totals."""
    value: float = 0.0
    weight: float = 0.0

    def __add__(self, other: WeightedValue) -> WeightedValue:
        return WeightedValue(self.value + other.value, self.weight + other.weight)
