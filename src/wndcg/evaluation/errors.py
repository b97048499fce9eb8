# src/wndcg/evaluation/errors.py
from __future__ import annotations
from typing import Optional


class NDCGError(ValueError):
    """Base class for every input violation that aborts an NDCG computation."""


# ============================================================
# Record-level errors (raised by the parser)
# ============================================================
class RecordError(NDCGError):
    def __init__(self, message: str, line_no: Optional[int] = None):
        self.line_no = line_no
        prefix = f"line {line_no}: " if line_no is not None else ""
        super().__init__(f"{prefix}{message}")


class MalformedRecordError(RecordError):
    """Wrong field count or unparsable numeric field."""


class InvalidWeightError(RecordError):
    """Weight is not strictly positive."""


class InvalidRelevancyError(RecordError):
    """Relevancy is negative."""


# ============================================================
# Dataset-level errors (raised by the aggregator)
# ============================================================
class NonMonotonicQueryOrderError(NDCGError):
    def __init__(self, previous_qid: int, next_qid: int, position: int):
        self.previous_qid = previous_qid
        self.next_qid = next_qid
        self.position = position
        super().__init__(
            f"Query ids must be non-decreasing: got {next_qid} after {previous_qid} "
            f"at position {position}"
        )


class DegenerateQueryError(NDCGError):
    def __init__(self, query_id: Optional[int]):
        self.query_id = query_id
        super().__init__(f"Ideal DCG is zero for query {query_id} (all relevancies are 0)")


class InconsistentWeightError(NDCGError):
    def __init__(self, query_id: Optional[int], weights: list[float]):
        self.query_id = query_id
        self.weights = weights
        super().__init__(f"Query {query_id} has inconsistent weights: {sorted(set(weights))}")
