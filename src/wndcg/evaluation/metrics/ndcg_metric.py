from __future__ import annotations
import logging
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from wndcg.evaluation.errors import (
    DegenerateQueryError,
    InconsistentWeightError,
    NonMonotonicQueryOrderError,
)
from wndcg.evaluation.instance import Instance, WeightedValue
from wndcg.evaluation.interfaces.i_metric import IMetric

logger = logging.getLogger("WeightedNDCG")


# ----------------------------------------------------------------------
def calculate_dcg(instances: Sequence[Instance], order: Optional[Sequence[int]] = None) -> WeightedValue:
    """Discounted cumulative gain of `instances` in the given order.

    `order` is an index permutation into `instances`; without it the
    sequence is taken as already ranked. Gain is 2**relevancy - 1 and the
    discount for rank r (starting at 1) is log2(r + 1).
    """
    if order is None:
        order = range(len(instances))
    ranked = [instances[i] for i in order]
    if not ranked:
        return WeightedValue(0.0, 0.0)

    relevancy = np.fromiter((ins.relevancy for ins in ranked), dtype=np.float64, count=len(ranked))
    weights = np.fromiter((ins.weight for ins in ranked), dtype=np.float64, count=len(ranked))

    # 2**rel - 1 without cancellation for tiny relevancies
    gains = np.expm1(relevancy * np.log(2.0))
    discounts = np.log2(np.arange(len(ranked), dtype=np.float64) + 2.0)
    return WeightedValue(float(np.sum(gains / discounts)), float(np.sum(weights)))


# ----------------------------------------------------------------------
def _descending_order(instances: Sequence[Instance], key: str) -> List[int]:
    # Stable sort: ties keep their input order
    return sorted(range(len(instances)), key=lambda i: -getattr(instances[i], key))


# ----------------------------------------------------------------------
def calculate_query_ndcg(instances: Sequence[Instance], query_id: Optional[int] = None) -> WeightedValue:
    """Weighted NDCG of a single query group.

    Returns (weight_total * DCG / IDCG, weight_total). The caller's sequence
    is left untouched; both rankings are index permutations.
    """
    if not instances:
        raise ValueError("calculate_query_ndcg requires a non-empty query group")

    idcg = calculate_dcg(instances, _descending_order(instances, "relevancy"))
    if idcg.value == 0.0:
        raise DegenerateQueryError(query_id)

    dcg = calculate_dcg(instances, _descending_order(instances, "score"))
    return WeightedValue(dcg.weight * dcg.value / idcg.value, dcg.weight)


# ----------------------------------------------------------------------
def iter_query_groups(instances: Sequence[Instance]) -> Iterator[Tuple[int, Sequence[Instance]]]:
    """Yield (query_id, group) for every maximal run of equal query ids.

    Raises NonMonotonicQueryOrderError as soon as a decreasing id is seen.
    """
    if not instances:
        return

    start = 0
    curr_qid = instances[0].query_id
    for pos in range(1, len(instances)):
        next_qid = instances[pos].query_id
        if next_qid < curr_qid:
            raise NonMonotonicQueryOrderError(curr_qid, next_qid, pos)
        if next_qid != curr_qid:
            yield curr_qid, instances[start:pos]
            start = pos
            curr_qid = next_qid
    yield curr_qid, instances[start:]


# ----------------------------------------------------------------------
def _check_uniform_weights(query_id: int, group: Sequence[Instance]) -> None:
    weights = [ins.weight for ins in group]
    if len(set(weights)) > 1:
        raise InconsistentWeightError(query_id, weights)


# ----------------------------------------------------------------------
def compute_weighted_ndcg(instances: Sequence[Instance], require_uniform_weights: bool = False) -> float:
    """Weighted average NDCG over all query groups.

    `instances` must be sorted by query id (non-decreasing). Empty input
    scores 0.0. With `require_uniform_weights`, every instance of a query
    must carry the same weight; otherwise weights are summed per group.
    """
    if not instances:
        logger.debug("No instances supplied, returning 0.0")
        return 0.0

    total = WeightedValue()
    n_groups = 0
    for query_id, group in iter_query_groups(instances):
        if require_uniform_weights:
            _check_uniform_weights(query_id, group)
        total = total + calculate_query_ndcg(group, query_id)
        n_groups += 1

    logger.debug(f"Aggregated {n_groups} queries from {len(instances)} instances")
    return total.value / total.weight


class WeightedNDCGMetric(IMetric):
    """Weighted Normalized Discounted Cumulative Gain over a whole dataset."""

    def __init__(self, require_uniform_weights: bool = False):
        self.require_uniform_weights = require_uniform_weights

    def compute(self, instances: Sequence[Instance]) -> float:
        value = compute_weighted_ndcg(instances, require_uniform_weights=self.require_uniform_weights)
        logger.info(f"Weighted NDCG = {value:.6f} over {len(instances)} instances")
        return value

    def describe(self) -> Dict[str, str]:
        return {
            "name": "WeightedNDCG",
            "type": "intrinsic",
            "description": "Weight-proportional average of per-query NDCG with exponential gain "
                           "and logarithmic rank discount.",
        }
