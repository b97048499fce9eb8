from wndcg.evaluation.errors import (
    DegenerateQueryError,
    InconsistentWeightError,
    InvalidRelevancyError,
    InvalidWeightError,
    MalformedRecordError,
    NDCGError,
    NonMonotonicQueryOrderError,
)
from wndcg.evaluation.instance import Instance, WeightedValue
from wndcg.evaluation.metrics.ndcg_metric import WeightedNDCGMetric, compute_weighted_ndcg

__version__ = "0.1.0"
