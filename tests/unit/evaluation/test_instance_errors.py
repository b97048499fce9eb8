from wndcg.evaluation.errors import (
    DegenerateQueryError,
    InvalidWeightError,
    MalformedRecordError,
    NDCGError,
    NonMonotonicQueryOrderError,
)
from wndcg.evaluation.instance import WeightedValue


def test_weighted_value_addition():
    total = WeightedValue() + WeightedValue(1.5, 2.0) + WeightedValue(0.5, 1.0)
    assert total == WeightedValue(2.0, 3.0)


def test_errors_share_base_class():
    for err in (
        MalformedRecordError("bad"),
        InvalidWeightError("bad"),
        NonMonotonicQueryOrderError(2, 1, 5),
        DegenerateQueryError(3),
    ):
        assert isinstance(err, NDCGError)
        assert isinstance(err, ValueError)


def test_record_error_mentions_line_number():
    err = MalformedRecordError("expected 4 fields, got 3", line_no=12)
    assert err.line_no == 12
    assert str(err).startswith("line 12:")
