# tests/unit/io/test_instance_parser.py
from __future__ import annotations
from pathlib import Path

import pytest

from wndcg.evaluation.errors import InvalidRelevancyError, InvalidWeightError, MalformedRecordError
from wndcg.evaluation.instance import Instance
from wndcg.io.instance_parser import load_instances, parse_line, parse_lines


def test_parse_valid_line():
    assert parse_line("3 0.82 1 -2.34") == Instance(query_id=3, weight=0.82, relevancy=1.0, score=-2.34)


def test_parse_line_tolerates_repeated_whitespace():
    assert parse_line("  1\t2.5   0  0.1 ").query_id == 1


@pytest.mark.parametrize("line", ["0 1.0 1", "0 1.0 1 0.5 9", ""])
def test_wrong_field_count(line):
    with pytest.raises(MalformedRecordError):
        parse_line(line)


@pytest.mark.parametrize("line", ["x 1.0 1 0.5", "0 abc 1 0.5", "0 1.0 1 nan", "0 1.0 inf 0.5", "1.5 1.0 1 0.5"])
def test_unparsable_fields(line):
    with pytest.raises(MalformedRecordError):
        parse_line(line)


@pytest.mark.parametrize("weight", ["0", "-0.5"])
def test_non_positive_weight(weight):
    with pytest.raises(InvalidWeightError):
        parse_line(f"0 {weight} 1 0.5", line_no=4)


def test_negative_relevancy():
    with pytest.raises(InvalidRelevancyError) as exc:
        parse_line("0 1.0 -1 0.5", line_no=9)
    assert exc.value.line_no == 9


def test_parse_lines_skips_blank_and_comments():
    lines = ["# qid weight rel score", "", "0 1.0 1 0.5", "   ", "1 2.0 0 0.1"]
    instances = parse_lines(lines)
    assert [i.query_id for i in instances] == [0, 1]


def test_parse_lines_reports_physical_line_number():
    with pytest.raises(MalformedRecordError) as exc:
        parse_lines(["0 1.0 1 0.5", "", "0 1.0 1"])
    assert exc.value.line_no == 3


def test_load_instances(tmp_path: Path):
    fp = tmp_path / "file.txt"
    fp.write_text("0 0.82 1 2.34\n0 1.23 0 2.58\n", encoding="utf-8")
    instances = load_instances(fp)
    assert len(instances) == 2
    assert instances[1].score == 2.58


def test_load_instances_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_instances(tmp_path / "missing.txt")


def test_load_instances_rejects_invalid_utf8(tmp_path: Path):
    fp = tmp_path / "binary.txt"
    fp.write_bytes(b"0 1.0 \xff 0.2\n")
    with pytest.raises(MalformedRecordError, match="not valid UTF-8"):
        load_instances(fp)
