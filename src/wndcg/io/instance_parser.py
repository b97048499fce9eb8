from __future__ import annotations
import logging
import math
from pathlib import Path
from typing import Iterable, List, Optional

from wndcg.evaluation.errors import InvalidRelevancyError, InvalidWeightError, MalformedRecordError
from wndcg.evaluation.instance import Instance

logger = logging.getLogger("InstanceParser")

FIELDS = ("query_id", "weight", "relevancy", "score")


def _parse_float(raw: str, field: str, line_no: Optional[int]) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise MalformedRecordError(f"{field} is not a number: {raw!r}", line_no) from None
    if not math.isfinite(value):
        raise MalformedRecordError(f"{field} must be finite, got {raw!r}", line_no)
    return value


def parse_line(line: str, line_no: Optional[int] = None) -> Instance:
    """Parse one `query_id weight relevancy score` record."""
    values = line.split()
    if len(values) != len(FIELDS):
        raise MalformedRecordError(f"expected {len(FIELDS)} fields, got {len(values)}", line_no)

    try:
        query_id = int(values[0])
    except ValueError:
        raise MalformedRecordError(f"query_id is not an integer: {values[0]!r}", line_no) from None

    weight = _parse_float(values[1], "weight", line_no)
    relevancy = _parse_float(values[2], "relevancy", line_no)
    score = _parse_float(values[3], "score", line_no)

    if weight <= 0.0:
        raise InvalidWeightError(f"weight must be positive, got {weight}", line_no)
    if relevancy < 0.0:
        raise InvalidRelevancyError(f"relevancy must be non-negative, got {relevancy}", line_no)

    return Instance(query_id=query_id, weight=weight, relevancy=relevancy, score=score)


def parse_lines(lines: Iterable[str]) -> List[Instance]:
    """Parse records, skipping blank lines and `#` comments."""
    instances: List[Instance] = []
    for line_no, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        instances.append(parse_line(stripped, line_no))
    return instances


def load_instances(path: str | Path) -> List[Instance]:
    """Read and validate every record of a whitespace-separated instance file."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Input file not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedRecordError(f"{p} is not valid UTF-8 (byte offset {e.start})") from e

    instances = parse_lines(text.splitlines())
    logger.info(f"Loaded {len(instances)} instances from {p}")
    return instances
