from __future__ import annotations
import sys
from pathlib import Path
from typing import Optional


def format_result(value: float, precision: Optional[int] = None) -> str:
    if precision is None:
        return repr(float(value))
    return f"{value:.{precision}f}"


def write_result(value: float, output_path: Optional[str | Path] = None, precision: Optional[int] = None) -> None:
    """Write the score to `output_path`, or stdout when no path is given."""
    text = format_result(value, precision) + "\n"
    if output_path is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return

    out = Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
