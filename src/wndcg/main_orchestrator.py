from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional

from wndcg.config.config_loader import ConfigLoader
from wndcg.config.settings import DEFAULT_SETTINGS, EvaluationSettings, settings_from_config
from wndcg.evaluation.errors import NDCGError
from wndcg.evaluation.metrics.ndcg_metric import WeightedNDCGMetric
from wndcg.io.instance_parser import load_instances
from wndcg.io.result_writer import write_result
from wndcg.logging.logger import StructuredLogger

DEFAULT_CONFIG_PATH = "configs/config.yaml"

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_MISSING_FILE = 2


class MainOrchestrator:
    """Loads instances, computes the weighted NDCG and writes the result."""

    def __init__(self, settings: EvaluationSettings = DEFAULT_SETTINGS):
        self.settings = settings
        self.logger = StructuredLogger.get_logger("MainOrchestrator", settings.logging.as_dict())
        self.metric = WeightedNDCGMetric(require_uniform_weights=settings.require_uniform_weights)

    # ------------------------------------------------------------------
    @classmethod
    def from_config(cls, config_path: Optional[str], overrides: Dict[str, Any] | None = None) -> MainOrchestrator:
        """Build settings from YAML (when present) plus CLI overrides."""
        settings = DEFAULT_SETTINGS
        if config_path is not None:
            settings = settings_from_config(ConfigLoader(config_path).config)

        overrides = dict(overrides or {})
        log_level = overrides.pop("log_level", None)
        if log_level:
            settings = replace(settings, logging=replace(settings.logging, level=log_level))
        if overrides:
            settings = replace(settings, **overrides)
        return cls(settings)

    # ------------------------------------------------------------------
    def run(self) -> float:
        """Compute the score for the configured input and emit it."""
        s = self.settings
        self.logger.info(f"Evaluating {s.input_path} | strict_weights={s.require_uniform_weights}")

        instances = load_instances(s.input_path)
        value = self.metric.compute(instances)

        write_result(value, s.output_path, s.precision)
        if s.output_path:
            self.logger.info(f"Result written → {s.output_path}")
        return value


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


# ----------------------------------------------------------------------
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="wndcg",
        description="Weighted NDCG of a ranked-retrieval dataset "
                    "(one 'query_id weight relevancy score' record per line).",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Instance file sorted by query id (default: config input_path or file.txt)",
    )
    parser.add_argument("--output", type=str, default=None, help="Write the result here instead of stdout")
    parser.add_argument(
        "--precision",
        type=_non_negative_int,
        default=None,
        help="Number of decimal digits in the output",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help=f"YAML configuration file (default: {DEFAULT_CONFIG_PATH} when it exists)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    parser.add_argument(
        "--strict-weights",
        action="store_true",
        help="Fail when instances of one query carry different weights",
    )
    return parser.parse_args(argv)


def _overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.input is not None:
        overrides["input_path"] = args.input
    if args.output is not None:
        overrides["output_path"] = args.output
    if args.precision is not None:
        overrides["precision"] = args.precision
    if args.strict_weights:
        overrides["require_uniform_weights"] = True
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return overrides


# ----------------------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    config_path = args.config
    if config_path is None and Path(DEFAULT_CONFIG_PATH).exists():
        config_path = DEFAULT_CONFIG_PATH

    try:
        orchestrator = MainOrchestrator.from_config(config_path, _overrides_from_args(args))
    except FileNotFoundError as e:
        logging.getLogger("MainOrchestrator").error(str(e))
        return EXIT_MISSING_FILE
    except ValueError as e:
        logging.getLogger("MainOrchestrator").error(f"Invalid configuration: {e}")
        return EXIT_INVALID_INPUT

    try:
        orchestrator.run()
    except FileNotFoundError as e:
        orchestrator.logger.error(str(e))
        return EXIT_MISSING_FILE
    except NDCGError as e:
        orchestrator.logger.error(f"{type(e).__name__}: {e}")
        return EXIT_INVALID_INPUT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
