from __future__ import annotations
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict

from colorama import just_fix_windows_console

from wndcg.logging.formatters import ColorFormatter, JSONFormatter, PlainFormatter

# Loggers that share the evaluator's handlers
PACKAGE_LOGGERS = ("wndcg", "WeightedNDCG", "InstanceParser", "MainOrchestrator")


class StructuredLogger:
    # Configure-once logger factory for the CLI and library code
    _instance: logging.Logger | None = None
    _configured: set[str] = set()

    @classmethod
    def get_logger(cls, name: str = "wndcg", config: Dict[str, Any] | None = None) -> logging.Logger:
        if cls._instance is not None:
            return logging.getLogger(name)

        cfg = config or {}
        level = getattr(logging, str(cfg.get("level", "INFO")).upper(), logging.INFO)
        log_to_file = cfg.get("log_to_file", False)
        log_dir = Path(cfg.get("log_dir", "logs"))
        file_name = cfg.get("file_name", "wndcg.log")
        rotate = cfg.get("rotate_logs", True)
        json_log = cfg.get("json_log", False)
        console_color = cfg.get("console_color", True)

        # Console output goes to stderr so stdout only carries the result
        console_handler = logging.StreamHandler(sys.stderr)
        if console_color:
            just_fix_windows_console()
            console_handler.setFormatter(ColorFormatter())
        else:
            console_handler.setFormatter(PlainFormatter())
        handlers: list[logging.Handler] = [console_handler]

        if log_to_file:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_path = log_dir / file_name
            if rotate:
                file_handler: logging.Handler = RotatingFileHandler(
                    file_path, maxBytes=5_000_000, backupCount=5, encoding="utf-8"
                )
            else:
                file_handler = logging.FileHandler(file_path, encoding="utf-8")
            file_handler.setFormatter(JSONFormatter() if json_log else PlainFormatter())
            handlers.append(file_handler)

        cls._configured = {*PACKAGE_LOGGERS, name}
        for logger_name in cls._configured:
            lg = logging.getLogger(logger_name)
            lg.setLevel(level)
            lg.propagate = False
            for h in handlers:
                lg.addHandler(h)

        cls._instance = logging.getLogger(name)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Detach handlers so the next get_logger() call reconfigures."""
        for logger_name in cls._configured:
            lg = logging.getLogger(logger_name)
            for h in list(lg.handlers):
                lg.removeHandler(h)
                h.close()
            lg.propagate = True
        cls._configured = set()
        cls._instance = None
