# src/wndcg/config/settings.py
from __future__ import annotations
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

# ============================================================
# Logging Settings
# ============================================================
@dataclass(frozen=True)
class LoggingSettings:
    level: str = "INFO"
    log_to_file: bool = False
    log_dir: str = "logs"
    file_name: str = "wndcg.log"
    rotate_logs: bool = True
    json_log: bool = False
    console_color: bool = True

    def as_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

# ============================================================
# Evaluation Settings
# ============================================================
@dataclass(frozen=True)
class EvaluationSettings:
    input_path: str = "file.txt"
    output_path: Optional[str] = None   # None -> stdout
    precision: Optional[int] = None     # None -> full float repr
    require_uniform_weights: bool = False
    logging: LoggingSettings = field(default_factory=LoggingSettings)

DEFAULT_SETTINGS = EvaluationSettings()


def _pick(cls: type, section: Dict[str, Any]) -> Dict[str, Any]:
    # Keep only keys the dataclass knows about
    known = {f.name for f in fields(cls)}
    return {k: v for k, v in (section or {}).items() if k in known}


def settings_from_config(cfg: Dict[str, Any]) -> EvaluationSettings:
    """Build typed settings from a loaded config dict; unknown keys are ignored."""
    eval_section = _pick(EvaluationSettings, cfg.get("evaluation", {}))
    eval_section.pop("logging", None)
    log_section = _pick(LoggingSettings, cfg.get("logging", {}))
    return EvaluationSettings(logging=LoggingSettings(**log_section), **eval_section)
