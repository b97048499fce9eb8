from __future__ import annotations
import yaml
from pathlib import Path
from typing import Any, Dict


class ConfigLoader:
    """
    YAML configuration loader for the NDCG evaluator.
    - Supports ${PROJECT_ROOT} / ${base_dir} placeholders in path values
    - Can inherit from a master config (phase file overrides master)
    - Provides empty defaults for the known sections
    """

    SECTIONS = ("evaluation", "logging")

    def __init__(self, path: str, master_path: str | None = None):
        self.path = Path(path)
        if not self.path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.path}")

        cfg = self._read_yaml(self.path)

        master_cfg: Dict[str, Any] = {}
        if master_path:
            master_file = Path(master_path)
            if master_file.exists():
                master_cfg = self._read_yaml(master_file)

        self._raw = self._merge_dicts(master_cfg, cfg)
        self.project_root = self._detect_project_root()
        self.config = self._expand_vars(self._raw)

        for section in self.SECTIONS:
            if not isinstance(self.config.get(section), dict):
                self.config[section] = {}

    # ------------------------------------------------------------------
    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Top-level YAML in {path} must be a mapping")
        return data

    # ------------------------------------------------------------------
    def _detect_project_root(self) -> Path:
        """Infer project root (the directory above 'configs')."""
        p = self.path.resolve()
        if "configs" in p.parts:
            idx = p.parts.index("configs")
            return Path(*p.parts[:idx])
        return p.parent

    # ------------------------------------------------------------------
    def _merge_dicts(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge dicts, with override taking precedence."""
        merged = base.copy()
        for k, v in override.items():
            if isinstance(v, dict) and isinstance(merged.get(k), dict):
                merged[k] = self._merge_dicts(merged[k], v)
            else:
                merged[k] = v
        return merged

    # ------------------------------------------------------------------
    def _expand_single_var(self, value: Any) -> Any:
        """Replace placeholders only when explicitly present."""
        if not isinstance(value, str) or "${" not in value:
            return value

        for ph in ("${PROJECT_ROOT}", "${project_root}", "${BASE_DIR}", "${base_dir}"):
            value = value.replace(ph, str(self.project_root))
        return str(Path(value).resolve())

    # ------------------------------------------------------------------
    def _expand_vars(self, data: Any) -> Any:
        if isinstance(data, dict):
            return {k: self._expand_vars(v) for k, v in data.items()}
        if isinstance(data, list):
            return [self._expand_vars(v) for v in data]
        return self._expand_single_var(data)

    # ------------------------------------------------------------------
    def get(self, key: str, default: Any = None) -> Any:
        return self.config.get(key, default)

    @property
    def raw(self) -> Dict[str, Any]:
        """Return unexpanded raw YAML structure."""
        return self._raw


# ----------------------------------------------------------------------
def load_config(path: str, master_path: str | None = None) -> Dict[str, Any]:
    """Convenience function: directly load and expand a config dictionary."""
    return ConfigLoader(path, master_path).config
