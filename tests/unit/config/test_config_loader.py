# tests/unit/config/test_config_loader.py
from __future__ import annotations
from pathlib import Path

import pytest

from wndcg.config.config_loader import ConfigLoader, load_config
from wndcg.config.settings import DEFAULT_SETTINGS, settings_from_config


@pytest.fixture
def project(tmp_path: Path) -> Path:
    cfg_dir = tmp_path / "configs"
    cfg_dir.mkdir()
    (cfg_dir / "config.yaml").write_text(
        "evaluation:\n"
        "  input_path: ${PROJECT_ROOT}/data/file.txt\n"
        "  precision: 4\n"
        "  unknown_key: 1\n"
        "logging:\n"
        "  level: DEBUG\n",
        encoding="utf-8",
    )
    return tmp_path


def test_placeholders_expand_to_project_root(project: Path):
    cfg = load_config(str(project / "configs" / "config.yaml"))
    assert Path(cfg["evaluation"]["input_path"]) == (project / "data" / "file.txt").resolve()


def test_missing_config_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader(str(tmp_path / "nope.yaml"))


def test_master_config_is_overridden(project: Path):
    master = project / "master.yaml"
    master.write_text("evaluation:\n  precision: 2\n  require_uniform_weights: true\n", encoding="utf-8")
    cfg = load_config(str(project / "configs" / "config.yaml"), master_path=str(master))
    assert cfg["evaluation"]["precision"] == 4
    assert cfg["evaluation"]["require_uniform_weights"] is True


def test_empty_config_gets_default_sections(tmp_path: Path):
    fp = tmp_path / "empty.yaml"
    fp.write_text("", encoding="utf-8")
    loader = ConfigLoader(str(fp))
    assert loader.get("evaluation") == {}
    assert loader.get("logging") == {}
    assert loader.raw == {}


def test_non_mapping_config_rejected(tmp_path: Path):
    fp = tmp_path / "list.yaml"
    fp.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        ConfigLoader(str(fp))


def test_settings_from_config(project: Path):
    settings = settings_from_config(load_config(str(project / "configs" / "config.yaml")))
    assert settings.precision == 4
    assert settings.output_path is None
    assert settings.logging.level == "DEBUG"
    assert settings.logging.log_to_file is False


def test_settings_defaults():
    assert settings_from_config({}) == DEFAULT_SETTINGS
    assert DEFAULT_SETTINGS.input_path == "file.txt"


def test_invalid_yaml_rejected(tmp_path: Path):
    fp = tmp_path / "broken.yaml"
    fp.write_text("evaluation: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid YAML"):
        ConfigLoader(str(fp))
