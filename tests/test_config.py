import json
from pathlib import Path

import pytest

from textindent import config


def _use_temp_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    app_dir = tmp_path / "confdir"
    cfg_path = app_dir / "config.json"
    monkeypatch.setattr(config, "APP_DIR", str(app_dir))
    monkeypatch.setattr(config, "CONFIG_PATH", str(cfg_path))
    return cfg_path


def test_load_config_without_file_returns_defaults(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    cfg_path = _use_temp_config(monkeypatch, tmp_path)

    loaded = config.load_config()

    assert loaded == config.DEFAULTS
    assert loaded is not config.DEFAULTS
    assert not cfg_path.parent.exists()


def test_load_config_overlays_file_without_rewriting_it(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    cfg_path = _use_temp_config(monkeypatch, tmp_path)
    cfg_path.parent.mkdir(parents=True)
    original = json.dumps({"indent_size": 3})
    cfg_path.write_text(original, encoding="utf-8")

    assert config.load_config() == {"indent_size": 3, "indent_char": " "}
    assert cfg_path.read_text(encoding="utf-8") == original
    assert sorted(p.name for p in cfg_path.parent.iterdir()) == ["config.json"]


@pytest.mark.parametrize("content", ["{not:json", "[]"])
def test_load_config_ignores_unusable_file(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, content: str
) -> None:
    cfg_path = _use_temp_config(monkeypatch, tmp_path)
    cfg_path.parent.mkdir(parents=True)
    cfg_path.write_text(content, encoding="utf-8")

    assert config.load_config() == config.DEFAULTS
    assert cfg_path.read_text(encoding="utf-8") == content


@pytest.mark.parametrize(
    "payload",
    [
        {"indent_size": -3},
        {"indent_size": True},
        {"indent_char": "."},
        {"indent_char": "  "},
    ],
)
def test_load_config_rejects_invalid_values(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, payload: dict
) -> None:
    cfg_path = _use_temp_config(monkeypatch, tmp_path)
    cfg_path.parent.mkdir(parents=True)
    cfg_path.write_text(json.dumps(payload), encoding="utf-8")

    assert config.load_config() == config.DEFAULTS


def test_load_config_accepts_tab_indent(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    cfg_path = _use_temp_config(monkeypatch, tmp_path)
    cfg_path.parent.mkdir(parents=True)
    cfg_path.write_text(json.dumps({"indent_char": "\t", "extra": 1}), encoding="utf-8")

    assert config.load_config() == {"indent_size": 2, "indent_char": "\t", "extra": 1}
