from pathlib import Path

import pytest

from lib.config.home_loader import HomeConfig, load_home_config
from lib.config.yaml_loader import load_yaml


def test_missing_file_gives_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("HOME_CONFIG", raising=False)
    cfg = load_home_config(tmp_path / "absent.yaml")
    assert (cfg.host, cfg.port, cfg.log_level) == ("0.0.0.0", 8080, "INFO")


def test_overrides(tmp_path):
    path = tmp_path / "home.yaml"
    path.write_text("server:\n  host: 127.0.0.1\n  port: 9090\nlogging:\n  level: debug\n")
    cfg = load_home_config(path)
    assert (cfg.host, cfg.port, cfg.log_level) == ("127.0.0.1", 9090, "DEBUG")
    assert cfg.raw["server"]["port"] == 9090


def test_partial_file_keeps_defaults(tmp_path):
    path = tmp_path / "home.yaml"
    path.write_text("server:\n  port: 8181\n")
    cfg = load_home_config(path)
    assert cfg.port == 8181
    assert cfg.host == HomeConfig().host


def test_env_var_selects_file(tmp_path, monkeypatch):
    path = tmp_path / "env.yaml"
    path.write_text("server:\n  port: 7070\n")
    monkeypatch.setenv("HOME_CONFIG", str(path))
    assert load_home_config().port == 7070


def test_shipped_config_matches_defaults():
    cfg = load_home_config(Path(__file__).parents[2] / "config" / "home.yaml")
    assert cfg.port == 8080


@pytest.mark.parametrize(
    "text",
    [
        "server:\n  port: 0\n",
        "server:\n  port: 70000\n",
        "server:\n  port: eighty\n",
        "logging:\n  level: loud\n",
    ],
)
def test_invalid_values_rejected(tmp_path, text):
    path = tmp_path / "home.yaml"
    path.write_text(text)
    with pytest.raises(ValueError):
        load_home_config(path)


def test_yaml_must_be_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ValueError):
        load_yaml(path)
    empty = tmp_path / "empty.yaml"
    empty.write_text("")
    assert load_yaml(empty) == {}
