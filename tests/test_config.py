"""Tests for user configuration."""

import pytest

from mdrun.lib.config import MdrunConfig, load_config, resolve_config_path
from mdrun.lib.errors import ConfigError


def test_missing_file_gives_defaults(tmp_path):
    config = MdrunConfig.load(tmp_path / "missing.yaml")
    assert config.languages == {}
    assert config.doc_names == []


def test_load_languages_and_doc_names(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        """
languages:
  deno:
    program: deno
    args: [deno, eval, $CODE]
  lua:
    program: lua
doc_names:
  - TASKS.md
"""
    )
    config = MdrunConfig.load(path)
    assert config.doc_names == ["TASKS.md"]

    registry = config.build_registry()
    assert registry.get("deno").build_argv("1") == ["deno", "eval", "1"]
    # args default to "<program> $CODE"
    assert registry.get("lua").build_argv("print(1)") == ["lua", "print(1)"]
    assert "sh" in registry


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert MdrunConfig.load(path) == MdrunConfig()


def test_invalid_shape_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("languages:\n  deno: 3\n")
    with pytest.raises(ConfigError):
        MdrunConfig.load(path)


def test_non_mapping_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        MdrunConfig.load(path)


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("languages: [unclosed\n")
    with pytest.raises(ConfigError):
        MdrunConfig.load(path)


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "mine.yaml"
    path.write_text("doc_names: [X.md]\n")
    monkeypatch.setenv("MDRUN_CONFIG", str(path))
    assert resolve_config_path() == path
    assert load_config().doc_names == ["X.md"]


def test_default_config_path(monkeypatch, tmp_path):
    monkeypatch.delenv("MDRUN_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert resolve_config_path() == tmp_path / ".mdrun.yaml"


def test_unreadable_path_raises(tmp_path):
    with pytest.raises(ConfigError) as exc:
        MdrunConfig.load(tmp_path)
    assert str(tmp_path) in exc.value.message
