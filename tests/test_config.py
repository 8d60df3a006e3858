"""
Tests for YAML config loading and logging setup.
"""

import logging

import pytest

from config import (
    LOG_LEVEL,
    TABLE_DELIMITER,
    PathfindingConfig,
    apply_logging_config,
    configure_logging,
    load_config,
)


def test_load_config_overrides_defaults(tmp_path):
    path = tmp_path / "pathfinding.yml"
    path.write_text("delimiter: '|'\nlog_level: DEBUG\n")

    cfg = load_config(path)

    assert cfg == PathfindingConfig(delimiter="|", log_level="DEBUG")


def test_load_config_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")

    cfg = load_config(path)

    assert cfg.delimiter == TABLE_DELIMITER
    assert cfg.log_level == LOG_LEVEL


def test_load_config_rejects_unknown_keys(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("delimeter: ','\n")

    with pytest.raises(ValueError, match="delimeter"):
        load_config(path)


def test_configure_logging_accepts_lowercase(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

    configure_logging("debug")

    assert calls["level"] == "DEBUG"
    assert "%(name)s" in calls["format"]


def test_load_config_rejects_null_values(tmp_path):
    path = tmp_path / "null.yml"
    path.write_text("delimiter:\n")

    with pytest.raises(ValueError, match="delimiter"):
        load_config(path)


def test_apply_logging_config_passes_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))

    apply_logging_config(PathfindingConfig(log_level="warning"))

    assert calls["level"] == "WARNING"
