"""Tests for config loading and validation."""

import textwrap
from pathlib import Path

import pytest
from pydantic import ValidationError

from assertkit import Assert, LoggingLogger, ResultCollector
from assertkit.config import AssertkitConfig, LoggingConfig, load_config


@pytest.fixture()
def tmp_yaml(tmp_path):
    """Helper that writes YAML content to a temp file and returns its path."""

    def _write(content: str) -> Path:
        p = tmp_path / "assertkit.yaml"
        p.write_text(textwrap.dedent(content))
        return p

    return _write


def test_defaults():
    cfg = AssertkitConfig()
    assert cfg.deep_equal.cycle_guard is False
    assert cfg.source.max_string == 60
    assert cfg.logging.debug_file is None
    assert cfg.logging.verbose is False
    assert cfg.logging.logger_name == "assertkit"


def test_load_empty_file_gives_defaults(tmp_yaml):
    cfg = load_config(tmp_yaml(""))
    assert cfg == AssertkitConfig()


def test_load_full_config(tmp_yaml, tmp_path):
    path = tmp_yaml("""\
        deep_equal:
          cycle_guard: true
        source:
          max_string: 80
          max_level: 3
          max_items: 5
        logging:
          debug_file: logs/assertions.log
          verbose: true
          logger_name: assertkit_suite
    """)
    cfg = load_config(path)
    assert cfg.deep_equal.cycle_guard is True
    assert cfg.source.max_string == 80
    assert cfg.source.max_level == 3
    assert cfg.source.max_items == 5
    assert cfg.logging.verbose is True
    assert cfg.logging.logger_name == "assertkit_suite"
    # relative paths resolve against the config file
    assert cfg.logging.debug_file == str((tmp_path / "logs" / "assertions.log").resolve())


def test_unknown_keys_rejected(tmp_yaml):
    path = tmp_yaml("""\
        deep_equal:
          cycle_guard: true
          max_depth: 10
    """)
    with pytest.raises(ValidationError):
        load_config(path)


def test_source_limits_validated():
    with pytest.raises(ValidationError):
        AssertkitConfig(source={"max_string": 1})


def test_debug_file_expands_env_vars(monkeypatch, tmp_path):
    monkeypatch.setenv("ASSERTKIT_LOG_DIR", str(tmp_path))
    cfg = LoggingConfig(debug_file="${ASSERTKIT_LOG_DIR}/debug.log")
    assert cfg.debug_file == f"{tmp_path}/debug.log"


def test_debug_file_env_var_default(monkeypatch):
    monkeypatch.delenv("ASSERTKIT_UNSET_DIR", raising=False)
    cfg = LoggingConfig(debug_file="${ASSERTKIT_UNSET_DIR:-/var/log}/debug.log")
    assert cfg.debug_file == "/var/log/debug.log"


def test_debug_file_missing_env_var(monkeypatch):
    monkeypatch.delenv("ASSERTKIT_UNSET_DIR", raising=False)
    with pytest.raises(ValidationError, match="missing environment variable"):
        LoggingConfig(debug_file="${ASSERTKIT_UNSET_DIR}/debug.log")


def test_logger_name_must_be_namespaced():
    with pytest.raises(ValidationError):
        LoggingConfig(logger_name="other")


# --- Assert.from_config ---


def test_from_config_with_explicit_logger():
    collector = ResultCollector()
    cfg = AssertkitConfig(deep_equal={"cycle_guard": True})
    assert_ = Assert.from_config(cfg, logger=collector)
    assert assert_.logger is collector

    a = []
    a.append(a)
    b = []
    b.append(b)
    assert_.deep_equal(a, b)
    assert collector.all_passed


def test_from_config_builds_logging_logger(tmp_path):
    debug_file = tmp_path / "out" / "assertions.log"
    cfg = AssertkitConfig(
        logging={"debug_file": str(debug_file), "logger_name": "assertkit_from_config"},
        source={"max_items": 2},
    )
    assert_ = Assert.from_config(cfg)
    assert isinstance(assert_.logger, LoggingLogger)
    assert assert_.logger.renderer.maxlist == 2

    assert_.equal(1, 2, "one is two")
    assert "FAIL AssertionError : one is two" in debug_file.read_text()


def test_from_config_without_debug_file():
    assert_ = Assert.from_config(AssertkitConfig())
    assert assert_.logger.logger.name == "assertkit"
