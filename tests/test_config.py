"""Tests for configuration functionality."""

from datetime import datetime
from pathlib import Path

import pytest

from commitguard.config import DEFAULT_CONFIG_FILENAME, Config


def test_default_config():
    """Test default configuration values."""
    config = Config()
    assert config.ignore_case is False
    assert config.continue_on_error is False
    assert config.types is None
    assert config.show_table is False
    assert config.always_log is False
    assert config.log_file is None


def test_config_load_nonexistent(tmp_path):
    """Test loading configuration when file doesn't exist."""
    config = Config.load(tmp_path)
    assert config.types is None


def test_config_load_and_save(tmp_path):
    """Test saving and loading configuration."""
    config = Config(
        ignore_case=True,
        continue_on_error=True,
        types="feat=scope;fix=;docs=",
        show_table=True,
        log_file="hooks.log",
    )

    config_path = config.save(tmp_path)
    assert config_path == tmp_path / DEFAULT_CONFIG_FILENAME
    assert "[commitguard]" in config_path.read_text()

    loaded_config = Config.load(tmp_path)

    assert loaded_config.ignore_case is True
    assert loaded_config.continue_on_error is True
    assert loaded_config.types == "feat=scope;fix=;docs="
    assert loaded_config.show_table is True
    assert loaded_config.log_file == "hooks.log"


def test_config_save_omits_unset_values(tmp_path):
    Config().save(tmp_path)
    text = (tmp_path / DEFAULT_CONFIG_FILENAME).read_text()
    assert "types" not in text
    assert "log_file" not in text


def test_config_load_invalid(tmp_path):
    """Test loading invalid configuration file."""
    config_path = tmp_path / DEFAULT_CONFIG_FILENAME

    config_path.write_text("invalid [ toml")

    # Should get default config
    config = Config.load(tmp_path)
    assert config.types is None


def test_config_load_rejects_unsafe_log_file(tmp_path):
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text(
        '[commitguard]\nlog_file = "../outside.log"\nignore_case = true\n'
    )
    config = Config.load(tmp_path)
    assert config.log_file is None
    assert config.ignore_case is True


def test_get_log_file_disabled():
    """Test get_log_file when logging is disabled."""
    config = Config(always_log=False, log_file=None)
    assert config.get_log_file() is None


def test_get_log_file_custom():
    """Test get_log_file with custom log file."""
    config = Config(always_log=False, log_file="custom.log")
    assert config.get_log_file() == Path("custom.log")


def test_get_log_file_unsafe():
    config = Config(log_file="/etc/passwd")
    assert config.get_log_file() is None


def test_get_log_file_always():
    """Test get_log_file with always_log enabled."""
    config = Config(always_log=True)
    log_file = config.get_log_file()

    assert log_file is not None
    assert log_file.name.startswith("commitguard-")
    assert log_file.suffix == ".log"

    timestamp_str = log_file.stem.split("-", 1)[1]
    try:
        datetime.strptime(timestamp_str, "%Y-%m-%d_%H-%M-%S")
    except ValueError:
        pytest.fail("Invalid timestamp format in log filename")


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("COMMIT_GUARD_IGNORE_CASE", "yes")
    monkeypatch.setenv("COMMIT_GUARD_CONTINUE_ON_ERROR", "0")
    monkeypatch.setenv("COMMIT_GUARD_TYPES", "feat=scope;fix=")
    config = Config()
    assert config.ignore_case is True
    assert config.continue_on_error is False
    assert config.types == "feat=scope;fix="


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("COMMIT_GUARD_TYPES", "feat=")
    assert Config(types="fix=").types == "fix="


def _long_types_spec(count: int = 200) -> str:
    return ";".join(f"type{i}=scope,body" for i in range(count))


def test_long_types_from_environment_are_kept(monkeypatch):
    spec = _long_types_spec()
    assert len(spec) > 1000
    monkeypatch.setenv("COMMIT_GUARD_TYPES", spec)
    assert Config().types == spec


def test_long_types_from_config_file_are_kept(tmp_path):
    spec = _long_types_spec()
    Config(types=spec).save(tmp_path)
    assert Config.load(tmp_path).types == spec


def test_long_log_file_is_still_capped(monkeypatch):
    monkeypatch.setenv("COMMIT_GUARD_LOG_FILE", "a" * 1500)
    assert len(Config().log_file) == 1000
