"""Tests for settings and ``aoc.toml`` loading."""

from pathlib import Path

import pytest

from aocprep.config import AocConfig, Settings, env_file, load_aoc_config
from aocprep.errors import AocPrepError, ErrorKind


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "aoc.toml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_valid_config(tmp_path):
    path = _write(tmp_path, 'year = "2021"\nsession = "abc123"\n')
    config = load_aoc_config(path)
    assert config == AocConfig(year="2021", session="abc123")


def test_extra_keys_ignored(tmp_path):
    path = _write(tmp_path, 'year = "2022"\nsession = "x"\nlanguage = "rust"\n')
    assert load_aoc_config(path).year == "2022"


def test_missing_file_is_config_error(tmp_path):
    path = tmp_path / "aoc.toml"
    with pytest.raises(AocPrepError) as excinfo:
        load_aoc_config(path)
    assert excinfo.value.kind is ErrorKind.CONFIG
    assert str(path) in str(excinfo.value)


def test_non_utf8_file_is_config_error(tmp_path):
    path = tmp_path / "aoc.toml"
    path.write_bytes(b'year = "2021"\nsession = "\xff"\n')
    with pytest.raises(AocPrepError) as excinfo:
        load_aoc_config(path)
    assert excinfo.value.kind is ErrorKind.CONFIG
    assert str(path) in str(excinfo.value)


def test_invalid_toml_is_config_error(tmp_path):
    path = _write(tmp_path, "year = \n")
    with pytest.raises(AocPrepError) as excinfo:
        load_aoc_config(path)
    assert excinfo.value.kind is ErrorKind.CONFIG
    assert str(path) in str(excinfo.value)


def test_missing_session_is_config_error(tmp_path):
    path = _write(tmp_path, 'year = "2021"\n')
    with pytest.raises(AocPrepError) as excinfo:
        load_aoc_config(path)
    assert excinfo.value.kind is ErrorKind.CONFIG
    assert "session" in str(excinfo.value)


def test_non_string_year_is_config_error(tmp_path):
    path = _write(tmp_path, 'year = [2021]\nsession = "x"\n')
    with pytest.raises(AocPrepError) as excinfo:
        load_aoc_config(path)
    assert "year" in str(excinfo.value)


def test_repr_hides_session():
    config = AocConfig(year="2021", session="very-secret")
    assert "very-secret" not in repr(config)
    assert "very-secret" not in str(config)


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("AOC_SITE_ROOT", "http://localhost:8000")
    monkeypatch.setenv("AOC_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("AOC_DAY_PREFIX", "d")
    s = Settings()
    assert s.site_root == "http://localhost:8000"
    assert s.request_timeout == 5.0
    assert s.day_prefix == "d"
    assert s.config_filename == "aoc.toml"


def test_log_level_setting(monkeypatch):
    monkeypatch.setenv("AOC_LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"
    monkeypatch.delenv("AOC_LOG_LEVEL")
    assert Settings().log_level == "INFO"


def test_env_file_found_from_day_folder(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("AOC_SITE_ROOT=http://localhost:8000\n", encoding="utf-8")
    day = tmp_path / "day07"
    day.mkdir()
    monkeypatch.chdir(day)
    assert Path(env_file()).resolve() == (tmp_path / ".env").resolve()
